"""
connectfour - Connect Four game engine

This package provides a configurable Connect Four engine: a board with
gravity, win and draw detection, an observer protocol for presentation
layers, human and automated seats, and a terminal interface.
"""

# Version number
__version__ = '0.2.0'
