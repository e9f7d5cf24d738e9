"""
connectfour.ai - Automated players for Connect Four

This package contains the strategies an automated seat can use to pick its
next column.
"""

from connectfour.ai.simple import SimpleStrategy, DEFAULT_STRATEGY

__all__ = ['SimpleStrategy', 'DEFAULT_STRATEGY']
