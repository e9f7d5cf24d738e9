"""
connectfour.interfaces - User interfaces for Connect Four

This package contains presentation layers that drive a GameEngine and
listen to its events.
"""

# Don't import anything here to avoid circular imports
__all__ = []
