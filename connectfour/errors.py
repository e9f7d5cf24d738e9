"""
errors.py - Exception hierarchy for the Connect Four engine
"""


class ConnectFourError(Exception):
    """Base class for every error raised by the engine."""

    pass


class ConfigurationError(ConnectFourError):
    """Raised when a game is configured with invalid parameters."""

    pass


class OutOfRangeError(ConnectFourError, IndexError):
    """Raised when a column or row index lies outside the board."""

    pass


class InvalidArgumentError(ConnectFourError, ValueError):
    """Raised when a required argument is missing or malformed."""

    pass


class ColumnFullError(ConnectFourError):
    """Raised when a token is placed into a column with no empty cell."""

    pass


class StrategyError(ConnectFourError):
    """Raised when an automated strategy cannot produce a legal move."""

    pass
