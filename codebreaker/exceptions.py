"""
Errors raised by the game core.

Malformed player input is normally caught earlier by the validation helpers;
these exceptions mean a caller broke a precondition of the core.
"""


class CodebreakerError(Exception):
    """Base class for every error the game raises on purpose."""


class ConfigurationError(CodebreakerError, ValueError):
    """A code length, digit range or generator name is outside what the game supports."""


class InvalidGuessError(CodebreakerError, ValueError):
    """
    The guess does not fit the game: wrong number of digits, or a digit
    outside 0..max_digit.
    """


class GameOverError(CodebreakerError, RuntimeError):
    """
    The session is not in a state that allows the call, e.g. guessing after
    the game was won or lost, or asking for the secret mid-game.
    """
