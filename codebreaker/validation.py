"""
Validation boundary between the player's raw text and the game core.

Nothing here raises for bad input. Each parser returns Parsed(value, error):
  Parsed([1, 2, 3], None)               -> ok, use value
  Parsed(None, "Wrong input. Try again.") -> show error, ask again
The caller (CLI or API) owns the retry loop.
"""

import re
from typing import Any, List, NamedTuple, Optional

from .config import GameConfig
from .types import Code


class Parsed(NamedTuple):
    value: Any
    error: Optional[str]

    @property
    def ok(self) -> bool:
        return self.error is None


WRONG_INPUT = "Wrong input. Try again."


def parse_config_value(text: str, low: int, high: int) -> Parsed:
    try:
        value = int(text.strip())
    except ValueError:
        return Parsed(None, WRONG_INPUT)
    if value < low or value > high:
        return Parsed(None, f"Value must be between {low} and {high}.")
    return Parsed(value, None)


def parse_digit(text: str, max_digit: int) -> Parsed:
    return parse_config_value(text, 0, max_digit)


def check_guess(guess: List[int], config: GameConfig) -> Optional[str]:
    """Return an error message if the guess does not fit the game, else None."""
    if len(guess) != config.code_length:
        return f"Guess must have exactly {config.code_length} digits for this game."
    for digit in guess:
        if digit < 0 or digit > config.max_digit:
            return f"Each digit must be between 0 and {config.max_digit} inclusive."
    return None


def parse_guess(text: str, config: GameConfig) -> Parsed:
    """
    Accepts "1 2 3 4", "1,2,3,4" or "1234".
    Unseparated input is read one character per digit (digits never exceed 9).
    """
    stripped = text.strip()
    if not stripped:
        return Parsed(None, WRONG_INPUT)

    if re.search(r"[\s,]", stripped):
        tokens = [t for t in re.split(r"[\s,]+", stripped) if t]
    else:
        tokens = list(stripped)

    guess: Code = []
    for token in tokens:
        if not token.isdecimal():
            return Parsed(None, WRONG_INPUT)
        guess.append(int(token))

    error = check_guess(guess, config)
    if error:
        return Parsed(None, error)
    return Parsed(guess, None)
