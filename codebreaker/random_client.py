"""
Secret code generators.

- generate_secret: local secure random, one independent draw per position
- fetch_code: asks random.org for the digits; if anything goes wrong (no internet,
  timeout, bad response) we fall back to generate_secret so the game still works.

Both draw from the inclusive range 0..max_digit, the same range guesses are
validated against.
"""

import logging
from secrets import randbelow
from typing import Callable

import requests

from .config import GameConfig
from .exceptions import ConfigurationError
from .types import Code

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"

Generator = Callable[[GameConfig], Code]


def generate_secret(config: GameConfig, draw: Callable[[int], int] = randbelow) -> Code:
    # draw(n) gives a number between 0 and n - 1, so ask for max_digit + 1
    digits = []
    for _ in range(config.code_length):
        digits.append(draw(config.max_digit + 1))
    return digits


def fetch_code(config: GameConfig, timeout_seconds: float = 3.0) -> Code:
    params = {
        "num": config.code_length,  # how many numbers we want
        "min": 0,                   # smallest allowed number
        "max": config.max_digit,    # largest allowed number (inclusive)
        "col": 1,                   # one number per line
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)
        response.raise_for_status()

        # The body looks like:
        #   0\n3\n1\n2\n
        digits = [int(line) for line in response.text.splitlines() if line.strip()]

        if len(digits) != config.code_length:
            raise ValueError(
                f"random.org returned {len(digits)} values, expected {config.code_length}."
            )
        for digit in digits:
            if digit < 0 or digit > config.max_digit:
                raise ValueError(f"random.org number out of range 0..{config.max_digit}.")

        return digits

    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org unavailable (%s); using local generator", exc)
        return generate_secret(config)


def get_generator(source: str = "local", timeout_seconds: float = 3.0) -> Generator:
    """Pick a generator by the name used in CODEBREAKER_SECRET_SOURCE / --source."""
    if source == "local":
        return generate_secret
    if source == "random.org":
        return lambda config: fetch_code(config, timeout_seconds)
    raise ConfigurationError(f"Unknown secret source {source!r}; use 'local' or 'random.org'.")
