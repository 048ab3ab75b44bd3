"""
Single place to:
- Hold the per-game settings (GameConfig: code length + highest digit)
- Derive the guess budget from them
- Read runtime settings (APP_ENV, secret source, log level) from env
- Set up logging for the CLI and the API

Why: the game core never reads globals; callers build a GameConfig and pass it in.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Allowed ranges the player can pick from
MIN_CODE_LENGTH = 3
MAX_CODE_LENGTH = 6
MIN_MAX_DIGIT = 3
MAX_MAX_DIGIT = 9

LOG_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"


@dataclass(frozen=True)
class GameConfig:
    code_length: int
    max_digit: int

    def __post_init__(self) -> None:
        if not MIN_CODE_LENGTH <= self.code_length <= MAX_CODE_LENGTH:
            raise ConfigurationError(
                f"Code length must be between {MIN_CODE_LENGTH} and {MAX_CODE_LENGTH}."
            )
        if not MIN_MAX_DIGIT <= self.max_digit <= MAX_MAX_DIGIT:
            raise ConfigurationError(
                f"Max digit must be between {MIN_MAX_DIGIT} and {MAX_MAX_DIGIT}."
            )

    @property
    def max_attempts(self) -> int:
        """
        Fixed guess budget:
          2 * ((max_digit + 1) // 2 + code_length // 2)
        e.g. length 4, digits 0..6 -> 2 * (3 + 2) = 10
        """
        return 2 * ((self.max_digit + 1) // 2 + self.code_length // 2)


@dataclass(frozen=True)
class Settings:
    app_env: str = "local"
    secret_source: str = "local"
    log_level: str = "INFO"
    random_timeout: float = 3.0


def load_settings() -> Settings:
    # dev convenience; a deployed process gets real env vars
    load_dotenv()

    raw_timeout = os.getenv("CODEBREAKER_RANDOM_TIMEOUT", "3.0")
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigurationError(
            f"CODEBREAKER_RANDOM_TIMEOUT must be a number, got {raw_timeout!r}."
        )

    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        secret_source=os.getenv("CODEBREAKER_SECRET_SOURCE", "local"),
        log_level=os.getenv("CODEBREAKER_LOG_LEVEL", "INFO").upper(),
        random_timeout=timeout,
    )


def setup_logging(level: str = "INFO", verbose: bool = False) -> logging.Logger:
    """
    Attach one console handler to the package logger.

    Calling it twice does not stack handlers (the CLI may run several games
    in one process, and the API module may be reloaded by the dev server).
    """
    logger = logging.getLogger("codebreaker")
    logger.setLevel(logging.DEBUG if verbose else level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    # requests logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return logger
