"""
One play-through of the game.

States:
  in_progress -> won   (guess matched every position)
  in_progress -> lost  (guess budget used up without a match)
Both end states are final; only initialize()/replay() starts over.
"""

import logging
from typing import Optional

from .config import GameConfig
from .engine import ScoreResult, score_guess
from .exceptions import GameOverError, InvalidGuessError
from .history import HistoryBuffer, HistoryEntry
from .random_client import Generator, generate_secret
from .types import Code, GameStatus
from .validation import check_guess

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(
        self,
        config: GameConfig,
        generator: Generator = generate_secret,
        history: Optional[HistoryBuffer] = None,
    ) -> None:
        self._generator = generator
        self.history = history if history is not None else HistoryBuffer()
        self.initialize(config)

    def initialize(self, config: GameConfig) -> None:
        self.config = config
        self.max_attempts = config.max_attempts
        self._secret: Code = list(self._generator(config))
        self.attempts_used = 0
        self.history.clear()
        self.status: GameStatus = "in_progress"
        logger.debug(
            "New game: length=%d, digits 0..%d, %d attempts",
            config.code_length, config.max_digit, self.max_attempts,
        )

    def replay(self) -> None:
        """Play again with the same configuration and a fresh secret."""
        self.initialize(self.config)

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempts_used

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"

    def submit_guess(self, guess: Code) -> ScoreResult:
        if self.is_over or self.attempts_used >= self.max_attempts:
            raise GameOverError(f"Game {self.status}. No more guesses allowed.")

        error = check_guess(guess, self.config)
        if error:
            raise InvalidGuessError(error)

        score = score_guess(self._secret, guess)
        self.history.push(HistoryEntry(guess=tuple(guess), score=score))
        self.attempts_used += 1
        logger.debug(
            "Guess %d/%d %s -> black=%d white=%d",
            self.attempts_used, self.max_attempts, guess, score.black, score.white,
        )

        # A match on the last allowed attempt is still a win
        if score.black == self.config.code_length:
            self.status = "won"
            logger.info("Game won in %d attempt(s)", self.attempts_used)
        elif self.attempts_used == self.max_attempts:
            self.status = "lost"
            logger.info("Game lost after %d attempts", self.attempts_used)

        return score

    def reveal_secret(self) -> Code:
        if not self.is_over:
            raise GameOverError("The secret is only revealed once the game is over.")
        return list(self._secret)
