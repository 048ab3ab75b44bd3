"""
In-memory store
Holds the running game sessions for the HTTP API, keyed by id.
Each session owns its own secret, counters and history; the store only
guards the id -> session map. Nothing survives a restart.

Reads hand back a GameSnapshot built while the lock is held, so a response
never mixes two play-throughs (or a game deleted halfway through a request).
"""

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Dict, List, Optional, Tuple
from uuid import uuid4

from .config import GameConfig
from .engine import ScoreResult
from .history import HistoryEntry
from .random_client import Generator, generate_secret
from .session import GameSession
from .types import Code, GameStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSnapshot:
    game_id: str
    config: GameConfig
    max_attempts: int
    attempts_used: int
    attempts_left: int
    status: GameStatus
    history: List[HistoryEntry]  # newest first
    secret: Optional[Code] = None  # only once the game is over

    @classmethod
    def of(cls, game_id: str, session: GameSession) -> "GameSnapshot":
        return cls(
            game_id=game_id,
            config=session.config,
            max_attempts=session.max_attempts,
            attempts_used=session.attempts_used,
            attempts_left=session.attempts_left,
            status=session.status,
            history=session.history.entries_newest_first(),
            secret=session.reveal_secret() if session.is_over else None,
        )

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"


class GameStore:
    def __init__(self) -> None:
        self._games: Dict[str, GameSession] = {}
        self._lock = RLock()

    def create(self, config: GameConfig, generator: Generator = generate_secret) -> Tuple[str, GameSession]:
        new_id = str(uuid4())
        session = GameSession(config, generator=generator)
        with self._lock:
            self._games[new_id] = session
        logger.info("Created game %s (length=%d, max digit=%d)", new_id, config.code_length, config.max_digit)
        return new_id, session

    def snapshot(self, game_id: str) -> Optional[GameSnapshot]:
        with self._lock:
            session = self._games.get(game_id)
            if session is None:
                return None
            return GameSnapshot.of(game_id, session)

    def guess(self, game_id: str, attempt: Code) -> Optional[Tuple[ScoreResult, GameSnapshot]]:
        # InvalidGuessError / GameOverError propagate to the caller
        with self._lock:
            session = self._games.get(game_id)
            if session is None:
                return None
            score = session.submit_guess(attempt)
            return score, GameSnapshot.of(game_id, session)

    def replay(self, game_id: str) -> Optional[GameSnapshot]:
        with self._lock:
            session = self._games.get(game_id)
            if session is None:
                return None
            session.replay()
            return GameSnapshot.of(game_id, session)

    def discard(self, game_id: str) -> bool:
        with self._lock:
            return self._games.pop(game_id, None) is not None
