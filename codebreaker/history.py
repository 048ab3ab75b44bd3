"""
Guess history shown to the player.

Only the latest few guesses are kept: a fixed array of slots used as a ring,
with `front` pointing at the oldest entry. Pushing into a full buffer drops
the oldest entry first.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .engine import ScoreResult
from .types import Digit

HISTORY_CAPACITY = 5


@dataclass(frozen=True)
class HistoryEntry:
    guess: Tuple[Digit, ...]
    score: ScoreResult

    @property
    def black(self) -> int:
        return self.score.black

    @property
    def white(self) -> int:
        return self.score.white


class HistoryBuffer:
    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self._capacity = capacity
        self._slots: List[Optional[HistoryEntry]] = [None] * capacity
        self._front = 0
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def is_full(self) -> bool:
        return self._length >= self._capacity

    def push(self, entry: HistoryEntry) -> None:
        if self.is_full():
            self._evict_oldest()
        back = (self._front + self._length) % self._capacity
        self._slots[back] = entry
        self._length += 1

    def _evict_oldest(self) -> None:
        self._slots[self._front] = None
        self._front = (self._front + 1) % self._capacity
        self._length -= 1

    def clear(self) -> None:
        self._slots = [None] * self._capacity
        self._front = 0
        self._length = 0

    def entries_newest_first(self) -> List[HistoryEntry]:
        entries = []
        for offset in range(self._length - 1, -1, -1):
            entries.append(self._slots[(self._front + offset) % self._capacity])
        return entries

