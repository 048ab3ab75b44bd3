"""
Pure game logic (no I/O, no storage).
For each guess we compute two feedback numbers:
- black: how many positions are exactly correct (right digit, right place)
- white: how many other guessed digits appear in the secret but in another place

Duplicates are allowed in both secret and guess; a secret digit is never
counted twice.
"""

from typing import NamedTuple

from .types import Code


class ScoreResult(NamedTuple):
    black: int
    white: int


def score_guess(secret: Code, guess: Code) -> ScoreResult:
    """
    Example:
      secret = [1, 2, 2, 3]
      guess  = [2, 2, 3, 3]
      black = 2  (positions 1 and 3)
      white = 1  (the leading 2 claims the secret's other 2)

    Every secret digit ends up either matched exactly (black), claimed by a
    guess digit somewhere else (white), or left unclaimed. We count the
    unclaimed ones and get white by elimination.
    """

    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    # 1. How many times each digit occurs in the secret
    size = max(max(secret), max(guess)) + 1
    occurrences = [0] * size
    for digit in secret:
        occurrences[digit] += 1

    # 2. Working copy: secret digits no guess digit has claimed yet
    remaining = list(occurrences)

    black = 0
    for i in range(n):
        if guess[i] == secret[i]:
            black += 1

        # Claim one occurrence of this value, whether or not the position
        # matched. Once a value's pool is empty, extra copies in the guess
        # claim nothing.
        if remaining[guess[i]] > 0:
            remaining[guess[i]] -= 1

    unaccounted = sum(remaining)
    white = n - black - unaccounted

    return ScoreResult(black, white)
