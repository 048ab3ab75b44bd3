"""
Labels for clarity.
"""

from typing import List, Literal

Digit = int  # 0 -> max_digit
Code = List[Digit]  # secret or guess, one digit per position
GameStatus = Literal["in_progress", "won", "lost"]
