"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the client and server.
- Defines the structure of API requests and responses.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .config import MAX_CODE_LENGTH, MAX_MAX_DIGIT, MIN_CODE_LENGTH, MIN_MAX_DIGIT
from .store import GameSnapshot

# 1. Settings the player picks when starting a game
class NewGameRequest(BaseModel):
    code_length: int = Field(
        4, ge=MIN_CODE_LENGTH, le=MAX_CODE_LENGTH, description="How many digits the secret has"
    )
    max_digit: int = Field(
        6, ge=MIN_MAX_DIGIT, le=MAX_MAX_DIGIT, description="Highest digit that can appear (digits start at 0)"
    )

# 2. Response when a new game is started (secret is never returned)
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    code_length: int = Field(..., description="Digits per guess")
    max_digit: int = Field(..., description="Highest digit allowed in a guess")
    max_attempts: int = Field(..., description="Guess budget for this game")
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Current state of the game")

# 3. Validates player's guess
class GuessRequest(BaseModel):
    guess: List[int] = Field(..., description="One digit per position, each between 0 and max_digit.")

    @field_validator("guess")
    @classmethod
    def validate_digits(cls, guess_list: List[int]) -> List[int]:
        """
        Only checks there are no negative digits.
        Length and upper bound depend on the game, so the session checks those.
        """
        for digit in guess_list:
            if digit < 0:
                raise ValueError("Digits cannot be negative.")
        return guess_list

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": [0, 1, 2, 3]},
                {"guess": [6, 6, 0, 1, 2]},
            ]
        }
    }

# 4. One line of guess history
class HistoryEntryOut(BaseModel):
    guess: List[int] = Field(..., description="The player's guess")
    black: int = Field(..., description="Right digit in the right position")
    white: int = Field(..., description="Right digit in the wrong position")

# 5. Overall state of the game; history is newest first and holds the last 5 guesses
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    code_length: int
    max_digit: int
    max_attempts: int
    attempts_used: int
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Current state of the game")
    history: List[HistoryEntryOut] = Field(..., description="Latest guesses, newest first")
    secret: Optional[List[int]] = Field(None, description="The secret code (only once the game is over)")

# 6. Result of a guess
class GuessResponse(BaseModel):
    black: int
    white: int
    attempts_left: int = Field(..., description="How many guesses remain")
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Current state of the game")
    history: List[HistoryEntryOut] = Field(..., description="Latest guesses, newest first")
    secret: Optional[List[int]] = Field(None, description="The secret code (only revealed if game is over)")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Game lost. No more guesses.')")


def history_out(snapshot: GameSnapshot) -> List[HistoryEntryOut]:
    return [
        HistoryEntryOut(guess=list(entry.guess), black=entry.black, white=entry.white)
        for entry in snapshot.history
    ]


def game_state(snapshot: GameSnapshot) -> GameState:
    return GameState(
        game_id=snapshot.game_id,
        code_length=snapshot.config.code_length,
        max_digit=snapshot.config.max_digit,
        max_attempts=snapshot.max_attempts,
        attempts_used=snapshot.attempts_used,
        attempts_left=snapshot.attempts_left,
        status=snapshot.status,
        history=history_out(snapshot),
        secret=snapshot.secret,
    )
