"""
Explicit validation & Pydantic models
- Define the structure of API requests and responses.
- Guess contents are NOT checked here: the round decides what is incomplete
  or out of range so the player gets the same reasons everywhere.
"""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field

from .round import Attempt, RoundSnapshot

Status = Literal["in_progress", "won", "lost"]


# 1. Fixed game settings, so a front-end can draw the board
class ConfigOut(BaseModel):
    pegs: int = Field(..., description="Pegs per code")
    colors: int = Field(..., description="Number of colors; pegs hold 0..colors-1")
    max_tries: int = Field(..., description="Attempts before the round is lost")
    palette: List[str] = Field(..., description="Display color for each color id")


# 2. Player's guess; unfilled pegs are sent as null
class GuessRequest(BaseModel):
    # Any, so true, "0" or 1.5 reach the round as-is and come back as invalid_color
    guess: List[Any] = Field(
        ..., description="One entry per peg, each a color id, or null if not placed yet."
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": [0, 1, 2, 3]},
                {"guess": [0, None, 2, 3]},  # rejected: incomplete
            ]
        }
    }


# 3. One scored attempt
class AttemptOut(BaseModel):
    number: int = Field(..., description="1-based attempt number")
    guess: List[int] = Field(..., description="The submitted guess")
    exact: int = Field(..., description="Right color, right position")
    color_only: int = Field(..., description="Right color, wrong position")

    @classmethod
    def from_attempt(cls, attempt: Attempt) -> "AttemptOut":
        return cls(
            number=attempt.number,
            guess=list(attempt.guess),
            exact=attempt.feedback.exact,
            color_only=attempt.feedback.color_only,
        )


# 4. Overall state of a round; the secret is never part of it
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    status: Status = Field(..., description="Current state of the round")
    attempts: List[AttemptOut] = Field(..., description="All guesses so far with feedback, oldest first")
    attempt_count: int = Field(..., description="Guesses made so far")
    tries_remaining: int = Field(..., description="How many guesses remain")
    max_tries: int = Field(..., description="Attempt cap for the round")

    @classmethod
    def from_snapshot(cls, game_id: str, snapshot: RoundSnapshot) -> "GameState":
        return cls(
            game_id=game_id,
            status=snapshot.status,
            attempts=[AttemptOut.from_attempt(a) for a in snapshot.attempts],
            attempt_count=snapshot.attempt_count,
            tries_remaining=snapshot.tries_remaining,
            max_tries=snapshot.max_tries,
        )


# 5. Result of an accepted guess
class GuessResponse(BaseModel):
    attempt: AttemptOut = Field(..., description="The attempt just recorded")
    status: Status = Field(..., description="State of the round after this guess")
    tries_remaining: int = Field(..., description="How many guesses remain")
    message: str = Field(..., description="Status line for the player")
    note: Optional[str] = Field(None, description="Extra note once the round is over (ex. 'Game won. No more guesses allowed.')")
    secret: Optional[List[int]] = Field(None, description="The secret code (only revealed once the round is over)")


# 6. Body of a rejected guess (HTTP 400/409 detail)
class RejectionOut(BaseModel):
    reason: Literal["incomplete_guess", "invalid_color", "round_over", "tries_exhausted"]
    message: str


# 7. End-of-round reveal
class SecretOut(BaseModel):
    secret: List[int] = Field(..., description="The secret code")


# 8. Scoreboard
class StatsOut(BaseModel):
    games_started: int = Field(..., description="Rounds started since the server came up")
    games_won: int = Field(..., description="Rounds won")
    games_lost: int = Field(..., description="Rounds lost")

    current_streak: int = Field(..., description="Current consecutive wins")
    best_streak: int = Field(..., description="Best consecutive wins")

    average_guesses_to_win: Optional[float] = Field(
        None, description="Average number of guesses used in wins"
    )
    fastest_win_attempts: Optional[int] = Field(
        None, description="Fewest guesses taken to win a round"
    )
