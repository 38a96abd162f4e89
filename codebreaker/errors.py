"""
Why a guess was turned down.

Rejections are returned to the caller as values (see round.SubmitResult),
they are never raised across the round boundary.
"""

from dataclasses import dataclass
from enum import Enum


class Rejection(str, Enum):
    INCOMPLETE_GUESS = "incomplete_guess"
    INVALID_COLOR = "invalid_color"
    ROUND_OVER = "round_over"
    TRIES_EXHAUSTED = "tries_exhausted"


@dataclass(frozen=True)
class ValidationError:
    reason: Rejection
    message: str

    @classmethod
    def incomplete_guess(cls, pegs: int) -> "ValidationError":
        return cls(Rejection.INCOMPLETE_GUESS, f"Fill all {pegs} pegs before submitting.")

    @classmethod
    def invalid_color(cls, position: int, value: object, colors: int) -> "ValidationError":
        return cls(
            Rejection.INVALID_COLOR,
            f"Peg {position} holds {value!r}; colors must be between 0 and {colors - 1}.",
        )

    @classmethod
    def round_over(cls, status: str) -> "ValidationError":
        return cls(Rejection.ROUND_OVER, f"Round already {status}. Start a new game.")

    @classmethod
    def tries_exhausted(cls) -> "ValidationError":
        return cls(Rejection.TRIES_EXHAUSTED, "No tries left. Start a new game.")
