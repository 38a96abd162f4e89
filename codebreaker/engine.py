"""
Pure game logic (no HTTP, no storage).
We compute two feedback numbers for each guess:
- exact: how many pegs are right color, right place
- color_only: how many of the remaining pegs have a color that also appears
  in the remaining secret pegs (each peg on either side counts at most once)

Duplicates are allowed in both the secret and the guess.
"""

from dataclasses import dataclass
from typing import Sequence

from .types import COLORS, Color


@dataclass(frozen=True)
class Feedback:
    exact: int
    color_only: int


def _check_code(code: Sequence[Color], colors: int, name: str) -> None:
    for color in code:
        if isinstance(color, bool) or not isinstance(color, int) or not 0 <= color < colors:
            raise ValueError(f"{name} holds {color!r}; colors must be ints in [0, {colors}).")


def evaluate(guess: Sequence[Color], secret: Sequence[Color], colors: int = COLORS) -> Feedback:
    """
    Example:
      secret = [0, 0, 1, 2]
      guess  = [0, 1, 0, 3]
      exact      = 1  (position 0)
      color_only = 2  (one 0 and one 1 left on both sides)

    Both codes must have the same non-zero length and only hold colors in
    [0, colors). Breaking that is a caller bug and raises ValueError.
    """

    # 0. Validate the contract
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")
    _check_code(secret, colors, "secret")
    _check_code(guess, colors, "guess")

    # 1. Exact matches; everything else goes into per-color counts
    exact = 0
    secret_counts = [0] * colors
    guess_counts = [0] * colors
    for g, s in zip(guess, secret):
        if g == s:
            exact += 1
        else:
            guess_counts[g] += 1
            secret_counts[s] += 1

    # 2. Overlap of what is left is the sum of the smaller count per color
    color_only = sum(min(g, s) for g, s in zip(guess_counts, secret_counts))

    return Feedback(exact=exact, color_only=color_only)


def is_win(guess: Sequence[Color], secret: Sequence[Color]) -> bool:
    """
    Win = all pegs match in order.
    Works for any length, as long as lengths match.
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        return False
    return all(g == s for g, s in zip(guess, secret))
