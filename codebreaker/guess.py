"""
The guess a player is still putting together.

A guess starts as PEGS empty slots. The player drops colors into slots in any
order, and it can only be submitted once every slot is filled.
"""

from typing import List, Optional

from .errors import ValidationError
from .types import COLORS, PEGS, Code, Color, GuessEntries


def check_guess(entries: GuessEntries, pegs: int = PEGS, colors: int = COLORS) -> Optional[ValidationError]:
    """
    Returns None when `entries` is a submittable guess, else the reason it is not.
    Missing pegs win over bad colors so the player is told to fill the row first.
    """
    if len(entries) != pegs or any(entry is None for entry in entries):
        return ValidationError.incomplete_guess(pegs)

    for position, entry in enumerate(entries):
        if isinstance(entry, bool) or not isinstance(entry, int) or not 0 <= entry < colors:
            return ValidationError.invalid_color(position, entry, colors)

    return None


class GuessBuilder:
    def __init__(self, pegs: int = PEGS, colors: int = COLORS) -> None:
        self.pegs = pegs
        self.colors = colors
        self._slots: List[Optional[Color]] = [None] * pegs

    def place(self, position: int, color: Color) -> None:
        """Put `color` at `position`, replacing whatever was there."""
        if not 0 <= position < self.pegs:
            raise IndexError(f"Position must be between 0 and {self.pegs - 1}.")
        if isinstance(color, bool) or not isinstance(color, int) or not 0 <= color < self.colors:
            raise ValueError(f"Color must be between 0 and {self.colors - 1}.")
        self._slots[position] = color

    def remove(self, position: int) -> None:
        if not 0 <= position < self.pegs:
            raise IndexError(f"Position must be between 0 and {self.pegs - 1}.")
        self._slots[position] = None

    def clear(self) -> None:
        self._slots = [None] * self.pegs

    @property
    def entries(self) -> List[Optional[Color]]:
        return list(self._slots)

    @property
    def is_complete(self) -> bool:
        return all(slot is not None for slot in self._slots)

    def build(self) -> Code:
        if not self.is_complete:
            raise ValueError(f"Fill all {self.pegs} pegs before submitting.")
        return list(self._slots)
