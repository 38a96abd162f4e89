"""
Labels and fixed game constants.
"""

from typing import List, Literal, Optional, Sequence

Color = int  # 0 -> COLORS - 1
Code = List[Color]
GuessEntries = Sequence[Optional[Color]]  # unfilled pegs are None
RoundStatus = Literal["in_progress", "won", "lost"]

PEGS = 4        # pegs per code
COLORS = 6      # palette size
MAX_TRIES = 10  # attempts before a forced loss

# Display colors for the presentation layer, indexed by Color
PALETTE = [
    "#ef4444",  # red
    "#f97316",  # orange
    "#facc15",  # yellow
    "#4ade80",  # green
    "#60a5fa",  # blue
    "#a78bfa",  # purple
]
