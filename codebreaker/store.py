"""
In-memory store
Holds one RoundController per player session, for the life of the process.
Nothing is written anywhere; restarting the server forgets every round.
"""

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Dict, Optional, Tuple
from uuid import uuid4

from .random_client import local_code
from .round import CodeSource, RoundController, RoundSnapshot, SubmitResult
from .types import Code, GuessEntries

logger = logging.getLogger(__name__)


# Session scoreboard
@dataclass
class Stats:
    games_started: int = 0
    games_won: int = 0
    games_lost: int = 0

    current_streak: int = 0
    best_streak: int = 0

    total_guesses_in_wins: int = 0
    fastest_win_attempts: Optional[int] = None

    @property
    def average_guesses_to_win(self) -> Optional[float]:
        if self.games_won == 0:
            return None
        return self.total_guesses_in_wins / self.games_won


class RoundStore:
    def __init__(self) -> None:
        self._rounds: Dict[str, RoundController] = {}
        self._lock = RLock()
        self._stats = Stats()

    def create(self, code_source: CodeSource = local_code) -> Tuple[str, RoundSnapshot]:
        round_id = str(uuid4())
        controller = RoundController(code_source=code_source)
        with self._lock:
            self._rounds[round_id] = controller
            self._stats.games_started += 1
        logger.info("Round %s created", round_id)
        return round_id, controller.get_state()

    def get(self, round_id: str) -> Optional[RoundSnapshot]:
        with self._lock:
            controller = self._rounds.get(round_id)
            return controller.get_state() if controller else None

    def submit(self, round_id: str, guess: GuessEntries) -> Optional[SubmitResult]:
        with self._lock:
            controller = self._rounds.get(round_id)
            if controller is None:
                return None

            result = controller.submit_guess(guess)

            # A rejected guess never changes status, so this fires once per round
            if result.ok and result.status != "in_progress":
                self._update_stats_on_end(result)
            return result

    def restart(self, round_id: str) -> Optional[RoundSnapshot]:
        """Replace the round behind `round_id` with a fresh one (the "New game" button)."""
        with self._lock:
            controller = self._rounds.get(round_id)
        if controller is None:
            return None

        # Drawing may hit random.org, so keep it outside the lock
        secret = controller.draw_secret()
        with self._lock:
            self._stats.games_started += 1
            return controller.new_round(secret)

    def reveal(self, round_id: str) -> Optional[Code]:
        """Secret of a finished round, None for unknown ids. Raises RuntimeError mid-round."""
        with self._lock:
            controller = self._rounds.get(round_id)
            if controller is None:
                return None
            return controller.reveal_secret()

    def _update_stats_on_end(self, result: SubmitResult) -> None:
        if result.status == "won":
            self._stats.games_won += 1

            self._stats.current_streak += 1
            if self._stats.current_streak > self._stats.best_streak:
                self._stats.best_streak = self._stats.current_streak

            guesses_used = result.attempt.number
            self._stats.total_guesses_in_wins += guesses_used
            if self._stats.fastest_win_attempts is None or guesses_used < self._stats.fastest_win_attempts:
                self._stats.fastest_win_attempts = guesses_used
        else:
            self._stats.games_lost += 1
            self._stats.current_streak = 0

    def get_stats(self) -> Stats:
        return self._stats

    def reset_stats(self) -> None:
        with self._lock:
            self._stats = Stats()
