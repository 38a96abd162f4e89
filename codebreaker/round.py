"""
Round controller
Owns one secret, the attempts made against it, and the turn lifecycle.

States: in_progress -> won | lost. Both end states are final; the only way on
is new_round(), which throws the old round away and starts a fresh one.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .config import APP_ENV
from .engine import Feedback, evaluate, is_win
from .errors import ValidationError
from .guess import check_guess
from .random_client import local_code
from .types import COLORS, MAX_TRIES, PEGS, Code, Color, GuessEntries, RoundStatus

logger = logging.getLogger(__name__)

CodeSource = Callable[[int, int], Code]  # (pegs, colors) -> secret


@dataclass(frozen=True)
class Attempt:
    number: int  # 1-based
    guess: Tuple[Color, ...]
    feedback: Feedback


@dataclass
class Round:
    secret: Tuple[Color, ...]
    attempts: List[Attempt] = field(default_factory=list)
    status: RoundStatus = "in_progress"


@dataclass(frozen=True)
class RoundSnapshot:
    """Read-only view handed to the presentation layer. Never holds the secret."""
    status: RoundStatus
    attempts: Tuple[Attempt, ...]
    tries_remaining: int
    max_tries: int
    pegs: int
    colors: int

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)


@dataclass(frozen=True)
class SubmitResult:
    """Either `attempt` is set (accepted) or `error` is (rejected, nothing changed).

    `secret` rides along on the submission that ends the round.
    """
    status: RoundStatus
    tries_remaining: int
    attempt: Optional[Attempt] = None
    error: Optional[ValidationError] = None
    secret: Optional[Code] = None  # only once the round is over

    @property
    def ok(self) -> bool:
        return self.error is None


class RoundController:
    def __init__(
        self,
        pegs: int = PEGS,
        colors: int = COLORS,
        max_tries: int = MAX_TRIES,
        code_source: Optional[CodeSource] = None,
    ) -> None:
        for name, value in (("pegs", pegs), ("colors", colors), ("max_tries", max_tries)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}.")

        self.pegs = pegs
        self.colors = colors
        self.max_tries = max_tries
        self._code_source = code_source or local_code
        self._round = self._start()

    # --- Lifecycle ---

    def draw_secret(self) -> Code:
        """Ask the code source for a fresh secret. May block when the source does I/O."""
        secret = list(self._code_source(self.pegs, self.colors))
        if len(secret) != self.pegs or check_guess(secret, self.pegs, self.colors) is not None:
            raise ValueError(f"Code source produced an invalid secret: {secret!r}")
        return secret

    def _start(self, secret: Optional[Code] = None) -> Round:
        if secret is None:
            secret = self.draw_secret()
        elif len(secret) != self.pegs or check_guess(secret, self.pegs, self.colors) is not None:
            raise ValueError(f"Invalid secret: {secret!r}")

        logger.info("New round started (%d pegs, %d colors, %d tries)", self.pegs, self.colors, self.max_tries)
        if APP_ENV == "local":
            logger.debug("Secret (dev): %s", secret)
        return Round(secret=tuple(secret))

    def new_round(self, secret: Optional[Code] = None) -> RoundSnapshot:
        """Replace the round wholesale. `secret` is one already taken from draw_secret()."""
        self._round = self._start(secret)
        return self.get_state()

    # --- Turns ---

    @property
    def status(self) -> RoundStatus:
        return self._round.status

    @property
    def tries_remaining(self) -> int:
        return self.max_tries - len(self._round.attempts)

    def _reject(self, error: ValidationError) -> SubmitResult:
        return SubmitResult(status=self.status, tries_remaining=self.tries_remaining, error=error)

    def submit_guess(self, guess: GuessEntries) -> SubmitResult:
        game = self._round

        if game.status != "in_progress":
            return self._reject(ValidationError.round_over(game.status))

        problem = check_guess(guess, self.pegs, self.colors)
        if problem is not None:
            return self._reject(problem)

        # Unreachable while the status transitions below hold
        if len(game.attempts) >= self.max_tries:
            logger.error("Round still in progress with %d/%d attempts recorded", len(game.attempts), self.max_tries)
            return self._reject(ValidationError.tries_exhausted())

        code = tuple(guess)
        feedback = evaluate(code, game.secret, self.colors)
        attempt = Attempt(number=len(game.attempts) + 1, guess=code, feedback=feedback)
        game.attempts.append(attempt)
        logger.debug("Attempt %d: %s -> %s", attempt.number, list(code), feedback)

        if is_win(code, game.secret):
            game.status = "won"
        elif len(game.attempts) == self.max_tries:
            game.status = "lost"

        secret = None
        if game.status != "in_progress":
            logger.info("Round %s after %d attempt(s)", game.status, len(game.attempts))
            secret = list(game.secret)

        return SubmitResult(status=game.status, tries_remaining=self.tries_remaining, attempt=attempt, secret=secret)

    # --- Reads ---

    def get_state(self) -> RoundSnapshot:
        return RoundSnapshot(
            status=self._round.status,
            attempts=tuple(self._round.attempts),
            tries_remaining=self.tries_remaining,
            max_tries=self.max_tries,
            pegs=self.pegs,
            colors=self.colors,
        )

    def reveal_secret(self) -> Code:
        """The secret, for the end-of-round reveal. Asking mid-round is a caller bug."""
        if self._round.status == "in_progress":
            raise RuntimeError("The secret is only revealed once the round is over.")
        return list(self._round.secret)

    def debug_secret(self) -> Code:
        """Dev tooling only: the secret regardless of status. Not for the player path."""
        return list(self._round.secret)


def describe(result: SubmitResult) -> str:
    """Player-facing line for a submission, as the board's status bar shows it."""
    if result.error is not None:
        return result.error.message
    attempt = result.attempt
    if result.status == "won":
        return f"You cracked it in {attempt.number} tries!"
    if result.status == "lost":
        return "Out of tries, you lose."
    return (
        f"Result: exact {attempt.feedback.exact}, color-only {attempt.feedback.color_only}"
        f" (tries left: {result.tries_remaining})"
    )
