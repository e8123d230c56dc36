"""
Self-play client: a solver plays the game through the normal client interface.

The client keeps its own view of the game (history of (guess, pattern) pairs
and the answers still consistent with it) purely from what the game loop shows
it, so it never sees the secret.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from wordguess.engine import filter_candidates, to_pattern
from wordguess.engine.feedback import Changelog, RejectionReason
from wordguess.solvers import BaseSolver

from .base import GameClient

log = logging.getLogger(__name__)


class AutoPlayClient(GameClient):

    def __init__(self, solver: BaseSolver, *, answers: List[str], allowed: List[str],
                 seed: int | None = None):
        self.solver = solver
        # Only clean five-letter words can ever be accepted, so only those are offered.
        self.answers = filter_candidates(answers, [])
        self.allowed = list(dict.fromkeys(self.answers + filter_candidates(allowed, [])))
        self.solver.reset(allowed=self.allowed, answers=self.answers, seed=seed)

        self.history: List[Tuple[str, str]] = []
        self.candidates: List[str] = list(self.answers)
        self._last_guess: str | None = None

    def get_new_guess(self) -> str:
        state = {
            "turn": len(self.history) + 1,
            "history": list(self.history),
            "candidates": self.candidates,
            "allowed": self.allowed,
        }
        self._last_guess = self.solver.next_guess(state).lower()
        log.debug(f"{self.solver.id} guesses {self._last_guess!r} "
                  f"({len(self.candidates)} candidates left)")
        return self._last_guess

    def display_round_changelog(self, changelog: Changelog) -> None:
        guess = "".join(letter for letter, _ in changelog)
        patt = to_pattern(status for _, status in changelog)
        self.history.append((guess, patt))
        self.candidates = filter_candidates(self.candidates, [(guess, patt)])

    def display_error_message(self, reason: RejectionReason) -> None:
        # Never offer a refused word again.
        if reason is not RejectionReason.GAME_OVER and self._last_guess:
            self.candidates = [w for w in self.candidates if w != self._last_guess]
            self.allowed = [w for w in self.allowed if w != self._last_guess]
            log.warning(f"{self.solver.id} guess {self._last_guess!r} refused: {reason.name}")
