"""
Feedback vocabulary shared by the engine, the clients and the solvers.

- LetterStatus:    per-position outcome of one guess; ordered by information
                   (WRONG < WRONG_POSITION < CORRECT) so knowledge can only upgrade.
- RejectionReason: closed set of reasons a guess is refused, each with the
                   message shown to the player.
- RoundResult:     the accepted-guess outcome (changelog + won flag).
- SessionState:    lifecycle of one round.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Tuple


class LetterStatus(IntEnum):
    WRONG = 0
    WRONG_POSITION = 1
    CORRECT = 2

    @property
    def symbol(self) -> str:
        """Pattern character: 'G' correct, 'Y' wrong position, '-' absent."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, ch: str) -> "LetterStatus":
        for status, sym in _SYMBOLS.items():
            if sym == ch:
                return status
        raise ValueError(f"Unknown pattern character: {ch!r}")


_SYMBOLS = {
    LetterStatus.WRONG: "-",
    LetterStatus.WRONG_POSITION: "Y",
    LetterStatus.CORRECT: "G",
}


class RejectionReason(Enum):
    WORD_TOO_LONG = "Only 5 letter words are accepted"
    WORD_DOES_NOT_EXIST = "This word does not exist!"
    GAME_OVER = "Game over!"

    @property
    def message(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class SessionState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


# One (guessed letter, status) pair per position, in guess order.
Changelog = List[Tuple[str, LetterStatus]]


@dataclass(frozen=True)
class RoundResult:
    """Outcome of an accepted guess."""
    won: bool
    changelog: Changelog

    @property
    def pattern(self) -> str:
        return "".join(status.symbol for _, status in self.changelog)
