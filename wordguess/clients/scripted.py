from __future__ import annotations

from typing import Iterable, List, Tuple

from wordguess.engine.feedback import Changelog, RejectionReason

from .base import GameClient


class ScriptedClient(GameClient):
    """
    Replays a fixed list of guesses and records everything it is shown.
    Running out of guesses raises EOFError, like a closed stdin.
    """

    def __init__(self, guesses: Iterable[str]):
        self.pending: List[str] = list(guesses)
        self.changelogs: List[Changelog] = []
        self.errors: List[RejectionReason] = []
        self.outcome: Tuple[str, str] | None = None  # ("win" | "loss", secret)

    def get_new_guess(self) -> str:
        if not self.pending:
            raise EOFError("no more scripted guesses")
        return self.pending.pop(0)

    def display_round_changelog(self, changelog: Changelog) -> None:
        self.changelogs.append(list(changelog))

    def display_error_message(self, reason: RejectionReason) -> None:
        self.errors.append(reason)

    def display_win(self, secret: str, attempts: List[str]) -> None:
        self.outcome = ("win", secret)

    def display_loss(self, secret: str) -> None:
        self.outcome = ("loss", secret)
