from __future__ import annotations

from typing import List

from wordguess.engine.feedback import Changelog, RejectionReason


class GameClient:
    """
    Presentation/input side of a game. The game loop only talks to this
    interface, so terminal, scripted and self-play front ends are interchangeable.
    """

    def get_new_guess(self) -> str:
        """Block until the player supplies one line of text. No validation here."""
        raise NotImplementedError("Override in subclass")

    def display_round_changelog(self, changelog: Changelog) -> None:
        raise NotImplementedError("Override in subclass")

    def display_error_message(self, reason: RejectionReason) -> None:
        raise NotImplementedError("Override in subclass")

    # Optional end-of-round hooks.

    def display_win(self, secret: str, attempts: List[str]) -> None:
        pass

    def display_loss(self, secret: str) -> None:
        pass
