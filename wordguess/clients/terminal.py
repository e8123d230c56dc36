"""
Terminal client: reads guesses from stdin, prints colored feedback.

Colors per status:
  CORRECT        -> blue
  WRONG_POSITION -> yellow
  WRONG          -> red
"""

from __future__ import annotations

from typing import Callable, List, TextIO
import sys

from colorama import Fore, Style, just_fix_windows_console

from wordguess.engine.feedback import Changelog, LetterStatus, RejectionReason

from .base import GameClient

STATUS_COLORS = {
    LetterStatus.CORRECT: Fore.BLUE,
    LetterStatus.WRONG_POSITION: Fore.YELLOW,
    LetterStatus.WRONG: Fore.RED,
}


def render_changelog(changelog: Changelog, color: bool = True) -> str:
    """One line, each letter padded by a space on both sides."""
    parts = []
    for letter, status in changelog:
        if color:
            parts.append(f" {STATUS_COLORS[status]}{letter}{Style.RESET_ALL} ")
        else:
            parts.append(f" {letter} ")
    return "".join(parts)


class TerminalGameClient(GameClient):

    def __init__(self, *, stream: TextIO | None = None, color: bool = True,
                 read_line: Callable[[], str] | None = None):
        self.stream = stream or sys.stdout
        self.color = color
        self.read_line = read_line
        if color:
            just_fix_windows_console()

    def _print(self, text: str = "") -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def get_new_guess(self) -> str:
        self._print("Type your guess")
        return (self.read_line or input)()

    def display_round_changelog(self, changelog: Changelog) -> None:
        self._print(render_changelog(changelog, color=self.color))

    def display_error_message(self, reason: RejectionReason) -> None:
        self._print(reason.message)

    def display_win(self, secret: str, attempts: List[str]) -> None:
        n = len(attempts)
        self._print(f"You guessed {secret.upper()} in {n} attempt{'s' if n != 1 else ''}!")

    def display_loss(self, secret: str) -> None:
        self._print(f"The word was {secret.upper()}.")
