"""
Per-position scoring (feedback) for a single (guess, secret) pair.

Conventions:
  - CORRECT        ('G') : guessed letter equals the secret letter at that position
  - WRONG_POSITION ('Y') : guessed letter occurs somewhere else in the secret
  - WRONG          ('-') : guessed letter does not occur in the secret

Each position is judged on its own: a letter guessed twice is marked
WRONG_POSITION at every misplaced occurrence as long as the secret contains
it at all. There is no multiplicity bookkeeping.

Examples:
  score("slate", "crane") -> "--G-G"
  score("lemon", "apple") -> "YY---"
"""

from __future__ import annotations

from typing import Iterable, List

from .feedback import LetterStatus


def score_statuses(guess: str, secret: str) -> List[LetterStatus]:
    """
    Compute the status of every position of `guess` against `secret`.

    Preconditions:
      - both words are already normalised (lowercase, stripped)
      - len(guess) == len(secret)
    """
    assert len(guess) == len(secret), "Guess and secret must be the same length"

    letters = set(secret)
    out: List[LetterStatus] = []
    for g, s in zip(guess, secret):
        if g == s:
            out.append(LetterStatus.CORRECT)
        elif g in letters:
            out.append(LetterStatus.WRONG_POSITION)
        else:
            out.append(LetterStatus.WRONG)
    return out


def to_pattern(statuses: Iterable[LetterStatus]) -> str:
    """Render statuses as a 'G'/'Y'/'-' string."""
    return "".join(s.symbol for s in statuses)


def score(guess: str, secret: str) -> str:
    """
    Pattern string for `guess` against `secret`; case-insensitive.
    Solvers and reports work on these strings.
    """
    return to_pattern(score_statuses(guess.strip().lower(), secret.strip().lower()))
