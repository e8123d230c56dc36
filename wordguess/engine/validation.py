"""
Guess validation.

Answers "is this guess acceptable right now?" with either None (accepted) or
the RejectionReason to report. Checks run in a fixed order and the first
failure wins:

  1) length must be WORD_LENGTH          -> WORD_TOO_LONG
  2) the round must still be open        -> GAME_OVER
  3) the word must be in the dictionary  -> WORD_DOES_NOT_EXIST

The length check comes first on purpose: a malformed word is reported as such
even after the round is over.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

from wordguess.config import WORD_LENGTH

from .feedback import RejectionReason


def normalize(word: str) -> str:
    """Guessing is case-insensitive; canonical form is stripped lowercase."""
    return word.strip().lower()


def validate_guess(
        word: str,
        dictionary: AbstractSet[str],
        *,
        round_open: bool = True,
) -> Optional[RejectionReason]:
    """
    Return the reason `word` must be rejected, or None if it is acceptable.

    Args:
      word       : already-normalised guess
      dictionary : set of acceptable words (union of both pools)
      round_open : False once the round is won or out of attempts
    """
    if len(word) != WORD_LENGTH:
        return RejectionReason.WORD_TOO_LONG
    if not round_open:
        return RejectionReason.GAME_OVER
    if word not in dictionary:
        return RejectionReason.WORD_DOES_NOT_EXIST
    return None
