"""
Word source: the two lists a game session is built from.

  - answers : guessable pool, candidate secrets (in play order)
  - allowed : extra words a player may type that are never chosen as secrets

The session accepts the union of both as guesses, so `allowed` need not
repeat the answers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from wordguess.config import DEFAULT_ALLOWED_PATH, DEFAULT_ANSWERS_PATH

from .io import load_words

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordLists:
    answers: List[str]
    allowed: List[str]

    @classmethod
    def from_files(cls, answers_path: Path | str, allowed_path: Path | str) -> "WordLists":
        answers = load_words(answers_path)
        allowed = load_words(allowed_path)
        if not answers:
            raise ValueError(f"answers list is empty: {answers_path}")
        log.info(f"Read {len(answers)} answers from {answers_path}")
        log.info(f"Read {len(allowed)} allowed words from {allowed_path}")
        return cls(answers=answers, allowed=allowed)

    @classmethod
    def default(cls) -> "WordLists":
        """The lists bundled with the package."""
        return cls.from_files(DEFAULT_ANSWERS_PATH, DEFAULT_ALLOWED_PATH)

    @property
    def dictionary(self) -> List[str]:
        """Every acceptable guess, answers first, without duplicates."""
        return list(dict.fromkeys(self.answers + self.allowed))
