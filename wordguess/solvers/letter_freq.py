"""
Letter-Frequency Solver (distinct-letter coverage).

Build a letter histogram over the current candidates and score each word as
the sum of its DISTINCT letters' frequencies. Pick the max; break ties with
the seeded RNG. While the candidate set is large, score the whole allowed
list instead so early guesses can probe letters no candidate-word covers.
"""

from __future__ import annotations
from collections import Counter
from typing import List
from .base import BaseSolver, register


def distinct_letter_score(w: str, counts: Counter) -> int:
    """Sum of per-letter counts with duplicates in the word counted once."""
    return sum(counts[ch] for ch in set(w))


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"

    CAND_POOL_LIMIT = 200

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]

        pool: List[str] = candidates if len(candidates) <= self.CAND_POOL_LIMIT else allowed
        counts = Counter("".join(candidates)) if candidates else Counter("".join(allowed))

        best_score = None
        best_words: List[str] = []
        for w in pool:
            s = distinct_letter_score(w, counts)
            if best_score is None or s > best_score:
                best_score, best_words = s, [w]
            elif s == best_score:
                best_words.append(w)

        if not best_words:
            raise ValueError("no words left to guess")
        return best_words[self.rng.randrange(len(best_words))]
