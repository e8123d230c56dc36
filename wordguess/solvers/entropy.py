"""
Entropy Solver (expected information gain).

For each guess in the pool, partition the CURRENT candidates by the feedback
pattern they would produce and compute the Shannon entropy of that partition;
pick the guess with maximum entropy.
Tie-break: smaller worst-case bucket (minimax-ish), then seeded RNG.

With a large candidate set, only the top POOL_CAP allowed words by
distinct-letter coverage (plus the top candidates) are evaluated.
"""

from __future__ import annotations
from collections import Counter
from typing import List, Tuple

import numpy as np

from wordguess.engine import score as score_fn
from .base import BaseSolver, register
from .letter_freq import distinct_letter_score


def entropy_of_guess(guess: str, candidates: List[str]) -> Tuple[float, int]:
    """Partition candidates by pattern; return (entropy_bits, worst_bucket_size)."""
    if len(candidates) <= 1:
        return 0.0, len(candidates)

    patterns = [score_fn(guess, ans) for ans in candidates]
    _, counts = np.unique(patterns, return_counts=True)
    p = counts / counts.sum()
    return float(-(p * np.log2(p)).sum()), int(counts.max())


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"

    # If candidates <= this, search only among candidates
    CANDIDATE_ONLY_LIMIT = 200
    POOL_CAP = 400
    INCLUDE_TOP_CANDIDATES = 100

    def _select_pool(self, candidates: List[str], allowed: List[str]) -> List[str]:
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return candidates

        counts = Counter("".join(candidates))
        key = lambda w: distinct_letter_score(w, counts)  # noqa: E731
        pool = sorted(allowed, key=key, reverse=True)[: self.POOL_CAP]
        top_cands = sorted(candidates, key=key, reverse=True)[: self.INCLUDE_TOP_CANDIDATES]

        # Stable union: top candidates first, then the allowed top-K
        return list(dict.fromkeys(top_cands + pool))

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]
        if len(candidates) == 1:
            return candidates[0]

        pool = self._select_pool(candidates, allowed) or allowed
        if not pool:
            raise ValueError("no words left to guess")

        best_key = None
        best_words: List[str] = []
        for g in pool:
            H, worst = entropy_of_guess(g, candidates)
            # A guess that could itself be the answer wins ties
            key = (round(H, 9), -worst, g in candidates)
            if best_key is None or key > best_key:
                best_key, best_words = key, [g]
            elif key == best_key:
                best_words.append(g)

        return best_words[self.rng.randrange(len(best_words))]
