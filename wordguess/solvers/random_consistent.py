"""
Random Consistent solver.

Choose uniformly at random from the words still consistent with all feedback
so far; fall back to the allowed list if that set is somehow empty.
Deterministic for a given seed (via BaseSolver.rng).
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool: List[str] = candidates if candidates else state["allowed"]
        if not pool:
            raise ValueError("no words left to guess")
        return pool[self.rng.randrange(len(pool))]
