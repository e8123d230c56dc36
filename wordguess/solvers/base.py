from __future__ import annotations
import random
from typing import Dict, List, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver picks the next guess from a state dict with keys:
      - "turn":       1-based attempt number
      - "history":    list of (guess, pattern) so far
      - "candidates": answers still consistent with the history
      - "allowed":    every acceptable guess
    """
    id = "base"
    name = "Base"

    def __init__(self):
        self.allowed: List[str] = []
        self.answers: List[str] = []
        self.rng = random.Random()

    def reset(self, *, allowed: List[str], answers: List[str], seed: int | None = None) -> None:
        self.allowed = list(allowed)
        self.answers = list(answers)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
