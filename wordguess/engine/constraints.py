"""
Candidate filtering given game history.

Given a pool of words and a history of (guess, pattern) pairs, return the
words that are consistent with ALL feedback seen so far, i.e. the words that
would have produced exactly those patterns had they been the secret.

Solvers use this to keep their guesses consistent with the past.
"""

from typing import Iterable, List, Tuple

from wordguess.config import WORD_LENGTH

from .scoring import score

# History is a sequence of (guess, pattern) tuples produced by the engine.
History = Iterable[Tuple[str, str]]


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only clean five-letter words that reproduce every recorded pattern.
    Order is preserved as in `words`.
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        w = w.strip().lower()
        if len(w) != WORD_LENGTH or not w.isalpha():
            continue
        if all(score(g, w) == patt for g, patt in history):
            out.append(w)

    return out
