"""
The round evaluator.

A GameSession owns the state of one playthrough: the secret, the accepted
attempts, the accumulated letter knowledge and the index of the next secret
in the guessable pool. Its single operation, submit_guess, either records the
guess and returns a RoundResult or returns a RejectionReason without touching
any state. It never prints and never loops; see harness.core.play_session for
the loop that drives it against a client.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List, Union

from wordguess.config import MAX_ATTEMPTS, WORD_LENGTH

from .feedback import LetterStatus, RejectionReason, RoundResult, SessionState
from .scoring import score_statuses
from .validation import normalize, validate_guess

log = logging.getLogger(__name__)

GuessOutcome = Union[RoundResult, RejectionReason]


class GameSession:
    """
    One game: secret = guessable_pool[word_index], six attempts to find it.

    `letter_knowledge` maps each guessed letter to the best status seen for it
    so far (keyboard colouring). Statuses only ever upgrade:
    WRONG < WRONG_POSITION < CORRECT.
    """

    def __init__(self, guessable_pool: Iterable[str], acceptable_pool: Iterable[str],
                 word_index: int = 0):
        self.guessable_pool: List[str] = [normalize(w) for w in guessable_pool]
        self.acceptable_pool: List[str] = [normalize(w) for w in acceptable_pool]
        if not self.guessable_pool:
            raise ValueError("guessable pool is empty")
        self._dictionary: FrozenSet[str] = frozenset(self.guessable_pool) | frozenset(
            self.acceptable_pool)

        self.word_index = int(word_index)
        self.secret = ""
        self.attempts: List[str] = []
        self.letter_knowledge: Dict[str, LetterStatus] = {}
        self._start()

    def _start(self) -> None:
        """Pick the secret at word_index and advance the index for the next round."""
        if not 0 <= self.word_index < len(self.guessable_pool):
            raise ValueError(
                f"word index {self.word_index} out of range for "
                f"{len(self.guessable_pool)} guessable words")
        secret = self.guessable_pool[self.word_index]
        if len(secret) != WORD_LENGTH or not secret.isalpha():
            raise ValueError(f"secret must be a {WORD_LENGTH}-letter word; got {secret!r}")
        self.secret = secret
        self.word_index += 1
        log.debug(f"round started with word at index {self.word_index - 1}")

    def next_round(self) -> None:
        """Start over with the next word of the guessable pool."""
        self.attempts = []
        self.letter_knowledge = {}
        self._start()

    # ---- state ----

    @property
    def won(self) -> bool:
        return bool(self.attempts) and self.attempts[-1] == self.secret

    @property
    def state(self) -> SessionState:
        if self.won:
            return SessionState.WON
        if len(self.attempts) >= MAX_ATTEMPTS:
            return SessionState.LOST
        return SessionState.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.state is not SessionState.IN_PROGRESS

    @property
    def attempts_left(self) -> int:
        return MAX_ATTEMPTS - len(self.attempts)

    def is_valid_word(self, word: str) -> bool:
        return normalize(word) in self._dictionary

    # ---- the operation ----

    def submit_guess(self, raw_word: str) -> GuessOutcome:
        """
        Validate and evaluate one guess.

        Returns a RejectionReason (state untouched) or a RoundResult whose
        changelog holds one (guessed letter, status) pair per position.
        """
        word = normalize(raw_word)
        reason = validate_guess(word, self._dictionary, round_open=not self.is_over)
        if reason is not None:
            log.debug(f"rejected {word!r}: {reason.name}")
            return reason

        self.attempts.append(word)
        statuses = score_statuses(word, self.secret)
        changelog = list(zip(word, statuses))
        for letter, status in changelog:
            previous = self.letter_knowledge.get(letter)
            if previous is None or status > previous:
                self.letter_knowledge[letter] = status

        won = word == self.secret
        log.debug(f"attempt {len(self.attempts)}/{MAX_ATTEMPTS} {word!r} -> "
                  f"{''.join(s.symbol for s in statuses)}{' (won)' if won else ''}")
        return RoundResult(won=won, changelog=changelog)
