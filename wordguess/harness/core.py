"""
Game loop primitives.

- play_session: drive one GameSession against any GameClient until the round
                is won or lost. This is the loop the terminal game runs.
- run_batch:    self-play many rounds with a solver (via AutoPlayClient).

Both are UI-agnostic: all input and output goes through the client.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List

from wordguess.clients import AutoPlayClient, GameClient
from wordguess.engine import GameSession, RejectionReason
from wordguess.solvers import BaseSolver

log = logging.getLogger(__name__)


def play_session(session: GameSession, client: GameClient) -> Dict:
    """
    Run one round to completion.

    Rejections other than GAME_OVER are shown and the client is asked again.
    After a losing final attempt the client is shown GAME_OVER straight away
    rather than being asked for a guess that cannot be accepted.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int),
            history (list[(guess, pattern)]), rejections (list[str])
    """
    history = []
    rejections: List[str] = []

    while True:
        guess = client.get_new_guess()
        outcome = session.submit_guess(guess)

        if isinstance(outcome, RejectionReason):
            rejections.append(outcome.name)
            client.display_error_message(outcome)
            if outcome is RejectionReason.GAME_OVER:
                break
            continue

        client.display_round_changelog(outcome.changelog)
        history.append((session.attempts[-1], outcome.pattern))

        if outcome.won:
            client.display_win(session.secret, list(session.attempts))
            break
        if session.is_over:
            rejections.append(RejectionReason.GAME_OVER.name)
            client.display_error_message(RejectionReason.GAME_OVER)
            client.display_loss(session.secret)
            break

    log.info(f"round over: {session.state.value} after {len(session.attempts)} attempt(s)")
    return {
        "answer": session.secret,
        "success": session.won,
        "guesses": len(session.attempts),
        "history": history,
        "rejections": rejections,
    }


def run_batch(
        solver: BaseSolver,
        cases: Iterable[str],
        *,
        answers: List[str],
        allowed: List[str],
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Self-play one round per secret in `cases` (each must be in `answers`).
    If 'sample' is provided, only the first K cases are played.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    positions = {w: i for i, w in enumerate(answers)}
    out: List[Dict] = []

    for idx, secret in enumerate(cases, start=1):
        if sample is not None and idx > sample:
            break
        if secret not in positions:
            raise ValueError(f"case {secret!r} is not in the answers list")

        session = GameSession(answers, allowed, word_index=positions[secret])
        client = AutoPlayClient(solver, answers=answers, allowed=allowed,
                                seed=None if seed is None else seed + idx)

        t0 = time.perf_counter_ns()
        r = play_session(session, client)
        r["time_ms"] = (time.perf_counter_ns() - t0) / 1_000_000.0
        r["solver_id"] = solver.id
        out.append(r)

    return out
