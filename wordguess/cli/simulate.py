"""
Self-play runs: let a solver play many rounds and report how it did.

This script:
  1) Validates the word lists (prints counts + SHA).
  2) Loads the lists and instantiates the requested solver.
  3) Plays a batch of rounds with a live progress indicator and writes:
       - CSV:  per-round results + guess/pattern history columns
       - JSON: manifest with config, word list metadata and summary stats
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Iterable, Iterator, List

import numpy as np
from tqdm import tqdm

from wordguess.config import DEFAULT_ALLOWED_PATH, DEFAULT_ANSWERS_PATH
from wordguess.datasets import WordLists, pretty_summary, validate_wordlists
from wordguess.harness import run_batch, timestamp_id, write_csv, write_manifest
from wordguess.log import configure_logging
from wordguess.solvers import create_solver, get_solver_ids

log = logging.getLogger(__name__)


def _plain_progress(cases: List[str]) -> Iterator[str]:
    """Yield cases, writing a one-line progress/ETA update to stderr about once a second."""
    total = len(cases)
    start = time.time()
    last_print = 0.0
    for idx, case in enumerate(cases, 1):
        yield case
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
            sys.stderr.flush()
            last_print = now
    sys.stderr.write("\n")
    sys.stderr.flush()


def _with_progress(cases: List[str], mode: str) -> Iterable[str]:
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if mode == "bar":
        return tqdm(cases, ncols=80, desc="Playing", unit="game")
    if mode == "plain":
        return _plain_progress(cases)
    return cases


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1; got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordguess-simulate",
                                 description="wordguess: self-play a solver over the answers list")
    ap.add_argument("--solver", default="entropy", choices=get_solver_ids(), help="solver id")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS_PATH),
                    help="path to the guessable words")
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED_PATH),
                    help="path to extra words accepted as guesses")
    ap.add_argument("--sample", type=_positive_int,
                    help="play only a random subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="show run progress (auto=bar on a terminal, else plain text)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    rep = validate_wordlists(args.answers, args.allowed)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning(issue)
    if not rep["passed"]:
        log.error("word lists failed validation; fix them before running")
        return 2

    try:
        lists = WordLists.from_files(args.answers, args.allowed)
    except (FileNotFoundError, ValueError) as e:
        log.error(f"cannot load word lists: {e}")
        return 2

    solver = create_solver(args.solver)

    # Deterministic sample without replacement, list order otherwise
    rng = np.random.default_rng(args.seed)
    if args.sample and args.sample < len(lists.answers):
        picks = rng.choice(len(lists.answers), size=args.sample, replace=False)
        cases = [lists.answers[i] for i in picks]
    else:
        cases = list(lists.answers)

    try:
        results = run_batch(solver, _with_progress(cases, args.progress),
                            answers=lists.answers, allowed=lists.allowed, seed=args.seed)
    except ValueError as e:
        log.error(f"self-play stopped: {e}")
        return 2

    wins = [r for r in results if r["success"]]
    mean_guesses = float(np.mean([r["guesses"] for r in wins])) if wins else None

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, outdir / f"run_{run_id}.csv")
    manifest_path = write_manifest({
        "run_id": run_id,
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "wins": len(wins),
        "mean_guesses": mean_guesses,
        "solver_id": solver.id,
    }, outdir / f"run_{run_id}_manifest.json")

    mean_txt = f"{mean_guesses:.3f}" if mean_guesses is not None else "n/a"
    print(f"{solver.id}: won {len(wins)}/{len(results)} | mean guesses (wins) {mean_txt}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
