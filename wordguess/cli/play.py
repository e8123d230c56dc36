"""
Play the game in a terminal.

  wordguess-play                      # bundled lists, first word
  wordguess-play --index 42 --rounds 3
  wordguess-play --answers my_answers.txt --allowed my_allowed.txt --check-lists
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from wordguess.clients import TerminalGameClient
from wordguess.config import DEFAULT_ALLOWED_PATH, DEFAULT_ANSWERS_PATH
from wordguess.datasets import WordLists, pretty_summary, validate_wordlists
from wordguess.engine import GameSession
from wordguess.harness import play_session
from wordguess.log import configure_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordguess-play",
                                 description="Guess the five-letter word in six attempts.")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS_PATH),
                    help="path to the guessable words (candidate secrets, in play order)")
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED_PATH),
                    help="path to extra words accepted as guesses")
    ap.add_argument("--index", type=int, default=0,
                    help="position of the secret in the answers list")
    ap.add_argument("--rounds", type=int, default=1,
                    help="play this many rounds, moving to the next word each time")
    ap.add_argument("--check-lists", action="store_true",
                    help="validate the word lists and print a summary first")
    ap.add_argument("--no-color", action="store_true", help="plain output")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.check_lists:
        rep = validate_wordlists(args.answers, args.allowed)
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            log.warning(issue)

    try:
        lists = WordLists.from_files(args.answers, args.allowed)
        session = GameSession(lists.answers, lists.allowed, word_index=args.index)
    except (FileNotFoundError, ValueError) as e:
        log.error(f"cannot start game: {e}")
        return 2

    client = TerminalGameClient(color=not args.no_color and sys.stdout.isatty())
    for round_no in range(max(1, args.rounds)):
        if round_no:
            if session.word_index >= len(session.guessable_pool):
                log.warning("no more words to play")
                break
            session.next_round()
        try:
            play_session(session, client)
        except (EOFError, KeyboardInterrupt):
            print()
            return 1

    return 0


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
