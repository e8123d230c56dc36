"""
Fixed game constants and bundled data locations.

The game has a single rule set: five-letter words, six attempts. Everything
else (which lists to load, which word to start on) is a CLI flag.
"""

from __future__ import annotations

from pathlib import Path

# Single source of truth for the rules.
WORD_LENGTH = 5
MAX_ATTEMPTS = 6

DATA_DIR = Path(__file__).resolve().parent / "datasets" / "data"
DEFAULT_ANSWERS_PATH = DATA_DIR / "answers_5.txt"
DEFAULT_ALLOWED_PATH = DATA_DIR / "allowed_5.txt"
