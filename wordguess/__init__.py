"""wordguess: a terminal word-guessing game and its round-evaluation engine."""

__version__ = "0.1.0"
