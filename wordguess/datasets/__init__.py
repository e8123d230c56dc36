from .validator import validate_wordlists, pretty_summary
from .io import read_lines, load_words, write_lines
from .loader import WordLists

__all__ = ["validate_wordlists", "pretty_summary", "read_lines", "load_words", "write_lines",
           "WordLists"]
