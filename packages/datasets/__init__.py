from .validator import validate_wordlists, pretty_summary
from .io import read_lines, read_words, write_words
from .corpus import Corpora, load_corpora

__all__ = ["validate_wordlists", "pretty_summary", "read_lines", "read_words",
           "write_words", "Corpora", "load_corpora"]
