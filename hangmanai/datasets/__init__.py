from .validator import validate_corpus, pretty_summary
from .io import read_lines, write_lines, normalize_words, fetch_words, load_corpus

__all__ = [
    "validate_corpus", "pretty_summary",
    "read_lines", "write_lines", "normalize_words", "fetch_words", "load_corpus",
]
