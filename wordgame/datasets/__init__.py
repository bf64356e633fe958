from .validator import validate_vocabulary, pretty_summary
from .io import clean_words, write_words

__all__ = ["validate_vocabulary", "pretty_summary", "clean_words", "write_words"]
