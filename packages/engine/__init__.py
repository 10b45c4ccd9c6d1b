from .constraints import filter_words, matches
from .validation import normalize_letter, WORD_LENGTH, ALPHABET

__all__ = ["filter_words", "matches", "normalize_letter", "WORD_LENGTH", "ALPHABET"]
