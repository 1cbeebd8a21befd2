# src/grammar_validator/utils/char_utils.py
import string

# Whitespace the grammar accepts between words and inside tag delimiters.
WORD_SEPARATORS = " \t\n"

_ALPHABET = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


class CharUtils:
    """Character and string predicates used by the tokenizer and the tag classifiers."""

    @staticmethod
    def is_alphabet(c: str) -> bool:
        return c in _ALPHABET

    @staticmethod
    def is_digit(c: str) -> bool:
        return c in _DIGITS

    @staticmethod
    def is_word_separator(c: str) -> bool:
        return len(c) == 1 and c in WORD_SEPARATORS

    @staticmethod
    def is_blank(s: str) -> bool:
        """True for the empty string and for strings made only of word separators."""
        return all(CharUtils.is_word_separator(c) for c in s)

    @staticmethod
    def trim(s: str) -> str:
        """Strips word separators (and nothing else) from both ends."""
        return s.strip(WORD_SEPARATORS)
