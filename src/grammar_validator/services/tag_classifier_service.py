# src/grammar_validator/services/tag_classifier_service.py
"""
Grammar classifiers for single tokens.

Every function here is pure: it looks at one string and answers a question
about it. Deciding what a failed check means for the document is the job of
the ValidateController.
"""
from __future__ import annotations

import logging
from typing import Optional

from grammar_validator.model import GRAMMAR_TAGS, TagClassification, TagKind
from grammar_validator.utils.char_utils import CharUtils

logger = logging.getLogger(__name__)


# -------- Shape helpers --------
# Each returns the trimmed interior when the token has the shape, else None.


def _open_interior(s: str) -> Optional[str]:
    # '<name>' but neither '</...' nor '.../>'
    if len(s) < 2 or s[0] != "<" or s[-1] != ">" or s[-2] == "/" or s[1] == "/":
        return None
    return CharUtils.trim(s[1:-1])


def _close_interior(s: str) -> Optional[str]:
    if len(s) < 3 or not s.startswith("</") or s[-1] != ">" or s[-2] == "/":
        return None
    return CharUtils.trim(s[2:-1])


def _empty_interior(s: str) -> Optional[str]:
    if len(s) < 3 or s[0] != "<" or not s.endswith("/>"):
        return None
    return CharUtils.trim(s[1:-2])


# -------- Public classifiers --------


def is_tag_name(s: str) -> bool:
    """
    True if `s` matches [A-Za-z][A-Za-z0-9]*.
    Scans from the last character towards the first one.
    """
    if not s:
        return False
    for c in reversed(s[1:]):
        if not (CharUtils.is_alphabet(c) or CharUtils.is_digit(c)):
            return False
    return CharUtils.is_alphabet(s[0])


def validate_tag(name: str) -> bool:
    """True if `name` is one of the tags of the grammar (case-sensitive)."""
    return name in GRAMMAR_TAGS


def is_tag_open(s: str) -> bool:
    name = _open_interior(s)
    return name is not None and validate_tag(name) and is_tag_name(name)


def is_tag_empty(s: str) -> bool:
    name = _empty_interior(s)
    return name is not None and validate_tag(name) and is_tag_name(name)


def is_tag_close(s: str) -> bool:
    # Close tags are only checked for a well-formed name, not for grammar membership.
    name = _close_interior(s)
    return name is not None and is_tag_name(name)


def is_char_data(s: str) -> bool:
    return not s or "<" not in s


def compare_tags(open_tag: str, close_tag: str) -> bool:
    """True if the open and close tokens carry the same (trimmed) tag name."""
    open_name = _open_interior(open_tag)
    close_name = _close_interior(close_tag)
    return open_name is not None and open_name == close_name


def classify_tag(s: str) -> TagClassification:
    """
    Classifies a token as OPEN, CLOSE, EMPTY, UNKNOWN or INVALID.

    Open and empty shapes whose name is not in the grammar come back as UNKNOWN
    with the offending name, so the caller can report it. Content tokens and
    stray spans such as 'b>' are INVALID.
    """
    name = _open_interior(s)
    if name is not None:
        if not validate_tag(name):
            return TagClassification(kind=TagKind.UNKNOWN, name=name)
        kind = TagKind.OPEN if is_tag_name(name) else TagKind.INVALID
        return TagClassification(kind=kind, name=name)

    name = _close_interior(s)
    if name is not None:
        kind = TagKind.CLOSE if is_tag_name(name) else TagKind.INVALID
        return TagClassification(kind=kind, name=name)

    name = _empty_interior(s)
    if name is not None:
        if not validate_tag(name):
            return TagClassification(kind=TagKind.UNKNOWN, name=name)
        kind = TagKind.EMPTY if is_tag_name(name) else TagKind.INVALID
        return TagClassification(kind=kind, name=name)

    return TagClassification(kind=TagKind.INVALID)
