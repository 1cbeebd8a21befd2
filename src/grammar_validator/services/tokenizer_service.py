# src/grammar_validator/services/tokenizer_service.py
from __future__ import annotations

import logging
from typing import List, Optional

from grammar_validator.model import Token
from grammar_validator.utils.char_utils import CharUtils

logger = logging.getLogger(__name__)


def tokenize(text: str) -> List[Token]:
    """
    Splits a document into tag and content tokens in a single left-to-right scan.

    A '>' closes a tag token that starts at the previous delimiter. A '<' (other
    than at index 0) closes the content between the previous delimiter and
    itself; blank content is dropped. Malformed tags are not detected here,
    that is left to the classifiers.

    Args:
        text (str): The complete document text.

    Returns:
        List[Token]: The tokens in document order, each carrying its source offset.
    """
    tokens: list[Token] = []
    # Index of the last '<' or '>' seen; None until the first delimiter.
    boundary: Optional[int] = None

    for i, c in enumerate(text):
        if c == ">":
            start = boundary if boundary is not None else 0
            tokens.append(Token(text=text[start:i + 1], offset=start))
            boundary = i
        elif c == "<":
            if i > 0:
                start = boundary + 1 if boundary is not None else 0
                content = text[start:i]
                if not CharUtils.is_blank(content):
                    tokens.append(Token(text=content, offset=start))
            boundary = i

    # Anything after the last delimiter is never emitted.
    logger.debug("Tokenized %d characters into %d tokens.", len(text), len(tokens))
    return tokens
