# src/grammar_validator/controllers/validate_controller.py
from __future__ import annotations

import logging
from typing import List, NoReturn, Sequence, Tuple

from grammar_validator.errors import ERRORS_BY_CODE, MalformedDocumentError
from grammar_validator.model import (
    ErrorCode,
    TagKind,
    Token,
    ValidationIssue,
    ValidationResult,
)
from grammar_validator.services.tag_classifier_service import classify_tag
from grammar_validator.services.tokenizer_service import tokenize

logger = logging.getLogger(__name__)

REASON_UNKNOWN_TAG = "not a valid tag in the given grammar"
REASON_ORPHAN_CLOSE = "no open tags left to close"
REASON_MISMATCHED_CLOSE = "no matching opening tag; expected to close {expected}"
REASON_UNCLOSED_OPEN = "no matching closing tag"


class ValidateController:
    """
    Matches open and close tags of a token sequence against a stack.

    The controller holds no state between calls; every run starts with an empty
    stack, so a single instance can validate any number of documents.
    """

    def validate(self, tokens: Sequence[Token]) -> ValidationResult:
        """
        Validates a token sequence and reports the first violation, if any.

        Args:
            tokens (Sequence[Token]): Output of the tokenizer, in document order.

        Returns:
            ValidationResult: `valid=True`, or `valid=False` with the issue attached.
        """
        try:
            self.check(tokens)
        except MalformedDocumentError as e:
            logger.debug("Validation stopped: %s (%s)", e, e.issue.code.value)
            return ValidationResult(valid=False, token_count=len(tokens), issue=e.issue)
        return ValidationResult(valid=True, token_count=len(tokens))

    def validate_text(self, text: str) -> ValidationResult:
        """Tokenizes `text` and validates the resulting tokens."""
        return self.validate(tokenize(text))

    def check(self, tokens: Sequence[Token]) -> None:
        """
        Same as `validate`, but raises the matching MalformedDocumentError subclass
        on the first violation instead of returning a result.
        """
        stack: List[Tuple[str, Token]] = []

        for token in tokens:
            if not token.is_tag:
                continue

            classification = classify_tag(token.text)

            if classification.kind is TagKind.OPEN:
                stack.append((classification.name, token))

            elif classification.kind is TagKind.CLOSE:
                if not stack:
                    self._fail(ErrorCode.ORPHAN_CLOSE, token, REASON_ORPHAN_CLOSE,
                               tag_name=classification.name)

                open_name, _open_token = stack.pop()
                if open_name != classification.name:
                    self._fail(
                        ErrorCode.MISMATCHED_CLOSE,
                        token,
                        REASON_MISMATCHED_CLOSE.format(expected=open_name),
                        tag_name=classification.name,
                        expected=open_name,
                    )

            elif classification.kind is TagKind.UNKNOWN:
                self._fail(ErrorCode.UNKNOWN_TAG, token, REASON_UNKNOWN_TAG,
                           tag_name=classification.name)

            # EMPTY and INVALID tokens need no matching.

        if stack:
            # Report the innermost tag that was never closed.
            open_name, open_token = stack[-1]
            self._fail(ErrorCode.UNCLOSED_OPEN, open_token, REASON_UNCLOSED_OPEN, tag_name=open_name)

    @staticmethod
    def _fail(code: ErrorCode, token: Token, reason: str, **extra) -> NoReturn:
        issue = ValidationIssue(code=code, token=token.text, offset=token.offset, reason=reason, **extra)
        raise ERRORS_BY_CODE[code](issue)


def validate(tokens: Sequence[Token]) -> ValidationResult:
    """Module-level shortcut for `ValidateController().validate(tokens)`."""
    return ValidateController().validate(tokens)


def validate_text(text: str) -> ValidationResult:
    return ValidateController().validate_text(text)
