# src/grammar_validator/errors.py
from typing import Optional

from grammar_validator.model import ErrorCode, ValidationIssue


class ValidatorError(Exception):
    """Base class for every error raised by the validator and its shell."""


# --- Malformed documents (raised by the core) ---


class MalformedDocumentError(ValidatorError):
    """
    Raised when a document violates the grammar.
    Carries the structured issue so callers never have to parse the message.
    """
    code: Optional[ErrorCode] = None

    def __init__(self, issue: ValidationIssue):
        super().__init__(issue.format_message())
        self.issue = issue


class UnknownTagError(MalformedDocumentError):
    code = ErrorCode.UNKNOWN_TAG


class OrphanCloseError(MalformedDocumentError):
    code = ErrorCode.ORPHAN_CLOSE


class MismatchedCloseError(MalformedDocumentError):
    code = ErrorCode.MISMATCHED_CLOSE


class UnclosedOpenError(MalformedDocumentError):
    code = ErrorCode.UNCLOSED_OPEN


ERRORS_BY_CODE = {
    ErrorCode.UNKNOWN_TAG: UnknownTagError,
    ErrorCode.ORPHAN_CLOSE: OrphanCloseError,
    ErrorCode.MISMATCHED_CLOSE: MismatchedCloseError,
    ErrorCode.UNCLOSED_OPEN: UnclosedOpenError,
}


# --- Input errors (raised by the document reader, never by the core) ---


class InputError(ValidatorError):
    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class EmptyDocumentError(InputError):
    pass


class UnreadableDocumentError(InputError):
    pass
