# src/grammar_validator/model.py (Validator Layer)
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# The closed set of tag names the grammar recognizes. Shared read-only.
GRAMMAR_TAGS = frozenset({"html", "head", "body", "p", "br", "li", "h1", "h2", "ul", "ol"})


class TokenKind(str, Enum):
    TAG = "tag"
    CONTENT = "content"


class TagKind(str, Enum):
    OPEN = "open"
    CLOSE = "close"
    EMPTY = "empty"
    UNKNOWN = "unknown"  # tag shape is fine, but the name is not in the grammar
    INVALID = "invalid"


class ErrorCode(str, Enum):
    UNKNOWN_TAG = "UNKNOWN_TAG"
    ORPHAN_CLOSE = "ORPHAN_CLOSE"
    MISMATCHED_CLOSE = "MISMATCHED_CLOSE"
    UNCLOSED_OPEN = "UNCLOSED_OPEN"


class Token(BaseModel):
    """
    An immutable slice of the source document.

    The kind is not stored; it is derived from the text whenever it is asked for.
    """
    model_config = ConfigDict(frozen=True)

    text: str
    offset: int = Field(description="Index of the first character of the token in the source text.")

    @property
    def kind(self) -> TokenKind:
        # Tag tokens are always closed out by a '>', content never contains one.
        return TokenKind.TAG if self.text.endswith(">") else TokenKind.CONTENT

    @property
    def is_tag(self) -> bool:
        return self.kind is TokenKind.TAG


class TagClassification(BaseModel):
    """Grammar classification of a single tag token."""
    model_config = ConfigDict(frozen=True)

    kind: TagKind
    name: Optional[str] = None


class ValidationIssue(BaseModel):
    """
    Describes the first violation found in a document.

    `token` is the text of the offending token and `offset` its position in the
    source, which is everything a reporter needs to point at it.
    """
    code: ErrorCode
    token: str
    reason: str
    offset: Optional[int] = None
    tag_name: Optional[str] = None
    expected: Optional[str] = None

    def format_message(self) -> str:
        return f"{self.token} {self.reason}"


class ValidationResult(BaseModel):
    valid: bool
    token_count: int = 0
    issue: Optional[ValidationIssue] = None
