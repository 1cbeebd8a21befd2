# src/validator_shell/core/services/report_service.py
from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel

from grammar_validator.model import ValidationIssue

logger = logging.getLogger(__name__)


class ReportContext(BaseModel):
    """Everything the reporter needs to know about the document that failed."""
    filename: str
    text: str


class ReportService:
    """
    Turns a ValidationIssue into console lines: the source lines up to the
    error, a caret marker under the offending token, and the error message.
    """

    def __init__(self, show_preceding_lines: bool = True, caret: str = "^"):
        self.show_preceding_lines = show_preceding_lines
        self.caret = caret or "^"

    @classmethod
    def from_config(cls, config: Any) -> "ReportService":
        return cls(
            show_preceding_lines=bool(config.get_nested("report.show_preceding_lines", True)),
            caret=str(config.get_nested("report.caret", "^")),
        )

    @staticmethod
    def locate(text: str, issue: ValidationIssue) -> Optional[Tuple[int, int]]:
        """
        Finds where the offending token sits in the source.

        Uses the offset recorded by the tokenizer when it still points at the
        token; otherwise falls back to the first line containing the token text.

        Returns:
            (line number starting at 1, column starting at 0), or None if not found.
        """
        token = issue.token
        offset = issue.offset
        if offset is not None and 0 <= offset < len(text) and text.startswith(token, offset):
            line_no = text.count("\n", 0, offset) + 1
            column = offset - (text.rfind("\n", 0, offset) + 1)
            return line_no, column

        if token:
            for line_no, line in enumerate(text.split("\n"), start=1):
                column = line.find(token)
                if column >= 0:
                    return line_no, column

        logger.warning("Could not locate token %r in the document.", token)
        return None

    def render(self, context: ReportContext, issue: ValidationIssue) -> List[str]:
        location = self.locate(context.text, issue)
        if location is None:
            return [f"[ERROR] {context.filename}: {issue.format_message()}"]

        line_no, column = location
        lines = context.text.split("\n")
        first = 1 if self.show_preceding_lines else line_no

        out = [f"{n}: {lines[n - 1]}" for n in range(first, line_no + 1)]

        error_line = lines[line_no - 1]
        # Tabs stay tabs so the marker lines up with the printed line.
        padding = "".join("\t" if ch == "\t" else " " for ch in error_line[:column])
        width = max(1, min(len(issue.token), len(error_line) - column))
        prefix = " " * len(f"{line_no}: ")
        out.append(prefix + padding + self.caret * width)

        out.append(f"[ERROR] Line {line_no}: {issue.format_message()}")
        return out
