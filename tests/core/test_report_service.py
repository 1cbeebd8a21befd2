# tests/core/test_report_service.py
from grammar_validator.controllers.validate_controller import validate_text
from grammar_validator.model import ErrorCode, ValidationIssue
from validator_shell.core.services.report_service import ReportContext, ReportService


def _issue(token, offset=None):
    return ValidationIssue(code=ErrorCode.ORPHAN_CLOSE, token=token, reason="no open tags left to close", offset=offset)


def test_locate_uses_offset():
    text = "<html>\n</p>\n"
    assert ReportService.locate(text, _issue("</p>", offset=7)) == (2, 0)


def test_locate_offset_beats_earlier_occurrence():
    """De offset van de tokenizer wint van een eerdere tekstuele match."""
    text = "<p>x</p>\n</p>"
    issue = validate_text(text).issue
    assert issue.offset == 9
    assert ReportService.locate(text, issue) == (2, 0)


def test_locate_rescans_without_offset():
    """Zonder offset wordt de eerste regel met het token gebruikt."""
    text = "<p>x</p>\n</p>"
    assert ReportService.locate(text, _issue("</p>")) == (1, 4)


def test_locate_rescans_when_offset_is_stale():
    text = "<html>\n  </p>"
    assert ReportService.locate(text, _issue("</p>", offset=0)) == (2, 2)


def test_locate_not_found():
    assert ReportService.locate("<html>", _issue("</p>")) is None


def test_render_full_report():
    text = "<html>\n  <body>\n</html>"
    issue = validate_text(text).issue
    lines = ReportService().render(ReportContext(filename="x.html", text=text), issue)
    assert lines == [
        "1: <html>",
        "2:   <body>",
        "3: </html>",
        "   ^^^^^^^",
        "[ERROR] Line 3: </html> no matching opening tag; expected to close body",
    ]


def test_render_only_error_line():
    text = "<html>\n  <body>\n</html>"
    issue = validate_text(text).issue
    lines = ReportService(show_preceding_lines=False).render(ReportContext(filename="x.html", text=text), issue)
    assert lines[0] == "3: </html>"
    assert len(lines) == 3


def test_render_keeps_tabs_in_marker():
    text = "\t<div>"
    issue = validate_text(text).issue
    lines = ReportService(caret="~").render(ReportContext(filename="x.html", text=text), issue)
    assert lines[1] == "   \t~~~~~"
    assert lines[2] == "[ERROR] Line 1: <div> not a valid tag in the given grammar"


def test_render_marker_stops_at_end_of_line():
    text = "<p>\n<html\n>"
    issue = validate_text(text).issue
    assert issue.token == "<html\n>"
    lines = ReportService().render(ReportContext(filename="x.html", text=text), issue)
    assert lines[-2] == "   ^^^^^"


def test_render_unlocatable_issue():
    lines = ReportService().render(ReportContext(filename="x.html", text="<html>"), _issue("</p>"))
    assert lines == ["[ERROR] x.html: </p> no open tags left to close"]
