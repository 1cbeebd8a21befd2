# tests/core/test_tokenizer.py
import pytest

from grammar_validator.model import Token, TokenKind
from grammar_validator.services.tokenizer_service import tokenize


def _texts(tokens):
    return [t.text for t in tokens]


def test_tokenize_tags_only():
    """Test een document dat alleen uit tags bestaat."""
    tokens = tokenize("<html><head></head></html>")
    assert _texts(tokens) == ["<html>", "<head>", "</head>", "</html>"]
    assert [t.offset for t in tokens] == [0, 6, 12, 19]


def test_tokenize_content_between_tags():
    """Tekst tussen tags wordt een content-token met de juiste offset."""
    tokens = tokenize("<p>text</p>")
    assert _texts(tokens) == ["<p>", "text", "</p>"]
    assert tokens[1].offset == 3
    assert tokens[1].kind is TokenKind.CONTENT


@pytest.mark.parametrize("blank", [" ", "\n", "\t", "  \n\t  ", ""])
def test_tokenize_drops_blank_content(blank):
    """Witruimte tussen tags levert geen token op."""
    assert _texts(tokenize(f"<p>{blank}</p>")) == ["<p>", "</p>"]


def test_tokenize_keeps_content_with_surrounding_whitespace():
    tokens = tokenize("<p>\n  hello\n</p>")
    assert _texts(tokens) == ["<p>", "\n  hello\n", "</p>"]


def test_tokenize_leading_content():
    """Inhoud vóór de eerste tag blijft volledig behouden."""
    tokens = tokenize("hello<p></p>")
    assert _texts(tokens) == ["hello", "<p>", "</p>"]
    assert tokens[0].offset == 0


def test_tokenize_ignores_trailing_content():
    assert _texts(tokenize("<p></p>tail")) == ["<p>", "</p>"]


def test_tokenize_stray_closing_bracket():
    """Een losse '>' sluit een tag-token af vanaf de vorige delimiter."""
    tokens = tokenize("<p>a>b</p>")
    assert _texts(tokens) == ["<p>", ">a>", "b", "</p>"]
    assert tokens[1].is_tag


def test_tokenize_tag_spanning_lines():
    tokens = tokenize("<html\n>")
    assert _texts(tokens) == ["<html\n>"]


def test_tokenize_empty_text():
    assert tokenize("") == []


def test_tokenize_is_repeatable():
    """Twee keer tokenizen van dezelfde tekst geeft exact dezelfde tokens."""
    text = "<html><body><p>a</p><br/></body></html>"
    assert tokenize(text) == tokenize(text)


def test_token_is_immutable():
    token = Token(text="<p>", offset=0)
    with pytest.raises(Exception):
        token.text = "<li>"
