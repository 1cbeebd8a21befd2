# tests/core/test_document_reader.py
import pytest

from grammar_validator.errors import EmptyDocumentError, InputError, UnreadableDocumentError
from validator_shell.core.services.document_reader_service import DocumentReaderService


@pytest.fixture
def reader():
    return DocumentReaderService()


def test_read_returns_full_text(reader, tmp_path):
    """De volledige inhoud, inclusief regeleinden, wordt teruggegeven."""
    doc = tmp_path / "doc.html"
    doc.write_text("<html>\n</html>\n", encoding="utf-8")
    assert reader.read(doc) == "<html>\n</html>\n"


def test_read_missing_file(reader, tmp_path):
    with pytest.raises(UnreadableDocumentError) as exc_info:
        reader.read(tmp_path / "z.html")
    assert "Invalid file name" in str(exc_info.value)
    assert exc_info.value.path.endswith("z.html")


def test_read_directory(reader, tmp_path):
    with pytest.raises(UnreadableDocumentError):
        reader.read(tmp_path)


def test_read_empty_file(reader, tmp_path):
    """Scenario 6: een leeg bestand is een invoerfout, geen validatiefout."""
    doc = tmp_path / "i.html"
    doc.write_text("")
    with pytest.raises(EmptyDocumentError) as exc_info:
        reader.read(doc)
    assert isinstance(exc_info.value, InputError)
    assert str(exc_info.value) == "The file is empty and it is not valid"


def test_read_whitespace_only_file_is_not_empty(reader, tmp_path):
    doc = tmp_path / "blank.html"
    doc.write_text("\n")
    assert reader.read(doc) == "\n"


def test_read_undecodable_file(reader, tmp_path):
    doc = tmp_path / "binary.html"
    doc.write_bytes(b"\xff\xfe<p>")
    with pytest.raises(UnreadableDocumentError):
        reader.read(doc)
