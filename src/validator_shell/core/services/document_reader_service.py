# src/validator_shell/core/services/document_reader_service.py
import logging
from pathlib import Path
from typing import Union

from grammar_validator.errors import EmptyDocumentError, UnreadableDocumentError

logger = logging.getLogger(__name__)


class DocumentReaderService:
    """Loads a document from disk for validation."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: Union[str, Path]) -> str:
        """
        Reads the full text of a document.

        Raises:
            UnreadableDocumentError: The path does not exist, is not a file, or cannot be decoded.
            EmptyDocumentError: The file has no content at all.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise UnreadableDocumentError(
                str(path),
                f"Invalid file name '{path}'. Check if the filename is correct and the file exists."
            )

        try:
            text = file_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read %s: %s", file_path, e, exc_info=True)
            raise UnreadableDocumentError(str(path), f"Could not read '{path}': {e}") from e

        if not text:
            raise EmptyDocumentError(str(path), "The file is empty and it is not valid")

        logger.debug("Read %d characters from %s", len(text), file_path)
        return text
