# src/validator_shell/core/controllers/batch_controller.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd
from tqdm.auto import tqdm

from grammar_validator.controllers.validate_controller import ValidateController
from grammar_validator.errors import InputError
from validator_shell.core.services.document_reader_service import DocumentReaderService
from validator_shell.core.services.report_service import ReportService
from validator_shell.model import BatchEntry

logger = logging.getLogger(__name__)

INPUT_ERROR_CODE = "INPUT_ERROR"
BATCH_COLUMNS = ["path", "valid", "code", "token", "line", "reason"]


class BatchValidateController:
    """
    Validates many documents one after another.

    Each document is read, tokenized and validated on its own; nothing but the
    (immutable) grammar is shared between documents, and a broken file never
    stops the run.
    """

    def __init__(
            self,
            reader: Optional[DocumentReaderService] = None,
            validator: Optional[ValidateController] = None,
            show_progress: bool = True,
    ):
        self.reader = reader or DocumentReaderService()
        self.validator = validator or ValidateController()
        self.show_progress = show_progress

    @staticmethod
    def collect_paths(targets: Iterable[Union[str, Path]], pattern: str = "*.html") -> List[Path]:
        """Expands directories with `pattern` (sorted); files are kept as given."""
        paths: List[Path] = []
        for target in targets:
            target_path = Path(target)
            if target_path.is_dir():
                matches = sorted(p for p in target_path.glob(pattern) if p.is_file())
                logger.debug("Directory %s matched %d documents.", target_path, len(matches))
                paths.extend(matches)
            else:
                paths.append(target_path)
        return paths

    def run(self, paths: Iterable[Union[str, Path]]) -> List[BatchEntry]:
        path_list = list(paths)
        entries: List[BatchEntry] = []

        iterator = tqdm(path_list, desc="Validating", unit="doc", disable=not self.show_progress)
        for path in iterator:
            entries.append(self._validate_one(Path(path)))

        invalid = sum(1 for e in entries if not e.valid)
        logger.info("Batch finished: %d documents, %d invalid.", len(entries), invalid)
        return entries

    def _validate_one(self, path: Path) -> BatchEntry:
        try:
            text = self.reader.read(path)
        except InputError as e:
            logger.warning("Skipping %s: %s", path, e)
            return BatchEntry(path=str(path), valid=False, code=INPUT_ERROR_CODE, reason=str(e))

        result = self.validator.validate_text(text)
        if result.valid:
            return BatchEntry(path=str(path), valid=True)

        issue = result.issue
        location = ReportService.locate(text, issue)
        return BatchEntry(
            path=str(path),
            valid=False,
            code=issue.code.value,
            token=issue.token,
            line=location[0] if location else None,
            reason=issue.reason,
        )

    @staticmethod
    def to_dataframe(entries: List[BatchEntry]) -> pd.DataFrame:
        """Builds the summary table; an empty run still gets the expected columns."""
        if not entries:
            return pd.DataFrame(columns=BATCH_COLUMNS)
        return pd.DataFrame([e.model_dump() for e in entries], columns=BATCH_COLUMNS)
