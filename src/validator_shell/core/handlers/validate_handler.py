# ============================================
# file: src/validator_shell/core/handlers/validate_handler.py
# ============================================
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import PathCompleter
from prompt_toolkit.history import FileHistory

from grammar_validator.controllers.validate_controller import ValidateController
from grammar_validator.errors import InputError
from validator_shell.core.controllers.batch_controller import BatchValidateController
from validator_shell.core.managers.config_manager import config_manager
from validator_shell.core.services.document_reader_service import DocumentReaderService
from validator_shell.core.services.report_service import ReportContext, ReportService
from validator_shell.core.utils.configure_logging import configure_logger_from_config
from validator_shell.core.utils.path_utils import PathUtils
from validator_shell.model import SampleDocument

logger = logging.getLogger(__name__)

validate_help_text = """
  htmlval [FILE ...] [-o <csv>] [--no-progress] [--log-level LEVEL]
      Validates HTML documents against the built-in grammar.
      One file prints a detailed report; several files or a directory print
      a summary table, which can be exported to CSV with -o.
      Without FILE the shell asks for a filename.
""".strip()

SAMPLE_DOCUMENTS = [
    SampleDocument(name="a.html", expectation="valid"),
    SampleDocument(name="b.html", expectation="valid"),
    SampleDocument(name="c.html", expectation="valid"),
    SampleDocument(name="d.html", expectation="invalid - orphan closing tag"),
    SampleDocument(name="e.html", expectation="invalid - wrong closing tags order"),
    SampleDocument(name="f.html", expectation="invalid - tag not in grammar"),
    SampleDocument(name="g.html", expectation="invalid - orphan closing tag"),
    SampleDocument(name="h.html", expectation="invalid - orphan opening tag"),
    SampleDocument(name="i.html", expectation="invalid - empty file"),
    SampleDocument(name="z.html", expectation="invalid - non-existent file"),
]

PromptFn = Callable[[Optional[Path]], Optional[str]]


def _resolve_samples_dir() -> Optional[Path]:
    try:
        samples_dir = PathUtils.get_samples_dir(config_manager.get_nested("samples.dir", "samples"))
    except FileNotFoundError:
        logger.debug("No project root found; sample documents are unavailable.")
        return None
    return samples_dir if samples_dir.is_dir() else None


def prompt_for_filename(samples_dir: Optional[Path]) -> Optional[str]:
    """Lists the sample documents and asks the user for a file to validate."""
    print("=============== HTML Validator ===============")
    if samples_dir is not None:
        print(f"Provided test files (in {samples_dir}):")
        for sample in SAMPLE_DOCUMENTS:
            print(f"{sample.name} ({sample.expectation})")

    session = PromptSession(
        history=FileHistory(str(PathUtils.get_prompt_history_file())),
        completer=PathCompleter(expanduser=True),
    )
    try:
        answer = session.prompt("\nEnter the name of an html file to validate: ").strip()
    except (EOFError, KeyboardInterrupt):
        return None
    return answer or None


def _resolve_target(name: str, samples_dir: Optional[Path]) -> Path:
    # A bare sample name ('a.html') is looked up in the samples directory.
    path = Path(name).expanduser()
    if not path.exists() and samples_dir is not None and (samples_dir / name).exists():
        return samples_dir / name
    return path


def _validate_single(path: Path) -> int:
    print(f"Validating {path}...")
    try:
        text = DocumentReaderService().read(path)
    except InputError as e:
        logger.error("Cannot validate %s: %s", path, e)
        print(f"ERROR: {e}")
        return 1

    result = ValidateController().validate_text(text)
    if result.valid:
        print(f"{path} is a valid HTML file according to the given grammar.")
        return 0

    reporter = ReportService.from_config(config_manager)
    print()
    for line in reporter.render(ReportContext(filename=str(path), text=text), result.issue):
        print(line)
    return 1


def _validate_batch(targets: List[str], export: Optional[str], show_progress: bool) -> int:
    paths = BatchValidateController.collect_paths(targets, config_manager.get_nested("batch.pattern", "*.html"))
    if not paths:
        print("❌ Error: No documents found to validate.")
        return 1

    controller = BatchValidateController(show_progress=show_progress)
    entries = controller.run(paths)
    df = controller.to_dataframe(entries)
    print(df.to_string(index=False))

    invalid = int((~df["valid"].astype(bool)).sum())
    print(f"\n{len(entries) - invalid}/{len(entries)} documents are valid.")

    if export:
        try:
            df.to_csv(export, index=False)
        except OSError as e:
            logger.error("Export failed: %s", e, exc_info=True)
            print(f"❌ Export error: {e}")
            return 1
        print(f"✅ Summary exported to {export}")

    return 0 if invalid == 0 else 1


def handle_validate(args: List[str], prompt: Optional[PromptFn] = None) -> int:
    """
    Entry point of the 'htmlval' command.

    Args:
        args: Command line arguments (without the program name).
        prompt: Replaces the interactive filename prompt, mainly for tests.

    Returns:
        0 when every document is valid, 1 otherwise.
    """
    parser = argparse.ArgumentParser(
        prog="htmlval",
        description="Validate HTML files against the built-in grammar.",
        epilog=validate_help_text,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("paths", metavar="FILE", nargs="*", help="Files or directories to validate.")
    parser.add_argument("--export", "-o", help="Write the batch summary to this CSV file.")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar in batch mode.")
    parser.add_argument("--log-level", help="Override 'debug.level' from settings.json.")

    try:
        pargs = parser.parse_args(args)
    except SystemExit as e:
        return 0 if e.code in (0, None) else 1

    if pargs.log_level:
        configure_logger_from_config(config_manager, level_override=pargs.log_level)

    if not pargs.paths:
        samples_dir = _resolve_samples_dir()
        name = (prompt or prompt_for_filename)(samples_dir)
        if not name:
            print("No filename given.")
            return 1
        return _validate_single(_resolve_target(name, samples_dir))

    single = len(pargs.paths) == 1 and not Path(pargs.paths[0]).is_dir() and not pargs.export
    if single:
        return _validate_single(Path(pargs.paths[0]))

    show_progress = not pargs.no_progress and bool(config_manager.get_nested("batch.show_progress", True))
    return _validate_batch(pargs.paths, pargs.export, show_progress)
