# src/validator_shell/core/utils/configure_logging.py
import logging
import sys
from typing import Any, Dict, Optional, Union

from tqdm import tqdm

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"

Level = Union[str, int]


class LogWithTqdm(logging.Handler):
    """
    Sends log records through `tqdm.write()` so that they do not tear up the
    progress bar of a batch run.
    """
    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level: Optional[Level], fallback: int) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if isinstance(resolved, int):
            return resolved
    return fallback


def configure_logger(
        general_level: Level = 'WARNING',
        module_specific_levels: Optional[Dict[str, Level]] = None,
        silenced_loggers: Optional[Dict[str, Level]] = None,
) -> None:
    """
    Installs the tqdm-aware handler on the root logger and applies per-logger levels.

    Args:
        general_level: Level for the root logger, as a name ('INFO') or a number.
        module_specific_levels: Logger name -> level, e.g. {'grammar_validator': 'DEBUG'}.
        silenced_loggers: Logger name -> level for noisy third-party loggers (defaults to CRITICAL).
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.WARNING))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    for name, level in (silenced_loggers or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))


def configure_logger_from_config(config: Any, level_override: Optional[Level] = None) -> None:
    """Reads the 'debug.*' keys of a ConfigManager and configures logging with them."""
    configure_logger(
        level_override or config.get_nested("debug.level", "WARNING"),
        module_specific_levels=config.get_nested("debug.module_levels", {}),
        silenced_loggers=config.get_nested("debug.silenced_loggers", {}),
    )
