from __future__ import annotations

import logging
import sys

from validator_shell.core.handlers.validate_handler import handle_validate
from validator_shell.core.managers.config_manager import config_manager
from validator_shell.core.utils.configure_logging import configure_logger_from_config

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the validator from the command line."""
    # Initialize logging based on configuration
    configure_logger_from_config(config_manager)
    args = sys.argv[1:] if argv is None else argv
    logger.debug("Starting htmlval with arguments: %s", args)
    return handle_validate(args)


if __name__ == "__main__":
    sys.exit(main())
