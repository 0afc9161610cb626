"""
Logging setup for the aidottxt CLI.

Prompts, previews and the created-file list go to stdout via print;
logging carries diagnostics only (dropped answers, file writes).
Level: INFO with --verbose, else AIDOTTXT_LOG_LEVEL, else WARNING.
"""

import logging
import os


LOG_LEVEL_ENV = "AIDOTTXT_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    if verbose:
        level = logging.INFO
    else:
        level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)
