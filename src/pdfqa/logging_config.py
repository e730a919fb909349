# src/pdfqa/logging_config.py
"""Logging configuration for the pdfqa command line."""

from __future__ import annotations

import logging
import logging.config

from rich.console import Console


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route pdfqa log records through Rich.

    Library modules only create loggers; handlers are installed here, by the
    application layer.

    Args:
        verbose: Log at DEBUG instead of WARNING
        console: Console to write to. Default: a stderr console
    """
    level = "DEBUG" if verbose else "WARNING"
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {
                "rich": {
                    "()": "rich.logging.RichHandler",
                    "console": console or Console(stderr=True),
                    "show_path": verbose,
                    "rich_tracebacks": verbose,
                },
            },
            "loggers": {
                "pdfqa": {
                    "level": level,
                    "handlers": ["rich"],
                    "propagate": False,
                },
                # LiteLLM is chatty at INFO
                "LiteLLM": {"level": "WARNING"},
            },
        }
    )
