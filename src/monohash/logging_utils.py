"""Logging helpers."""

from __future__ import annotations

import logging

from monohash.diagnostics import format_diagnostic
from monohash.models import DiagnosticOptions


def configure_logging(verbose: bool) -> None:
    """Configure logging output."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")


def log_error_chain(
    logger: logging.Logger,
    error: BaseException,
    options: DiagnosticOptions | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log ``error`` and its cause chain as a single record."""
    exc_info = error if logger.isEnabledFor(logging.DEBUG) else None
    logger.log(level, "%s", format_diagnostic(error, options), exc_info=exc_info)
