"""Public package API for monohash error reporting."""

from monohash.diagnostics import cause_of, format_diagnostic, iter_cause_chain, root_cause
from monohash.errors import ExportParseError, MonohashError
from monohash.logging_utils import configure_logging, log_error_chain
from monohash.models import DiagnosticOptions

__all__ = [
    "DiagnosticOptions",
    "ExportParseError",
    "MonohashError",
    "cause_of",
    "configure_logging",
    "format_diagnostic",
    "iter_cause_chain",
    "log_error_chain",
    "root_cause",
]
