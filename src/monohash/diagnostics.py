"""Cause-chain traversal and rendering for export parse failures."""

from __future__ import annotations

from collections.abc import Iterator

from monohash.errors import ExportParseError
from monohash.models import DiagnosticOptions

_DEFAULT_OPTIONS = DiagnosticOptions()


def cause_of(
    error: BaseException, options: DiagnosticOptions | None = None
) -> BaseException | None:
    """Return the next link in the cause chain of ``error``, if any."""
    options = options or _DEFAULT_OPTIONS
    if isinstance(error, ExportParseError) and isinstance(error.cause, BaseException):
        return error.cause
    if error.__cause__ is not None:
        return error.__cause__
    if options.follow_context and not error.__suppress_context__:
        return error.__context__
    return None


def iter_cause_chain(
    error: BaseException, options: DiagnosticOptions | None = None
) -> Iterator[BaseException]:
    """Yield ``error`` followed by each underlying cause, ending at the root."""
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = cause_of(current, options)


def root_cause(error: BaseException, options: DiagnosticOptions | None = None) -> BaseException:
    """Return the deepest error reachable from ``error``."""
    root = error
    for root in iter_cause_chain(error, options):
        pass
    return root


def format_diagnostic(error: BaseException, options: DiagnosticOptions | None = None) -> str:
    """Render ``error`` and its causes as a multi-line operator diagnostic.

    The first line is ``error: <message>``. Each cause follows on its own
    ``  caused by:`` line. A cause that is not an exception is shown by its
    repr right after the error holding it. Links past ``max_depth`` are
    collapsed into a trailing ``  ... (N more)`` line. Never raises.
    """
    options = options or _DEFAULT_OPTIONS
    chain = list(iter_cause_chain(error, options))
    lines = [f"error: {_safe_str(error) or type(error).__name__}"]
    lines.extend(_opaque_cause_lines(error))
    for link in chain[1 : options.max_depth]:
        lines.append(f"  caused by: {_describe(link, options)}")
        lines.extend(_opaque_cause_lines(link))
    hidden = len(chain) - options.max_depth
    if hidden > 0:
        lines.append(f"  ... ({hidden} more)")
    return "\n".join(lines)


def _describe(error: BaseException, options: DiagnosticOptions) -> str:
    text = _safe_str(error)
    if not options.include_type_names:
        return text or type(error).__name__
    if not text:
        return type(error).__name__
    return f"{type(error).__name__}: {text}"


def _opaque_cause_lines(error: BaseException) -> list[str]:
    if not isinstance(error, ExportParseError):
        return []
    cause = error.cause
    if cause is None or isinstance(cause, BaseException):
        return []
    try:
        text = repr(cause)
    except Exception:  # noqa: BLE001
        text = f"<unprintable {type(cause).__name__} object>"
    return [f"  caused by: {text}"]


def _safe_str(error: BaseException) -> str:
    try:
        return str(error)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(error).__name__} object>"
