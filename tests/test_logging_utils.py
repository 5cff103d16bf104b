from __future__ import annotations

import logging

import pytest

from monohash.errors import ExportParseError
from monohash.logging_utils import configure_logging, log_error_chain

LOGGER_NAME = "monohash.tests"


def test_log_error_chain_emits_single_record(caplog: pytest.LogCaptureFixture) -> None:
    error = ExportParseError("failed to read export file", OSError("disk gone"))
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    log_error_chain(logging.getLogger(LOGGER_NAME), error)

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.ERROR
    assert record.getMessage() == (
        "error: failed to read export file\n  caused by: OSError: disk gone"
    )
    assert record.exc_info is None


def test_log_error_chain_attaches_traceback_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    error = ExportParseError("bad header")
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

    log_error_chain(logging.getLogger(LOGGER_NAME), error, level=logging.WARNING)

    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert record.exc_info is not None
    assert record.exc_info[1] is error


@pytest.mark.parametrize(("verbose", "level"), [(True, logging.DEBUG), (False, logging.INFO)])
def test_configure_logging_sets_level(
    monkeypatch: pytest.MonkeyPatch, verbose: bool, level: int
) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(verbose)

    assert calls == [{"level": level, "format": "%(levelname)s %(message)s"}]


def test_log_error_chain_survives_unprintable_cause(caplog: pytest.LogCaptureFixture) -> None:
    class _UnprintableError(Exception):
        def __str__(self) -> str:
            raise RuntimeError("str exploded")

    error = ExportParseError("failed to read export file", _UnprintableError())
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)

    log_error_chain(logging.getLogger(LOGGER_NAME), error)

    assert "<unprintable _UnprintableError object>" in caplog.records[0].getMessage()
