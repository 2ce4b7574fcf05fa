from __future__ import annotations

from collections.abc import Iterator
import json
from pathlib import Path

import pytest

from translate_core.models import PersistenceError
from translator_app import telemetry
from translator_app.telemetry import TelemetryEvent


@pytest.fixture
def log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.setenv("TRANSLATOR_LOGGING", "1")
    monkeypatch.setenv("TRANSLATOR_LOG_DIR", str(tmp_path))
    telemetry.shutdown()
    yield tmp_path
    telemetry.shutdown()


def _read_lines(path: Path) -> list[dict[str, object]]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return [json.loads(line) for line in lines]


def test_events_are_written_as_json_lines(log_dir: Path) -> None:
    telemetry.log_event(
        TelemetryEvent.TRANSLATION_REQUEST,
        request_id=1,
        **telemetry.text_meta("hello"),
    )
    try:
        raise PersistenceError("disk full") from OSError("no space left")
    except PersistenceError as exc:
        telemetry.log_error(
            TelemetryEvent.HISTORY_PERSIST_FAILED, exc, operation="record"
        )
    telemetry.shutdown()

    request, failure = _read_lines(log_dir / "translator.log")
    assert request["event"] == "translation.request"
    assert request["level"] == "info"
    assert request["request_id"] == 1
    assert request["text_len"] == 5
    assert "hello" not in json.dumps(request)
    assert failure["event"] == "history.persist_failed"
    assert failure["level"] == "error"
    assert failure["error_type"] == "PersistenceError"
    assert failure["error"] == "disk full"
    assert failure["cause_type"] == "OSError"
    assert failure["operation"] == "record"


def test_log_file_is_appended_across_runs(log_dir: Path) -> None:
    telemetry.log_event(TelemetryEvent.HISTORY_EXPORTED, entries=2)
    telemetry.shutdown()
    telemetry.log_event(TelemetryEvent.HISTORY_EXPORTED, entries=3)
    telemetry.shutdown()

    entries = [line["entries"] for line in _read_lines(log_dir / "translator.log")]
    assert entries == [2, 3]


def test_non_scalar_fields_are_stringified(log_dir: Path) -> None:
    telemetry.log_event(
        TelemetryEvent.SPEECH_FAILED, direction="output", path=log_dir / "x"
    )
    telemetry.shutdown()

    (line,) = _read_lines(log_dir / "translator.log")
    assert line["path"] == str(log_dir / "x")


def test_logging_can_be_disabled(
    log_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TRANSLATOR_LOGGING", "0")

    telemetry.log_event(TelemetryEvent.TRANSLATION_SUCCESS, request_id=1)

    assert not (log_dir / "translator.log").exists()
