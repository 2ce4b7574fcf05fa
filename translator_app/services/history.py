from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Final

from translate_core.models import (
    HISTORY_MAX_ENTRIES,
    HistoryEmptyError,
    HistoryEntry,
    PersistenceError,
)
from translator_app import telemetry
from translator_app.application.ports import KeyValueStorage
from translator_app.telemetry import TelemetryEvent

HISTORY_STORAGE_KEY: Final[str] = "translationHistory"
EXPORT_FILE_NAME: Final[str] = "translation_history.txt"
EXPORT_HEADER: Final[str] = "Translation History\n\n"


def _default_items() -> list[HistoryEntry]:
    return []


@dataclass(slots=True)
class HistoryStore:
    """Most-recent-first log of translations mirrored to key/value storage.

    Storage problems never escape: an unreadable log loads as empty and a
    failed write leaves the in-memory log authoritative.
    """

    storage: KeyValueStorage
    max_entries: int = HISTORY_MAX_ENTRIES
    key: str = HISTORY_STORAGE_KEY
    _items: list[HistoryEntry] = field(default_factory=_default_items)

    def load(self) -> list[HistoryEntry]:
        self._items = self._read_persisted()
        return list(self._items)

    def record(self, entry: HistoryEntry) -> None:
        self._items.insert(0, entry)
        del self._items[self.max_entries :]
        self._persist()

    def clear(self) -> None:
        self._items = []
        try:
            self.storage.remove(self.key)
        except PersistenceError as exc:
            telemetry.log_error(
                TelemetryEvent.HISTORY_PERSIST_FAILED, exc, operation="clear"
            )

    def snapshot(self) -> list[HistoryEntry]:
        return list(self._items)

    def export(self) -> str:
        if not self._items:
            raise HistoryEmptyError("No history to export.")
        lines = [
            f"{index}. {item.input_text} → {item.output_text} "
            f"({item.from_code} → {item.to_code}, {item.timestamp})"
            for index, item in enumerate(self._items, start=1)
        ]
        return "\n".join(lines) + "\n"

    def write_export(self, directory: Path) -> Path:
        content = EXPORT_HEADER + self.export()
        path = directory / EXPORT_FILE_NAME
        try:
            directory.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot write {path}") from exc
        telemetry.log_event(TelemetryEvent.HISTORY_EXPORTED, entries=len(self._items))
        return path

    def _read_persisted(self) -> list[HistoryEntry]:
        try:
            raw_data = self.storage.get(self.key)
        except PersistenceError as exc:
            telemetry.log_error(TelemetryEvent.HISTORY_LOAD_FAILED, exc)
            return []
        if raw_data is None:
            return []
        try:
            return _parse_log(raw_data)[: self.max_entries]
        except ValueError as exc:
            telemetry.log_error(TelemetryEvent.HISTORY_LOAD_FAILED, exc)
            return []

    def _persist(self) -> None:
        payload = [item.to_dict() for item in self._items]
        data = json.dumps(payload, ensure_ascii=False)
        try:
            self.storage.set(self.key, data)
        except PersistenceError as exc:
            telemetry.log_error(
                TelemetryEvent.HISTORY_PERSIST_FAILED, exc, operation="record"
            )


def _parse_log(raw_data: str) -> list[HistoryEntry]:
    payload: object = json.loads(raw_data)
    if not isinstance(payload, list):
        raise ValueError("History payload is not a list.")
    entries: list[HistoryEntry] = []
    for item in payload:
        if not isinstance(item, dict):
            raise ValueError("History item is not an object.")
        entries.append(HistoryEntry.from_dict(item))
    return entries
