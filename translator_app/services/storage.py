from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path

from translate_core.models import PersistenceError


def _default_values() -> dict[str, str]:
    return {}


@dataclass(slots=True)
class MemoryStorage:
    _values: dict[str, str] = field(default_factory=_default_values)

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


@dataclass(slots=True)
class JsonFileStorage:
    """String key/value pairs kept in a single JSON object on disk.

    Every write rewrites the whole file before returning.
    """

    path: Path

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._read_for_update()
        values[key] = value
        self._write(values)

    def remove(self, key: str) -> None:
        values = self._read_for_update()
        if key not in values:
            return
        del values[key]
        self._write(values)

    def _read_for_update(self) -> dict[str, str]:
        # A corrupt file is replaced on the next write.
        try:
            return self._read()
        except PersistenceError as exc:
            if isinstance(exc.__cause__, OSError):
                raise
            return {}

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw_data = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot read {self.path}") from exc
        if not raw_data.strip():
            return {}
        try:
            payload: object = json.loads(raw_data)
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"Corrupt storage file {self.path}") from exc
        if not isinstance(payload, dict):
            raise PersistenceError(f"Corrupt storage file {self.path}")
        return {
            key: value
            for key, value in payload.items()
            if isinstance(key, str) and isinstance(value, str)
        }

    def _write(self, values: dict[str, str]) -> None:
        data = json.dumps(values, ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(data, encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self.path}") from exc
