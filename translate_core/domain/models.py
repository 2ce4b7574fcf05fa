from __future__ import annotations

from dataclasses import dataclass
from typing import Final

HISTORY_MAX_ENTRIES: Final[int] = 10


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    code: str
    name: str


@dataclass(frozen=True, slots=True)
class TranslationRequest:
    source_text: str
    from_code: str
    to_code: str


@dataclass(frozen=True, slots=True)
class TranslationResult:
    translated_text: str
    provider_name: str
    detected_from_code: str | None = None


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    input_text: str
    output_text: str
    from_code: str
    to_code: str
    timestamp: str

    def to_dict(self) -> dict[str, str]:
        return {
            "input": self.input_text,
            "output": self.output_text,
            "from": self.from_code,
            "to": self.to_code,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> "HistoryEntry":
        values: dict[str, str] = {}
        for key in ("input", "output", "from", "to", "timestamp"):
            value = payload.get(key)
            if not isinstance(value, str):
                raise ValueError(f"History entry field {key!r} is not a string.")
            values[key] = value
        return cls(
            input_text=values["input"],
            output_text=values["output"],
            from_code=values["from"],
            to_code=values["to"],
            timestamp=values["timestamp"],
        )
