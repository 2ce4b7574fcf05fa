from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from translate_core.models import HistoryEntry, TranslationRequest, TranslationResult
from translator_app.notifications.messages import Notification


class TranslatorPort(Protocol):
    async def translate(self, request: TranslationRequest) -> TranslationResult: ...


class KeyValueStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class HistoryPort(Protocol):
    def load(self) -> list[HistoryEntry]: ...

    def record(self, entry: HistoryEntry) -> None: ...

    def clear(self) -> None: ...

    def export(self) -> str: ...

    def snapshot(self) -> list[HistoryEntry]: ...

    def write_export(self, directory: Path) -> Path: ...


class SpeechInputPort(Protocol):
    def listen(
        self,
        lang: str,
        on_text: Callable[[str], None],
        on_error: Callable[[str], None],
    ) -> None: ...


class SpeechOutputPort(Protocol):
    def speak(self, text: str, locale: str) -> None: ...


class ClipboardPort(Protocol):
    def copy_text(self, text: str) -> bool: ...


class ShareSink(Protocol):
    def open(self, url: str) -> bool: ...


class NotifierPort(Protocol):
    def send(self, message: Notification) -> None: ...
