from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import TypeAlias

from translate_core.languages import speech_locale
from translate_core.models import (
    HistoryEmptyError,
    HistoryEntry,
    PersistenceError,
    TranslateError,
    TranslationRequest,
    TranslationResult,
    ValidationError,
)
from translator_app import telemetry
from translator_app.application.ports import (
    ClipboardPort,
    HistoryPort,
    NotifierPort,
    ShareSink,
    SpeechInputPort,
    SpeechOutputPort,
    TranslatorPort,
)
from translator_app.application.query import validate_request
from translator_app.application.share import build_share_links, format_bilingual
from translator_app.config import DEFAULT_SOURCE_LANG, DEFAULT_TARGET_LANG
from translator_app.notifications import messages
from translator_app.notifications.messages import Notification
from translator_app.telemetry import TelemetryEvent

SubmitOutcome: TypeAlias = TranslationResult | TranslateError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def local_timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True, slots=True)
class SessionState:
    text: str
    from_code: str
    to_code: str
    translated_text: str
    provider_name: str
    detected_from_code: str | None
    error: str
    loading: bool

    @classmethod
    def initial(
        cls,
        from_code: str = DEFAULT_SOURCE_LANG,
        to_code: str = DEFAULT_TARGET_LANG,
    ) -> "SessionState":
        return cls(
            text="",
            from_code=from_code,
            to_code=to_code,
            translated_text="",
            provider_name="",
            detected_from_code=None,
            error="",
            loading=False,
        )


def _task_set() -> set[asyncio.Task[SubmitOutcome]]:
    return set()


@dataclass(slots=True)
class SessionController:
    """Owns the state of one translation session.

    Every ``submit`` takes a new request id; only the response for the latest
    id is applied to the state, older ones are still recorded in history.
    """

    translator: TranslatorPort
    history: HistoryPort
    notifier: NotifierPort | None = None
    speech_input: SpeechInputPort | None = None
    speech_output: SpeechOutputPort | None = None
    clipboard: ClipboardPort | None = None
    share_sink: ShareSink | None = None
    clock: Callable[[], str] = local_timestamp
    _state: SessionState = field(default_factory=SessionState.initial)
    _sequence: int = 0
    _tasks: set[asyncio.Task[SubmitOutcome]] = field(default_factory=_task_set)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def request_id(self) -> int:
        return self._sequence

    def set_text(self, text: str) -> SessionState:
        self._state = replace(self._state, text=text)
        return self._state

    def set_languages(self, from_code: str, to_code: str) -> SessionState:
        self._state = replace(self._state, from_code=from_code, to_code=to_code)
        return self._state

    async def submit(self, text: str, from_code: str, to_code: str) -> SubmitOutcome:
        self._sequence += 1
        request_id = self._sequence
        self._state = replace(
            self._state,
            text=text,
            from_code=from_code,
            to_code=to_code,
            translated_text="",
            provider_name="",
            detected_from_code=None,
            error="",
        )
        try:
            request = validate_request(text, from_code, to_code)
        except ValidationError as exc:
            telemetry.log_event(
                TelemetryEvent.TRANSLATION_VALIDATION_FAILED,
                reason=exc.reason.value,
                request_id=request_id,
            )
            self._state = replace(
                self._state,
                error=messages.validation_message(exc.reason),
                loading=False,
            )
            return exc

        self._state = replace(self._state, loading=True)
        try:
            outcome = await self._translate(request, request_id)
        finally:
            if request_id == self._sequence:
                self._state = replace(self._state, loading=False)
        if request_id != self._sequence:
            telemetry.log_event(
                TelemetryEvent.TRANSLATION_STALE_DISCARDED,
                request_id=request_id,
                latest_id=self._sequence,
            )
            return outcome
        self._apply(outcome)
        return outcome

    def swap(
        self, from_code: str | None = None, to_code: str | None = None
    ) -> tuple[str, str]:
        current_from = self._state.from_code if from_code is None else from_code
        current_to = self._state.to_code if to_code is None else to_code
        self._state = replace(
            self._state,
            from_code=current_to,
            to_code=current_from,
            translated_text="",
            provider_name="",
            detected_from_code=None,
            error="",
        )
        return current_to, current_from

    def clear(self) -> SessionState:
        self._state = replace(
            self._state,
            text="",
            translated_text="",
            provider_name="",
            detected_from_code=None,
            error="",
        )
        return self._state

    def history_entries(self) -> list[HistoryEntry]:
        return self.history.snapshot()

    def clear_history(self) -> None:
        self.history.clear()
        self._notify(messages.history_cleared())

    def export_history(self, directory: Path) -> Path | None:
        try:
            path = self.history.write_export(directory)
        except HistoryEmptyError:
            self._notify(messages.history_empty())
            return None
        except PersistenceError as exc:
            telemetry.log_error(TelemetryEvent.HISTORY_EXPORT_FAILED, exc)
            self._notify(messages.history_export_failed())
            return None
        self._notify(messages.history_exported(path))
        return path

    def start_listening(self) -> bool:
        if self.speech_input is None:
            self._notify(messages.speech_unsupported())
            return False
        self.speech_input.listen(
            self._state.from_code, self._handle_spoken, self._handle_speech_error
        )
        return True

    async def wait_pending(self) -> None:
        if self._tasks:
            await asyncio.gather(*list(self._tasks))

    def speak(self) -> bool:
        translated = self._state.translated_text
        if not translated:
            return False
        if self.speech_output is None:
            self._notify(messages.speech_output_unsupported())
            return False
        try:
            self.speech_output.speak(translated, speech_locale(self._state.to_code))
        except Exception as exc:
            telemetry.log_error(TelemetryEvent.SPEECH_FAILED, exc, direction="output")
            self._notify(messages.speech_output_failed())
            return False
        return True

    def copy_translated(self) -> bool:
        translated = self._state.translated_text
        if not translated:
            return False
        if self._copy(translated):
            self._notify(messages.copy_success())
            return True
        self._notify(messages.copy_failed())
        return False

    def copy_both(self) -> bool:
        state = self._state
        if not state.text or not state.translated_text:
            return False
        combined = format_bilingual(
            state.text, state.translated_text, state.from_code, state.to_code
        )
        if self._copy(combined):
            self._notify(messages.copy_both_success())
            return True
        self._notify(messages.copy_both_failed())
        return False

    def share(self) -> bool:
        state = self._state
        if not state.translated_text:
            return False
        if self.share_sink is None:
            self._notify(messages.share_unsupported())
            return False
        links = build_share_links(
            state.text, state.translated_text, state.from_code, state.to_code
        )
        try:
            opened = self.share_sink.open(links.whatsapp)
        except Exception as exc:
            telemetry.log_error(TelemetryEvent.SHARE_FAILED, exc)
            opened = False
        if not opened:
            self._notify(messages.share_failed())
        return opened

    async def _translate(
        self, request: TranslationRequest, request_id: int
    ) -> SubmitOutcome:
        telemetry.log_event(
            TelemetryEvent.TRANSLATION_REQUEST,
            request_id=request_id,
            from_code=request.from_code,
            to_code=request.to_code,
            **telemetry.text_meta(request.source_text),
        )
        try:
            result = await self.translator.translate(request)
        except TranslateError as exc:
            telemetry.log_error(
                TelemetryEvent.TRANSLATION_FAILED, exc, request_id=request_id
            )
            return exc
        except Exception as exc:
            telemetry.log_error(
                TelemetryEvent.TRANSLATION_FAILED, exc, request_id=request_id
            )
            error = TranslateError("Unexpected translation failure.")
            error.__cause__ = exc
            return error
        self.history.record(
            HistoryEntry(
                input_text=request.source_text,
                output_text=result.translated_text,
                from_code=request.from_code,
                to_code=request.to_code,
                timestamp=self.clock(),
            )
        )
        telemetry.log_event(
            TelemetryEvent.TRANSLATION_SUCCESS,
            request_id=request_id,
            provider=result.provider_name,
            detected=result.detected_from_code,
        )
        return result

    def _apply(self, outcome: SubmitOutcome) -> None:
        if isinstance(outcome, TranslationResult):
            self._state = replace(
                self._state,
                translated_text=outcome.translated_text,
                provider_name=outcome.provider_name,
                detected_from_code=outcome.detected_from_code,
                error="",
            )
            return
        self._state = replace(self._state, error=messages.TRANSLATION_FAILED_MESSAGE)

    def _handle_spoken(self, text: str) -> None:
        self._state = replace(self._state, text=text)
        task = asyncio.ensure_future(
            self.submit(text, self._state.from_code, self._state.to_code)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _handle_speech_error(self, reason: str) -> None:
        telemetry.log_event(
            TelemetryEvent.SPEECH_FAILED, direction="input", reason=reason
        )
        self._notify(messages.speech_failed())

    def _copy(self, text: str) -> bool:
        if self.clipboard is None:
            return False
        try:
            return self.clipboard.copy_text(text)
        except Exception as exc:
            telemetry.log_error(TelemetryEvent.CLIPBOARD_FAILED, exc)
            return False

    def _notify(self, message: Notification) -> None:
        if self.notifier is not None:
            self.notifier.send(message)
