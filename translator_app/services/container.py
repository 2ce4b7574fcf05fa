from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from translate_core.providers.mymemory import MyMemoryClient
from translator_app.adapters.clipboard_writer import ClipboardWriter
from translator_app.adapters.share import BrowserShareSink
from translator_app.adapters.speech import CommandSpeechOutput
from translator_app.application.session import SessionController, SessionState
from translator_app.config import AppConfig
from translator_app.notifications.messages import NotificationLevel
from translator_app.services.history import HistoryStore
from translator_app.services.notifier import Notifier
from translator_app.services.storage import JsonFileStorage


@dataclass(slots=True)
class AppServices:
    client: MyMemoryClient
    history: HistoryStore
    notifier: Notifier
    session: SessionController

    @classmethod
    def create(
        cls, config: AppConfig, send: Callable[[str, NotificationLevel], None]
    ) -> "AppServices":
        client = MyMemoryClient(
            endpoint=config.service.endpoint,
            timeout=config.service.timeout_seconds,
            contact_email=config.service.contact_email,
        )
        history = HistoryStore(storage=JsonFileStorage(config.storage.path))
        history.load()
        notifier = Notifier(send)
        session = SessionController(
            translator=client,
            history=history,
            notifier=notifier,
            speech_output=CommandSpeechOutput(),
            clipboard=ClipboardWriter(),
            share_sink=BrowserShareSink(),
            _state=SessionState.initial(
                config.languages.source, config.languages.target
            ),
        )
        return cls(client=client, history=history, notifier=notifier, session=session)

    async def close(self) -> None:
        await self.client.close()
