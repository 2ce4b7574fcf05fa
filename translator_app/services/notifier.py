from __future__ import annotations

from collections.abc import Callable

from translator_app.notifications.messages import Notification, NotificationLevel


class Notifier:
    def __init__(self, send: Callable[[str, NotificationLevel], None]) -> None:
        self._send = send

    def send(self, message: Notification) -> None:
        self._send(message.message, message.level)
