from __future__ import annotations

from collections.abc import Callable
import sys
from typing import TextIO

from translator_app.notifications.messages import NotificationLevel

_PREFIXES: dict[NotificationLevel, str] = {
    NotificationLevel.SUCCESS: "ok",
    NotificationLevel.INFO: "info",
    NotificationLevel.WARNING: "warning",
    NotificationLevel.ERROR: "error",
}


def console_sender(
    stream: TextIO | None = None,
) -> Callable[[str, NotificationLevel], None]:
    def send(message: str, level: NotificationLevel) -> None:
        target = stream
        if target is None:
            target = sys.stderr if level is NotificationLevel.ERROR else sys.stdout
        print(f"[{_PREFIXES[level]}] {message}", file=target)

    return send
