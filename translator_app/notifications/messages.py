from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from translate_core.models import ValidationReason

class NotificationLevel(Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notification:
    message: str
    level: NotificationLevel


TRANSLATION_FAILED_MESSAGE = "Translation failed. Try again later."

_VALIDATION_MESSAGES: dict[ValidationReason, str] = {
    ValidationReason.EMPTY_INPUT: "Please enter text to translate.",
    ValidationReason.SAME_LANGUAGE: (
        "Source and target languages are the same. Choose a different target."
    ),
    ValidationReason.INVALID_TARGET: (
        "Auto-detect can only be used as the source language."
    ),
}


def validation_message(reason: ValidationReason) -> str:
    return _VALIDATION_MESSAGES[reason]


def copy_success() -> Notification:
    return Notification(
        "Copied translated text to clipboard.", NotificationLevel.SUCCESS
    )


def copy_failed() -> Notification:
    return Notification(
        "Copy failed. Please select the text and copy manually.",
        NotificationLevel.ERROR,
    )


def copy_both_success() -> Notification:
    return Notification("Copied original + translated text.", NotificationLevel.SUCCESS)


def copy_both_failed() -> Notification:
    return Notification("Copy failed. Please select manually.", NotificationLevel.ERROR)


def speech_unsupported() -> Notification:
    return Notification(
        "Speech recognition not supported.", NotificationLevel.WARNING
    )


def speech_failed() -> Notification:
    return Notification(
        "Speech recognition failed. Try again.", NotificationLevel.ERROR
    )


def speech_output_unsupported() -> Notification:
    return Notification("Speech output not supported.", NotificationLevel.WARNING)


def speech_output_failed() -> Notification:
    return Notification("Speech output failed.", NotificationLevel.ERROR)


def share_unsupported() -> Notification:
    return Notification("Sharing is not available.", NotificationLevel.WARNING)


def share_failed() -> Notification:
    return Notification("Could not open the share link.", NotificationLevel.ERROR)


def history_empty() -> Notification:
    return Notification("No history to download.", NotificationLevel.WARNING)


def history_exported(path: Path) -> Notification:
    return Notification(f"History saved to {path}.", NotificationLevel.SUCCESS)


def history_export_failed() -> Notification:
    return Notification("Could not save history.", NotificationLevel.ERROR)


def history_cleared() -> Notification:
    return Notification("History cleared.", NotificationLevel.INFO)
