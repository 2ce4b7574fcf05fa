from __future__ import annotations

from enum import Enum


class TranslateError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationReason(Enum):
    EMPTY_INPUT = "empty input"
    SAME_LANGUAGE = "same language"
    INVALID_TARGET = "invalid target"


class ValidationError(TranslateError):
    def __init__(self, reason: ValidationReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


class NetworkError(TranslateError):
    pass


class ServiceError(TranslateError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptyResultError(TranslateError):
    pass


class PersistenceError(TranslateError):
    pass


class HistoryEmptyError(TranslateError):
    pass
