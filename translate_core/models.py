from __future__ import annotations

from translate_core.domain.errors import (
    EmptyResultError,
    HistoryEmptyError,
    NetworkError,
    PersistenceError,
    ServiceError,
    TranslateError,
    ValidationError,
    ValidationReason,
)
from translate_core.domain.models import (
    HISTORY_MAX_ENTRIES,
    HistoryEntry,
    LanguageEntry,
    TranslationRequest,
    TranslationResult,
)

__all__ = [
    "HISTORY_MAX_ENTRIES",
    "EmptyResultError",
    "HistoryEmptyError",
    "HistoryEntry",
    "LanguageEntry",
    "NetworkError",
    "PersistenceError",
    "ServiceError",
    "TranslateError",
    "TranslationRequest",
    "TranslationResult",
    "ValidationError",
    "ValidationReason",
]
