from __future__ import annotations

from typing import Final

from translate_core.models import LanguageEntry

AUTO_DETECT_CODE: Final[str] = "auto"

LANGUAGES: Final[tuple[LanguageEntry, ...]] = (
    LanguageEntry(AUTO_DETECT_CODE, "Auto Detect"),
    LanguageEntry("en", "English"),
    LanguageEntry("hi", "Hindi"),
    LanguageEntry("bn", "Bengali"),
    LanguageEntry("ta", "Tamil"),
    LanguageEntry("te", "Telugu"),
    LanguageEntry("mr", "Marathi"),
    LanguageEntry("gu", "Gujarati"),
    LanguageEntry("kn", "Kannada"),
    LanguageEntry("ml", "Malayalam"),
    LanguageEntry("pa", "Punjabi"),
    LanguageEntry("ur", "Urdu"),
    LanguageEntry("es", "Spanish"),
    LanguageEntry("fr", "French"),
    LanguageEntry("de", "German"),
    LanguageEntry("it", "Italian"),
    LanguageEntry("pt", "Portuguese"),
    LanguageEntry("ru", "Russian"),
    LanguageEntry("ar", "Arabic"),
    LanguageEntry("tr", "Turkish"),
    LanguageEntry("zh", "Chinese"),
    LanguageEntry("ja", "Japanese"),
    LanguageEntry("ko", "Korean"),
)

# Speech engines expect a region for some languages.
_SPEECH_LOCALES: Final[dict[str, str]] = {"zh": "zh-CN"}

_BY_CODE: Final[dict[str, LanguageEntry]] = {entry.code: entry for entry in LANGUAGES}


def source_languages() -> tuple[LanguageEntry, ...]:
    return LANGUAGES


def target_languages() -> tuple[LanguageEntry, ...]:
    return tuple(entry for entry in LANGUAGES if entry.code != AUTO_DETECT_CODE)


def find_language(code: str) -> LanguageEntry | None:
    return _BY_CODE.get(code)


def language_name(code: str) -> str:
    entry = find_language(code)
    if entry is None:
        return code
    return entry.name


def is_auto_detect(code: str) -> bool:
    return code == AUTO_DETECT_CODE


def is_valid_source(code: str) -> bool:
    return code in _BY_CODE


def is_valid_target(code: str) -> bool:
    return code in _BY_CODE and not is_auto_detect(code)


def speech_locale(code: str) -> str:
    return _SPEECH_LOCALES.get(code, code)
