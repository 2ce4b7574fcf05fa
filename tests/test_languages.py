from __future__ import annotations

from translate_core.languages import (
    AUTO_DETECT_CODE,
    LANGUAGES,
    find_language,
    is_valid_source,
    is_valid_target,
    language_name,
    speech_locale,
    target_languages,
)


def test_codes_are_unique() -> None:
    codes = [entry.code for entry in LANGUAGES]
    assert len(codes) == len(set(codes))


def test_auto_detect_is_source_only() -> None:
    assert is_valid_source(AUTO_DETECT_CODE)
    assert not is_valid_target(AUTO_DETECT_CODE)
    assert AUTO_DETECT_CODE not in {entry.code for entry in target_languages()}


def test_lookup_helpers() -> None:
    entry = find_language("hi")
    assert entry is not None
    assert entry.name == "Hindi"
    assert language_name("xx") == "xx"
    assert find_language("xx") is None


def test_speech_locale_maps_chinese() -> None:
    assert speech_locale("zh") == "zh-CN"
    assert speech_locale("hi") == "hi"
