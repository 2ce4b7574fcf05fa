from __future__ import annotations

import asyncio
import json

import pytest

from translate_core.http import FetchError, FetchStatusError, FetchTimeoutError
from translate_core.models import (
    EmptyResultError,
    NetworkError,
    ServiceError,
    TranslationRequest,
)
from translate_core.providers.mymemory import (
    MyMemoryClient,
    build_mymemory_url,
    parse_mymemory_payload,
)


def _payload(text: str, *, matches: list[dict[str, object]] | None = None) -> str:
    body: dict[str, object] = {
        "responseData": {"translatedText": text, "match": 1},
        "responseStatus": 200,
    }
    if matches is not None:
        body["matches"] = matches
    return json.dumps(body, ensure_ascii=False)


def test_url_encodes_text_and_language_pair() -> None:
    url = build_mymemory_url(TranslationRequest("hello world & more", "en", "hi"))

    assert url == (
        "https://api.mymemory.translated.net/get"
        "?q=hello%20world%20%26%20more&langpair=en|hi"
    )


def test_url_appends_contact_email() -> None:
    url = build_mymemory_url(
        TranslationRequest("hi", "en", "fr"), contact_email="me@example.com"
    )

    assert url.endswith("&de=me@example.com")


def test_translate_returns_translated_text() -> None:
    requested: list[str] = []

    async def fetcher(url: str) -> str:
        requested.append(url)
        return _payload("नमस्ते")

    client = MyMemoryClient(fetcher=fetcher)
    result = asyncio.run(client.translate(TranslationRequest("hello", "en", "hi")))

    assert result.translated_text == "नमस्ते"
    assert result.provider_name == "MyMemory"
    assert result.detected_from_code is None
    assert len(requested) == 1
    assert "langpair=en|hi" in requested[0]


def test_detected_language_only_reported_for_auto_source() -> None:
    payload = _payload("hola", matches=[{"source": "en-GB", "target": "es-ES"}])

    auto_result = parse_mymemory_payload(payload, "auto")
    explicit_result = parse_mymemory_payload(payload, "en")

    assert auto_result.detected_from_code == "en-GB"
    assert explicit_result.detected_from_code is None


def test_auto_source_without_matches_has_no_detection() -> None:
    result = parse_mymemory_payload(_payload("hola", matches=[]), "auto")

    assert result.detected_from_code is None


def test_missing_translation_is_empty_result() -> None:
    with pytest.raises(EmptyResultError):
        parse_mymemory_payload(json.dumps({"responseData": {}}), "en")
    with pytest.raises(EmptyResultError):
        parse_mymemory_payload(_payload(""), "en")


def test_translated_text_is_returned_unchanged() -> None:
    result = parse_mymemory_payload(_payload("  hola mundo\n"), "en")
    blank = parse_mymemory_payload(_payload("   "), "en")

    assert result.translated_text == "  hola mundo\n"
    assert blank.translated_text == "   "


def test_in_band_error_status_is_service_error() -> None:
    payload = json.dumps(
        {
            "responseData": {"translatedText": "INVALID LANGUAGE PAIR"},
            "responseStatus": "403",
            "responseDetails": "INVALID LANGUAGE PAIR",
        }
    )

    with pytest.raises(ServiceError) as info:
        parse_mymemory_payload(payload, "en")

    assert info.value.status_code == 403


def test_non_json_body_is_service_error() -> None:
    with pytest.raises(ServiceError):
        parse_mymemory_payload("<html>oops</html>", "en")


def test_http_status_maps_to_service_error() -> None:
    async def fetcher(url: str) -> str:
        raise FetchStatusError("API error: 500", status_code=500)

    client = MyMemoryClient(fetcher=fetcher)
    with pytest.raises(ServiceError) as info:
        asyncio.run(client.translate(TranslationRequest("hello", "en", "hi")))

    assert info.value.status_code == 500


@pytest.mark.parametrize(
    "error",
    [FetchError("connection refused"), FetchTimeoutError("timed out")],
)
def test_transport_failures_map_to_network_error(error: FetchError) -> None:
    async def fetcher(url: str) -> str:
        raise error

    client = MyMemoryClient(fetcher=fetcher)
    with pytest.raises(NetworkError) as info:
        asyncio.run(client.translate(TranslationRequest("hello", "en", "hi")))

    assert info.value.__cause__ is error
