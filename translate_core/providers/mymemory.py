from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from typing import TypeAlias
from urllib.parse import quote

import aiohttp

from translate_core.http import (
    DEFAULT_TIMEOUT_SECONDS,
    AsyncFetcher,
    FetchError,
    FetchStatusError,
    build_async_fetcher,
)
from translate_core.languages import is_auto_detect
from translate_core.models import (
    EmptyResultError,
    NetworkError,
    ServiceError,
    TranslationRequest,
    TranslationResult,
)

MYMEMORY_URL = "https://api.mymemory.translated.net/get"
MYMEMORY_PROVIDER_NAME = "MyMemory"

JsonValue: TypeAlias = (
    dict[str, "JsonValue"] | list["JsonValue"] | str | int | float | bool | None
)

logger = logging.getLogger(__name__)


def build_mymemory_url(
    request: TranslationRequest,
    endpoint: str = MYMEMORY_URL,
    contact_email: str = "",
) -> str:
    encoded = quote(request.source_text, safe="")
    url = f"{endpoint}?q={encoded}&langpair={request.from_code}|{request.to_code}"
    if contact_email:
        url = f"{url}&de={quote(contact_email, safe='@')}"
    return url


def parse_mymemory_payload(payload: str, from_code: str) -> TranslationResult:
    try:
        raw_payload: JsonValue = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ServiceError("Response is not valid JSON.") from exc
    raw_data = _as_dict(raw_payload)
    if raw_data is None:
        raise ServiceError("Response is not a JSON object.")
    status = _get_status(raw_data.get("responseStatus"))
    if status is not None and status != 200:
        details = _get_str(raw_data.get("responseDetails")) or f"status {status}"
        raise ServiceError(f"API error: {details}", status_code=status)
    response_data = _as_dict(raw_data.get("responseData"))
    translated = (
        _get_text(response_data.get("translatedText"))
        if response_data is not None
        else None
    )
    if not translated:
        raise EmptyResultError("Empty translation")
    detected: str | None = None
    if is_auto_detect(from_code):
        detected = _extract_detected_source(raw_data)
    return TranslationResult(
        translated_text=translated,
        provider_name=MYMEMORY_PROVIDER_NAME,
        detected_from_code=detected,
    )


@dataclass(slots=True)
class MyMemoryClient:
    endpoint: str = MYMEMORY_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    contact_email: str = ""
    fetcher: AsyncFetcher | None = None
    _session: aiohttp.ClientSession | None = None

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        url = build_mymemory_url(request, self.endpoint, self.contact_email)
        fetcher = self._ensure_fetcher()
        try:
            payload = await fetcher(url)
        except FetchStatusError as exc:
            logger.debug("MyMemory returned status %s", exc.status_code)
            raise ServiceError(exc.message, status_code=exc.status_code) from exc
        except FetchError as exc:
            logger.debug("MyMemory fetch failed: %s", exc)
            raise NetworkError(exc.message) from exc
        return parse_mymemory_payload(payload, request.from_code)

    async def close(self) -> None:
        if self._session is None:
            return
        await self._session.close()
        self._session = None
        self.fetcher = None

    async def __aenter__(self) -> "MyMemoryClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _ensure_fetcher(self) -> AsyncFetcher:
        if self.fetcher is not None:
            return self.fetcher
        self._session = aiohttp.ClientSession()
        self.fetcher = build_async_fetcher(self._session, self.timeout)
        return self.fetcher


def _extract_detected_source(raw_data: dict[str, JsonValue]) -> str | None:
    matches = _as_list(raw_data.get("matches"))
    if not matches:
        return None
    first = _as_dict(matches[0])
    if first is None:
        return None
    return _get_str(first.get("source"))


def _get_status(value: JsonValue) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _as_dict(value: JsonValue) -> dict[str, JsonValue] | None:
    if isinstance(value, dict):
        return value
    return None


def _as_list(value: JsonValue) -> list[JsonValue] | None:
    if isinstance(value, list):
        return value
    return None


def _get_str(value: JsonValue) -> str | None:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None


def _get_text(value: JsonValue) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None
