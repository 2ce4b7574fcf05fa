from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

import aiohttp

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "text-translator/0.1 (+https://mymemory.translated.net)"

AsyncFetcher = Callable[[str], Awaitable[str]]


class FetchError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class FetchTimeoutError(FetchError):
    pass


class FetchStatusError(FetchError):
    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


async def fetch_text_async(
    url: str,
    session: aiohttp.ClientSession,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> str:
    timeout_config = aiohttp.ClientTimeout(total=timeout)
    try:
        async with session.get(
            url,
            headers={"User-Agent": DEFAULT_USER_AGENT},
            timeout=timeout_config,
        ) as response:
            payload = await response.text(errors="replace")
            if response.status >= 400:
                raise FetchStatusError(
                    f"API error: {response.status}", status_code=response.status
                )
            return payload
    except FetchStatusError:
        raise
    except asyncio.TimeoutError as exc:
        raise FetchTimeoutError(f"Timed out fetching {url}") from exc
    except Exception as exc:
        raise FetchError(f"Failed to fetch {url}") from exc


def build_async_fetcher(
    session: aiohttp.ClientSession,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> AsyncFetcher:
    async def fetch(url: str) -> str:
        return await fetch_text_async(url, session, timeout)

    return fetch
