from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

WHATSAPP_SHARE_URL = "https://wa.me/"
TELEGRAM_SHARE_URL = "https://t.me/share/url"


@dataclass(frozen=True, slots=True)
class ShareLinks:
    whatsapp: str
    telegram: str


def format_bilingual(
    original: str, translated: str, from_code: str, to_code: str
) -> str:
    return f"Original ({from_code}): {original}\nTranslated ({to_code}): {translated}"


def build_share_links(
    original: str, translated: str, from_code: str, to_code: str
) -> ShareLinks:
    message = quote(format_bilingual(original, translated, from_code, to_code), safe="")
    return ShareLinks(
        whatsapp=f"{WHATSAPP_SHARE_URL}?text={message}",
        telegram=f"{TELEGRAM_SHARE_URL}?url=&text={message}",
    )
