from __future__ import annotations

from translate_core.providers.mymemory import (
    MYMEMORY_PROVIDER_NAME as MYMEMORY_PROVIDER_NAME,
)
from translate_core.providers.mymemory import MYMEMORY_URL as MYMEMORY_URL
from translate_core.providers.mymemory import MyMemoryClient as MyMemoryClient

__all__ = ["MYMEMORY_PROVIDER_NAME", "MYMEMORY_URL", "MyMemoryClient"]
