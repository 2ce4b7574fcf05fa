from __future__ import annotations

import os
from pathlib import Path

import pytest


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    # Pytest uses exit code 5 when no tests are collected; treat it as success.
    if exitstatus == 5:
        session.exitstatus = 0


def pytest_ignore_collect(collection_path: Path, config: pytest.Config) -> bool:
    del config
    ignored_parts = {
        ".venv",
        "__pycache__",
        "build",
    }
    return any(part in collection_path.parts for part in ignored_parts)


def pytest_configure(config: pytest.Config) -> None:
    del config
    # Tests never write the JSON-lines log under the real home directory.
    os.environ["TRANSLATOR_LOGGING"] = "0"
