from __future__ import annotations

import os
import shutil
import subprocess
import sys

CLIPBOARD_TIMEOUT_SECONDS = 2.0


class ClipboardWriter:
    def copy_text(self, text: str) -> bool:
        if not text:
            return False
        command = _clipboard_command()
        if command is None:
            return False
        return _run_clipboard_command(command, text)


def _clipboard_command() -> list[str] | None:
    if sys.platform == "darwin":
        cmd = shutil.which("pbcopy")
        return [cmd] if cmd is not None else None
    if sys.platform == "win32":
        cmd = shutil.which("clip")
        return [cmd] if cmd is not None else None
    session = os.environ.get("XDG_SESSION_TYPE", "").casefold()
    if session == "wayland":
        cmd = shutil.which("wl-copy")
        if cmd is not None:
            return [cmd, "--type", "text/plain"]
    cmd = shutil.which("xclip")
    if cmd is not None:
        return [cmd, "-selection", "clipboard"]
    cmd = shutil.which("xsel")
    if cmd is not None:
        return [cmd, "--clipboard", "--input"]
    return None


def _run_clipboard_command(command: list[str], text: str) -> bool:
    try:
        completed = subprocess.run(
            command,
            input=text,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=CLIPBOARD_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired):
        return False
    return completed.returncode == 0
