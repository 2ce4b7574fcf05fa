from __future__ import annotations

import shutil
import subprocess

SPEECH_TIMEOUT_SECONDS = 30.0


class CommandSpeechOutput:
    """Speaks through espeak-ng/espeak/spd-say, whichever is installed."""

    def speak(self, text: str, locale: str) -> None:
        command = _speech_command(locale)
        if command is None:
            raise RuntimeError("No speech synthesizer found.")
        subprocess.run(
            [*command, text],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=SPEECH_TIMEOUT_SECONDS,
            check=True,
        )


def _speech_command(locale: str) -> list[str] | None:
    for name in ("espeak-ng", "espeak"):
        cmd = shutil.which(name)
        if cmd is not None:
            return [cmd, "-v", locale]
    cmd = shutil.which("spd-say")
    if cmd is not None:
        return [cmd, "--wait", "-l", locale]
    return None
