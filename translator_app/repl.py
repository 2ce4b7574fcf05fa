from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from translate_core.languages import (
    is_auto_detect,
    is_valid_source,
    is_valid_target,
    language_name,
    source_languages,
    target_languages,
)
from translator_app.adapters.console import console_sender
from translator_app.application.session import SessionController
from translator_app.cli import format_history_lines
from translator_app.config import load_config
from translator_app.services.container import AppServices

QUIT_COMMANDS = frozenset({":q", ":quit", ":exit"})
HELP_TEXT = """commands:
  :swap            swap source and target languages
  :from CODE       set source language (auto = detect)
  :to CODE         set target language
  :languages       list language codes
  :history         show recent translations
  :export [DIR]    save history to DIR/translation_history.txt
  :clear           clear input and output
  :clear-history   forget recent translations
  :copy            copy translation
  :copy-both       copy original and translation
  :share           open a share link for the translation
  :speak           read the translation aloud
  :quit            exit
anything else is translated."""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interactive translation session with history."
    )
    parser.add_argument("--source", default=None)
    parser.add_argument("--target", default=None)
    return parser


def _prompt(session: SessionController) -> str:
    state = session.state
    return f"[{state.from_code} → {state.to_code}]> "


def _print_state(session: SessionController) -> None:
    state = session.state
    if state.error:
        print(state.error)
        return
    if not state.translated_text:
        return
    print(state.translated_text)
    meta = f"  Powered by: {state.provider_name}"
    if state.detected_from_code and is_auto_detect(state.from_code):
        meta += f" • Detected language: {language_name(state.detected_from_code)}"
    print(meta)


def run_command(session: SessionController, line: str) -> bool:
    """Handle one ``:command`` line; returns False when the loop should stop."""
    command, _, argument = line.partition(" ")
    argument = argument.strip()
    if command in QUIT_COMMANDS:
        return False
    if command == ":help":
        print(HELP_TEXT)
    elif command == ":swap":
        from_code, to_code = session.swap()
        print(f"{from_code} → {to_code}")
    elif command == ":from" and argument:
        if is_valid_source(argument):
            session.set_languages(argument, session.state.to_code)
        else:
            print(f"unknown source language: {argument} (try :languages)")
    elif command == ":to" and argument:
        if is_valid_target(argument):
            session.set_languages(session.state.from_code, argument)
        else:
            print(f"not a target language: {argument} (try :languages)")
    elif command == ":languages":
        targets = set(target_languages())
        for entry in source_languages():
            scope = "" if entry in targets else "  (source only)"
            print(f"{entry.code:6} {entry.name}{scope}")
    elif command == ":history":
        for line_text in format_history_lines(session.history_entries()):
            print(line_text)
    elif command == ":export":
        session.export_history(Path(argument) if argument else Path.cwd())
    elif command == ":clear":
        session.clear()
    elif command == ":clear-history":
        session.clear_history()
    elif command == ":copy":
        session.copy_translated()
    elif command == ":copy-both":
        session.copy_both()
    elif command == ":share":
        session.share()
    elif command == ":speak":
        session.speak()
    else:
        print(f"unknown command: {line} (try :help)")
    return True


async def _run(services: AppServices) -> None:
    session = services.session
    print("translator repl: enter text to translate, :help for commands.")
    try:
        while True:
            try:
                line = await asyncio.to_thread(input, _prompt(session))
            except EOFError:
                print("")
                break
            text = line.strip()
            if not text:
                continue
            if text.startswith(":"):
                if not run_command(session, text):
                    break
                continue
            state = session.state
            await session.submit(line, state.from_code, state.to_code)
            _print_state(session)
    finally:
        await services.close()


def main() -> int:
    args = _build_parser().parse_args()
    config = load_config()
    services = AppServices.create(config, console_sender())
    session = services.session
    session.set_languages(
        args.source or config.languages.source,
        args.target or config.languages.target,
    )
    asyncio.run(_run(services))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
