from __future__ import annotations

import argparse
import asyncio
from dataclasses import replace
import json
from pathlib import Path
import sys

from translate_core.languages import is_valid_source, is_valid_target, language_name
from translate_core.models import HistoryEntry, TranslateError, TranslationResult
from translator_app import telemetry
from translator_app.adapters.console import console_sender
from translator_app.application.session import SubmitOutcome
from translator_app.config import AppConfig, LanguageConfig, load_config, save_config
from translator_app.services.container import AppServices


def _build_parser(default_source: str, default_target: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate text with the MyMemory public translation API."
    )
    parser.add_argument("text", nargs="?", help="Text to translate.")
    parser.add_argument("--source", default=default_source, help="Source language code.")
    parser.add_argument("--target", default=default_target, help="Target language code.")
    parser.add_argument(
        "--format",
        choices=("lines", "json"),
        default="lines",
        help="Output format.",
    )
    parser.add_argument(
        "--history", action="store_true", help="Print recent translations."
    )
    parser.add_argument(
        "--clear-history", action="store_true", help="Forget recent translations."
    )
    parser.add_argument(
        "--export-history",
        type=Path,
        metavar="DIR",
        help="Write translation_history.txt into DIR.",
    )
    parser.add_argument(
        "--save-languages",
        action="store_true",
        help="Store --source and --target as the default languages.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log provider diagnostics to stderr."
    )
    return parser


def format_history_lines(entries: list[HistoryEntry]) -> list[str]:
    if not entries:
        return ["No history yet."]
    return [
        f"{index}. {entry.input_text} → {entry.output_text} "
        f"({entry.from_code} → {entry.to_code}, {entry.timestamp})"
        for index, entry in enumerate(entries, start=1)
    ]


def _print_result(result: TranslationResult, output_format: str) -> None:
    if output_format == "json":
        payload = {
            "translated_text": result.translated_text,
            "provider": result.provider_name,
            "detected_from_code": result.detected_from_code,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    print(result.translated_text)
    print(f"Powered by: {result.provider_name}")
    if result.detected_from_code:
        print(f"Detected language: {language_name(result.detected_from_code)}")


async def _translate(
    services: AppServices, text: str, source: str, target: str
) -> SubmitOutcome:
    try:
        return await services.session.submit(text, source, target)
    finally:
        await services.close()


def _save_languages(config: AppConfig, source: str, target: str) -> AppConfig | None:
    if not is_valid_source(source) or not is_valid_target(target):
        print(f"unsupported language pair: {source} → {target}", file=sys.stderr)
        return None
    updated = replace(config, languages=LanguageConfig(source=source, target=target))
    save_config(updated)
    print(f"Default languages: {source} → {target}")
    return updated


def main(argv: list[str] | None = None) -> int:
    config = load_config()
    parser = _build_parser(config.languages.source, config.languages.target)
    args = parser.parse_args(argv)
    if args.text is None and not (
        args.history
        or args.clear_history
        or args.save_languages
        or args.export_history is not None
    ):
        parser.print_usage(sys.stderr)
        return 2
    if args.save_languages:
        saved = _save_languages(config, args.source, args.target)
        if saved is None:
            return 2
        config = saved
    if args.verbose:
        telemetry.enable_console()
    services = AppServices.create(config, console_sender())
    session = services.session

    if args.clear_history:
        session.clear_history()
    if args.export_history is not None:
        if session.export_history(args.export_history) is None:
            return 1
    if args.history:
        for line in format_history_lines(session.history_entries()):
            print(line)
    if args.text is None:
        return 0

    outcome = asyncio.run(_translate(services, args.text, args.source, args.target))
    if isinstance(outcome, TranslateError):
        print(session.state.error, file=sys.stderr)
        return 1
    _print_result(outcome, args.format)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
