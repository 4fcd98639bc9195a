from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from .config import SettingsError, ensure_workspace_files, load_settings, options_from_settings
from .errors import EntropySourceUnavailable, GenerationError
from .models import CharacterCategory, GenerationOptions
from .passwords import PasswordGenerator
from .strength import score_length, score_password


LOGGER = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _configure_logging(args: argparse.Namespace, settings: dict[str, Any]) -> None:
    if args.verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, str(settings.get("logging", {}).get("level", "WARNING")).upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s - %(message)s")


def _options_from_args(args: argparse.Namespace, settings: dict[str, Any]) -> GenerationOptions:
    options = options_from_settings(settings)
    if getattr(args, "length", None) is not None:
        options = options.with_length(args.length)
    for category in CharacterCategory:
        flag = getattr(args, category.value, None)
        if flag is not None:
            options = options.with_category(category, flag)
    return options


def _cmd_init(_: argparse.Namespace, settings: dict[str, Any]) -> int:
    path = ensure_workspace_files()
    print(f"Settings file: {path}")
    return 0


def _cmd_generate(args: argparse.Namespace, settings: dict[str, Any]) -> int:
    options = _options_from_args(args, settings)
    generator = PasswordGenerator()
    LOGGER.debug(
        "Generating %d password(s): length=%d categories=%s",
        args.count,
        options.length,
        ",".join(category.value for category in options.categories) or "none",
    )
    results = []
    for _ in range(args.count):
        password = generator.generate(options)
        results.append({"password": password, "strength": score_password(password, options).to_dict()})

    if args.json:
        print(json.dumps(results, indent=2))
        return 0
    for item in results:
        if args.show_strength:
            print(f"{item['password']}  [{item['strength']['label']}]")
        else:
            print(item["password"])
    return 0


def _cmd_score(args: argparse.Namespace, settings: dict[str, Any]) -> int:
    options = _options_from_args(args, settings)
    if args.password is not None:
        result = score_password(args.password, options)
    else:
        result = score_length(args.length, options)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(f"{result.level} {result.label}")
    return 0


def _add_category_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--uppercase", action=argparse.BooleanOptionalAction, default=None, help="Include A-Z")
    parser.add_argument("--lowercase", action=argparse.BooleanOptionalAction, default=None, help="Include a-z")
    parser.add_argument("--digits", action=argparse.BooleanOptionalAction, default=None, help="Include 0-9")
    parser.add_argument("--symbols", action=argparse.BooleanOptionalAction, default=None, help="Include punctuation symbols")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="passforge - secure password generator and strength rating")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    cmd_init = sub.add_parser("init", help="Write the default settings file")
    cmd_init.set_defaults(func=_cmd_init)

    cmd_generate = sub.add_parser("generate", help="Generate passwords")
    cmd_generate.add_argument("--length", type=int, default=None, help="Password length (4-50)")
    _add_category_flags(cmd_generate)
    cmd_generate.add_argument("--count", type=_positive_int, default=1, help="Number of passwords to generate")
    cmd_generate.add_argument("--json", action="store_true", help="Print results as JSON")
    cmd_generate.add_argument("--show-strength", action="store_true", help="Print the strength label next to each password")
    cmd_generate.set_defaults(func=_cmd_generate)

    cmd_score = sub.add_parser("score", help="Rate password strength from length and enabled categories")
    source = cmd_score.add_mutually_exclusive_group(required=True)
    source.add_argument("--password", default=None, help="Password to rate (only its length is used)")
    source.add_argument("--length", type=int, default=None, help="Password length to rate")
    _add_category_flags(cmd_score)
    cmd_score.add_argument("--json", action="store_true", help="Print the result as JSON")
    cmd_score.set_defaults(func=_cmd_score)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = load_settings()
    _configure_logging(args, settings)
    try:
        return int(args.func(args, settings))
    except EntropySourceUnavailable as exc:
        LOGGER.critical("Aborting: %s", exc)
        print(f"Error: {exc}")
        return 3
    except (GenerationError, SettingsError) as exc:
        print(f"Error: {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
