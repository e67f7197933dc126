#!/usr/bin/env python3
"""Convert between a strings data file and Tizen string-table files.

Usage:
    tizen-i18n generate-all strings.txt res/po
    tizen-i18n generate strings.txt out/strings.xml --lang fr
    tizen-i18n consume-all strings.txt res/po --output-file merged.txt
    tizen-i18n consume strings.txt res/po/fra-FR.xml --dry-run
    tizen-i18n generate-all strings.txt res/po --lang-codes extra_langs.json

`--lang-codes` points to a JSON object of extra `locale-code -> language`
pairs, for example {"jpn-JP": "ja"}, merged over the built-in table.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from tizen_i18n.errors import DirectoryError, TizenI18nError
from tizen_i18n.formatters import FORMATTERS, formatter_for, formatter_for_directory
from tizen_i18n.strings_file import read_strings_file, write_strings_file
from tizen_i18n.strings_model import StringsFile
from tizen_i18n.tizen import FORMAT_NAME, LANG_CODES, TizenFormatter


def load_lang_codes(path: Path | None) -> dict[str, str]:
    lang_codes = dict(LANG_CODES)
    if path is None:
        return lang_codes
    if not path.is_file():
        raise FileNotFoundError(f"Language code file not found: {path}")

    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("Language code JSON must be an object")
    for locale_code, lang in payload.items():
        if not isinstance(locale_code, str) or not locale_code.strip():
            raise ValueError("Language code keys must be non-empty strings")
        if not isinstance(lang, str) or not lang.strip():
            raise ValueError(f"Language for '{locale_code}' must be a non-empty string")
        lang_codes[locale_code.strip()] = lang.strip()
    return lang_codes


def require_lang(formatter: TizenFormatter, path: Path, lang: str | None) -> str:
    resolved = lang or formatter.determine_language_given_path(path)
    if not resolved:
        raise ValueError(f"Unable to determine language for {path}. Pass --lang.")
    return resolved


def cmd_generate_all(args: argparse.Namespace) -> int:
    strings = read_strings_file(args.strings_file)
    formatter = formatter_for(args.format, strings, load_lang_codes(args.lang_codes))
    output_dir = args.output_dir.resolve()
    langs = formatter.write_all_files(output_dir)
    for lang in langs:
        print(f"[written] {lang}")
    print(f"Wrote {len(langs)} file(s) to {output_dir}")
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    strings = read_strings_file(args.strings_file)
    formatter = formatter_for(args.format, strings, load_lang_codes(args.lang_codes))
    output_file = args.output_file
    if output_file.is_dir():
        output_file = output_file / formatter.default_file_name()
    lang = require_lang(formatter, output_file, args.lang)
    formatter.write_file(output_file, lang)
    print(f"[written] {output_file} ({lang})")
    return 0


def save_strings(args: argparse.Namespace, strings: StringsFile) -> None:
    if args.dry_run:
        print("Dry run only. No files were modified.")
        return
    output_file = args.output_file or args.strings_file
    write_strings_file(output_file, strings)
    print(f"Output: {output_file}")


def cmd_consume_all(args: argparse.Namespace) -> int:
    strings = read_strings_file(args.strings_file)
    lang_codes = load_lang_codes(args.lang_codes)
    input_dir = args.input_dir.resolve()
    if args.format:
        formatter = formatter_for(args.format, strings, lang_codes)
    else:
        if not input_dir.is_dir():
            raise DirectoryError(f"Directory does not exist: {input_dir}")
        formatter = formatter_for_directory(input_dir, strings, lang_codes)
        if formatter is None:
            print(f"[error] No known format found in {input_dir}")
            return 1
    langs = formatter.read_all_files(input_dir)
    print(f"[read] {formatter.format_name}: {', '.join(langs)}")
    save_strings(args, strings)
    return 0


def cmd_consume(args: argparse.Namespace) -> int:
    strings = read_strings_file(args.strings_file)
    formatter = formatter_for(args.format, strings, load_lang_codes(args.lang_codes))
    input_file = args.input_file
    if not input_file.is_file():
        raise FileNotFoundError(f"Input file not found: {input_file}")
    lang = require_lang(formatter, input_file, args.lang)
    count = formatter.read_file(input_file, lang)
    print(f"[read] {input_file} ({lang}): {count} key(s)")
    save_strings(args, strings)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert between a strings data file and Tizen string-table files."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub: argparse.ArgumentParser, default_format: str | None) -> None:
        sub.add_argument("strings_file", type=Path, help="Strings data file.")
        sub.add_argument(
            "--format",
            choices=sorted(FORMATTERS),
            default=default_format,
            help="Resource format." + (" Default: auto-detect." if default_format is None else ""),
        )
        sub.add_argument(
            "--lang-codes",
            type=Path,
            default=None,
            help="JSON object of extra locale-code -> language pairs.",
        )

    generate_all = subparsers.add_parser(
        "generate-all", help="Write one resource file per language."
    )
    add_common(generate_all, FORMAT_NAME)
    generate_all.add_argument("output_dir", type=Path)
    generate_all.set_defaults(handler=cmd_generate_all)

    generate = subparsers.add_parser("generate", help="Write a single resource file.")
    add_common(generate, FORMAT_NAME)
    generate.add_argument("output_file", type=Path)
    generate.add_argument(
        "--lang",
        default=None,
        help="Language to write. Default: derived from the output file name.",
    )
    generate.set_defaults(handler=cmd_generate)

    for name, handler, target, default_format in (
        ("consume-all", cmd_consume_all, "input_dir", None),
        ("consume", cmd_consume, "input_file", FORMAT_NAME),
    ):
        sub = subparsers.add_parser(
            name, help="Read resource files back into the strings data file."
        )
        add_common(sub, default_format)
        sub.add_argument(target, type=Path)
        sub.add_argument(
            "--output-file",
            type=Path,
            default=None,
            help="Where to save the updated strings. Default: overwrite strings_file.",
        )
        sub.add_argument("--dry-run", action="store_true")
        if name == "consume":
            sub.add_argument(
                "--lang",
                default=None,
                help="Language of the input file. Default: derived from its name.",
            )
        sub.set_defaults(handler=handler)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except TizenI18nError as exc:
        print(f"[error] {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
