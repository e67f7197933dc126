"""Tizen string-table formatter.

Tizen resource files are named after the platform locale code
(`eng-GB.xml`, `values-fra-FR.xml`, ...) and look like:

    <?xml version="1.0" encoding="utf-8"?>
    <!-- Tizen Strings File -->
    <!-- Generated by tizen-i18n 0.3.0 -->
    <!-- Language: en -->
    <string_table  Bversion="2.0.0.201311071819" Dversion="20120315">
    	<!-- SECTION: General -->
    	<!-- Shown on the confirm button -->
    	<text id="IDS_YES">Yes</text>
    </string_table>

The strings model stores languages by their short tag (`en`) and keeps
placeholders in its own syntax; values are decoded on read and encoded on
write with the same steps in opposite order.
"""

from __future__ import annotations

import html
import re
from collections.abc import Mapping
from pathlib import Path

from tizen_i18n import __version__
from tizen_i18n.errors import DirectoryError, EmptyOutputError, NoLanguagesFoundError
from tizen_i18n.strings_model import StringsEntry, StringsFile, StringsSection
from tizen_i18n.substitutions import androidify_substitutions, iosify_substitutions

FORMAT_NAME = "tizen"
EXTENSION = ".xml"
DEFAULT_FILE_NAME = "strings.xml"
LANG_CODES: dict[str, str] = {
    "eng-GB": "en",
    "rus-RU": "ru",
    "fra-FR": "fr",
    "deu-DE": "de",
    "spa-ES": "es",
    "ita-IT": "it",
    "ces-CZ": "cs",
    "pol-PL": "pl",
    "por-PT": "pt",
    "ukr-UA": "uk",
}

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
ROOT_OPEN = '<string_table  Bversion="2.0.0.201311071819" Dversion="20120315">'
ROOT_CLOSE = "</string_table>"
KEY_PREFIX = "IDS_"
SECTION_MARKER = "SECTION:"
ESCAPED_SPACE = "\\u0020"
ESCAPED_NEWLINE = "\\n"

CANDIDATE_RE = re.compile(r"^(?:.*-)?(?P<locale>[^-]+-[^-]+)\.xml$")
ROOT_BODY_RE = re.compile(
    r"<(?P<tag>string_table|resources)(?:[^>]*)>(?P<body>.*?)</(?P=tag)>",
    re.DOTALL,
)
LINE_SPLIT_RE = re.compile(r"\r?\n")
COMMENT_RE = re.compile(r"<!-- (?P<text>.*) -->")
KEY_RES = (
    re.compile(r'<text id="(?P<key>[^"]+)">'),
    re.compile(r'<string name="(?P<key>[^"]+)">'),
)
VALUE_RES = (
    re.compile(r'<text id="[^"]+">(?P<value>.*)</text>'),
    re.compile(r'<string name="[^"]+">(?P<value>.*)</string>'),
)
ESCAPED_SPACE_RUN_RE = re.compile(
    rf"\A(?:{re.escape(ESCAPED_SPACE)})+|(?:{re.escape(ESCAPED_SPACE)})+\Z"
)
SPACE_RUN_RE = re.compile(r"\A +| +\Z")


def resolve(locale_code: str | None, lang_codes: Mapping[str, str] = LANG_CODES) -> str | None:
    if not locale_code:
        return None
    return lang_codes.get(locale_code)


def candidate_stem(path: str | Path) -> str | None:
    # Only the first segment that looks like `<...-...>.xml` is considered.
    for segment in Path(path).parts:
        if "-" not in segment:
            continue
        if CANDIDATE_RE.match(segment):
            return segment[: -len(EXTENSION)]
    return None


def candidate_codes(stem: str) -> list[str]:
    """Hyphenated suffixes of `stem`, longest first.

    `values-zho-Hant-TW` yields `values-zho-Hant-TW`, `zho-Hant-TW`, `Hant-TW`.
    """
    parts = stem.split("-")
    return ["-".join(parts[start:]) for start in range(len(parts) - 1)]


def extract_candidate(path: str | Path) -> str | None:
    stem = candidate_stem(path)
    if stem is None:
        return None
    return candidate_codes(stem)[-1]


def resolve_path(path: str | Path, lang_codes: Mapping[str, str] = LANG_CODES) -> str | None:
    stem = candidate_stem(path)
    if stem is None:
        return None
    for locale_code in candidate_codes(stem):
        lang = resolve(locale_code, lang_codes)
        if lang:
            return lang
    return None


def locale_code_for(lang: str, lang_codes: Mapping[str, str] = LANG_CODES) -> str | None:
    for locale_code, tag in lang_codes.items():
        if tag == lang:
            return locale_code
    return None


def decode_spaces(text: str) -> str:
    return ESCAPED_SPACE_RUN_RE.sub(
        lambda m: " " * (len(m.group(0)) // len(ESCAPED_SPACE)), text
    )


def encode_spaces(text: str) -> str:
    # Tizen strips literal leading and trailing spaces.
    return SPACE_RUN_RE.sub(lambda m: ESCAPED_SPACE * len(m.group(0)), text)


def decode_value(raw: str) -> str:
    value = html.unescape(raw)
    value = value.replace("\\'", "'").replace('\\"', '"')
    value = value.replace(ESCAPED_NEWLINE, "\n")
    value = iosify_substitutions(value)
    return decode_spaces(value)


def encode_value(value: str) -> str:
    # One entry per line: newlines are written as `\n`.
    value = value.replace("\r\n", "\n").replace("\n", ESCAPED_NEWLINE)
    # Quotes are backslash-escaped before entity escaping; html.escape leaves
    # backslashes alone.
    value = value.replace('"', '\\"')
    value = value.replace("'", "\\'")
    value = html.escape(value)
    value = androidify_substitutions(value)
    return encode_spaces(value)


def format_key(key: str) -> str:
    return key.upper()


def format_comment(text: str) -> str:
    return f"\t<!-- {text.replace('--', '—')} -->"


def format_section_header(section: StringsSection) -> str:
    return format_comment(f"{SECTION_MARKER} {section.name}")


def is_entry_comment(comment: str | None) -> bool:
    return bool(comment) and not comment.startswith(SECTION_MARKER)


def extract_root_body(content: str) -> str | None:
    match = ROOT_BODY_RE.search(content)
    return match.group("body") if match else None


def match_key(line: str) -> tuple[re.Match[str], str | None] | None:
    for key_re, value_re in zip(KEY_RES, VALUE_RES):
        key_match = key_re.search(line)
        if not key_match:
            continue
        value_match = value_re.search(line)
        return key_match, value_match.group("value") if value_match else None
    return None


class TizenFormatter:
    format_name = FORMAT_NAME
    extension = EXTENSION

    def __init__(
        self,
        strings: StringsFile,
        lang_codes: Mapping[str, str] | None = None,
    ) -> None:
        self.strings = strings
        self.lang_codes: Mapping[str, str] = LANG_CODES if lang_codes is None else lang_codes

    def default_file_name(self) -> str:
        return DEFAULT_FILE_NAME

    def determine_language_given_path(self, path: str | Path) -> str | None:
        return resolve_path(path, self.lang_codes)

    def can_handle_directory(self, path: str | Path) -> bool:
        return any(
            self.determine_language_given_path(item.name)
            for item in Path(path).iterdir()
        )

    def resolve_model_key(self, raw_key: str) -> str:
        key = raw_key[len(KEY_PREFIX) :] if raw_key.startswith(KEY_PREFIX) else raw_key
        return self.strings.find_key(key, ignore_case=True) or key

    def read_content(self, content: str, lang: str) -> int:
        body = extract_root_body(content)
        if body is None:
            return 0

        count = 0
        comment: str | None = None
        for line in LINE_SPLIT_RE.split(body):
            comment_match = COMMENT_RE.search(line)
            matched = match_key(line)
            if matched is None:
                if comment_match:
                    comment = comment_match.group("text")
                elif line.strip():
                    comment = None
                continue

            key_match, raw_value = matched
            trailing_comment: str | None = None
            if comment_match:
                if comment_match.start() < key_match.start():
                    comment = comment_match.group("text")
                else:
                    trailing_comment = comment_match.group("text")

            key = self.resolve_model_key(key_match.group("key"))
            value = decode_value(raw_value) if raw_value is not None else ""
            self.strings.set_translation(key, lang, value)
            if is_entry_comment(comment):
                self.strings.set_comment(key, comment)
            comment = trailing_comment
            count += 1
        return count

    def read_file(self, path: str | Path, lang: str) -> int:
        with open(path, encoding="utf-8") as fp:
            content = fp.read()
        return self.read_content(content, lang)

    def read_all_files(self, directory: str | Path) -> list[str]:
        directory = Path(directory)
        if not directory.is_dir():
            raise DirectoryError(f"Directory does not exist: {directory}")

        langs_read: list[str] = []
        for path in sorted(directory.rglob(f"*{EXTENSION}")):
            if not path.is_file():
                continue
            lang = self.determine_language_given_path(path.relative_to(directory))
            if not lang:
                continue
            self.read_file(path, lang)
            if lang not in langs_read:
                langs_read.append(lang)

        if not langs_read:
            raise NoLanguagesFoundError(
                f"Failed to read any files: No languages found at {directory}"
            )
        return langs_read

    def format_header(self, lang: str) -> str:
        return "\n".join(
            [
                XML_DECLARATION,
                "<!-- Tizen Strings File -->",
                f"<!-- Generated by tizen-i18n {__version__} -->",
                f"<!-- Language: {lang} -->",
            ]
        )

    def format_entry(self, entry: StringsEntry, lang: str) -> str | None:
        value = self.strings.translation_or_fallback(entry, lang)
        if value is None:
            return None
        line = f'\t<text id="{KEY_PREFIX}{format_key(entry.key)}">{encode_value(value)}</text>'
        if is_entry_comment(entry.comment):
            return f"{format_comment(entry.comment)}\n{line}"
        return line

    def format_section(self, section: StringsSection, lang: str) -> str | None:
        rows = [
            row
            for row in (self.format_entry(entry, lang) for entry in section.entries)
            if row is not None
        ]
        if not rows:
            return None
        return "\n".join([format_section_header(section), *rows])

    def format_sections(self, lang: str) -> str:
        blocks = [
            block
            for block in (self.format_section(s, lang) for s in self.strings.sections)
            if block is not None
        ]
        if not blocks:
            return f"{ROOT_OPEN}\n{ROOT_CLOSE}"
        return f"{ROOT_OPEN}\n" + "\n\n".join(blocks) + f"\n{ROOT_CLOSE}"

    def format_file(self, lang: str) -> str:
        return f"{self.format_header(lang)}\n{self.format_sections(lang)}\n"

    def write_file(self, path: str | Path, lang: str) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as fp:
            fp.write(self.format_file(lang))
        return path

    def write_all_files(self, directory: str | Path) -> list[str]:
        directory = Path(directory)
        if not directory.is_dir():
            raise DirectoryError(f"Directory does not exist: {directory}")

        langs_written: list[str] = []
        for lang in self.strings.language_codes:
            locale_code = locale_code_for(lang, self.lang_codes)
            if locale_code is None:
                continue
            self.write_file(directory / f"{locale_code}{EXTENSION}", lang)
            langs_written.append(lang)

        if not langs_written:
            raise EmptyOutputError(
                f"Failed to generate any files: No languages found at {directory}"
            )
        return langs_written
