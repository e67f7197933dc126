"""Plain-text strings data file that holds the shared strings model.

Format:

    [[General]]
    	[yes]
    		en = Yes
    		fr = Oui
    		comment = Shown on the confirm button

Values and comments with leading or trailing spaces are wrapped in backticks.
Blank lines and lines starting with `#` are ignored.
"""

from __future__ import annotations

import re
from pathlib import Path

from tizen_i18n.errors import StringsFileError
from tizen_i18n.strings_model import StringsEntry, StringsFile

SECTION_RE = re.compile(r"^\[\[(?P<name>.+)\]\]$")
KEY_RE = re.compile(r"^\[(?P<key>[^\[\]]+)\]$")
FIELD_RE = re.compile(r"^(?P<name>[A-Za-z0-9_-]+)\s*=\s?(?P<value>.*)$")
COMMENT_FIELD = "comment"


def unwrap_backticks(value: str) -> str:
    if len(value) >= 2 and value.startswith("`") and value.endswith("`"):
        return value[1:-1]
    return value


def wrap_backticks(value: str) -> str:
    if value != value.strip(" ") or (value.startswith("`") and value.endswith("`")):
        return f"`{value}`"
    return value


def parse_strings_text(text: str, source: object = "<string>") -> StringsFile:
    model = StringsFile()
    section_name: str | None = None
    entry: StringsEntry | None = None

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        section_match = SECTION_RE.match(line)
        if section_match:
            section_name = section_match.group("name").strip()
            model.section(section_name)
            entry = None
            continue

        key_match = KEY_RE.match(line)
        if key_match:
            if section_name is None:
                raise StringsFileError(source, line_no, "Key found before any section")
            key = key_match.group("key").strip()
            try:
                entry = model.add_entry(section_name, key)
            except ValueError as exc:
                raise StringsFileError(source, line_no, str(exc)) from exc
            continue

        field_match = FIELD_RE.match(line)
        if not field_match:
            raise StringsFileError(source, line_no, f"Unrecognized line: {line}")
        if entry is None:
            raise StringsFileError(source, line_no, "Value found before any key")

        value = unwrap_backticks(field_match.group("value"))
        name = field_match.group("name")
        if name == COMMENT_FIELD:
            entry.comment = value
        else:
            entry.translations[name] = value
            model.add_language(name)
    return model


def read_strings_file(path: Path) -> StringsFile:
    return parse_strings_text(path.read_text(encoding="utf-8"), source=path)


def format_strings_text(model: StringsFile) -> str:
    lines: list[str] = []
    for section in model.sections:
        if lines:
            lines.append("")
        lines.append(f"[[{section.name}]]")
        for entry in section.entries:
            lines.append(f"\t[{entry.key}]")
            for lang in model.language_codes:
                value = entry.translations.get(lang)
                if value is not None:
                    lines.append(f"\t\t{lang} = {wrap_backticks(value)}")
            if entry.comment:
                lines.append(f"\t\t{COMMENT_FIELD} = {wrap_backticks(entry.comment)}")
    return "\n".join(lines) + "\n"


def write_strings_file(path: Path, model: StringsFile) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_strings_text(model), encoding="utf-8")
