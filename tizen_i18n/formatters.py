from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from tizen_i18n.strings_model import StringsFile
from tizen_i18n.tizen import FORMAT_NAME as TIZEN_FORMAT_NAME
from tizen_i18n.tizen import TizenFormatter

FORMATTERS: dict[str, type[TizenFormatter]] = {
    TIZEN_FORMAT_NAME: TizenFormatter,
}


def formatter_for(
    name: str,
    strings: StringsFile,
    lang_codes: Mapping[str, str] | None = None,
    registry: Mapping[str, type[TizenFormatter]] = FORMATTERS,
) -> TizenFormatter:
    formatter_cls = registry.get(name.strip().lower())
    if formatter_cls is None:
        known = ", ".join(sorted(registry)) or "(none)"
        raise ValueError(f"Unknown format '{name}'. Known formats: {known}")
    return formatter_cls(strings, lang_codes)


def formatter_for_directory(
    path: Path,
    strings: StringsFile,
    lang_codes: Mapping[str, str] | None = None,
    registry: Mapping[str, type[TizenFormatter]] = FORMATTERS,
) -> TizenFormatter | None:
    for formatter_cls in registry.values():
        formatter = formatter_cls(strings, lang_codes)
        if formatter.can_handle_directory(path):
            return formatter
    return None
