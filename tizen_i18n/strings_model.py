"""In-memory strings model shared by all resource formats.

Keys are unique across the whole model; sections only group entries for
output. Formatters update `translations[lang]` and comments by key and never
rename or drop entries.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

UNCATEGORIZED_SECTION = "Uncategorized"


@dataclass
class StringsEntry:
    key: str
    translations: dict[str, str] = field(default_factory=dict)
    comment: str | None = None


@dataclass
class StringsSection:
    name: str
    entries: list[StringsEntry] = field(default_factory=list)


@dataclass
class StringsFile:
    sections: list[StringsSection] = field(default_factory=list)
    language_codes: list[str] = field(default_factory=list)
    entries_by_key: dict[str, StringsEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for section in self.sections:
            for entry in section.entries:
                self.entries_by_key[entry.key] = entry
                for lang in entry.translations:
                    self.add_language(lang)

    @property
    def developer_language(self) -> str | None:
        return self.language_codes[0] if self.language_codes else None

    def add_language(self, lang: str) -> None:
        if lang not in self.language_codes:
            self.language_codes.append(lang)

    def section(self, name: str) -> StringsSection:
        for section in self.sections:
            if section.name == name:
                return section
        section = StringsSection(name=name)
        self.sections.append(section)
        return section

    def add_entry(self, section_name: str, key: str) -> StringsEntry:
        if key in self.entries_by_key:
            raise ValueError(f"Duplicate key: {key}")
        entry = StringsEntry(key=key)
        self.section(section_name).entries.append(entry)
        self.entries_by_key[key] = entry
        return entry

    def find_key(self, key: str, ignore_case: bool = False) -> str | None:
        if key in self.entries_by_key:
            return key
        if not ignore_case:
            return None
        folded = key.casefold()
        for existing in self.entries_by_key:
            if existing.casefold() == folded:
                return existing
        return None

    def iter_entries(self) -> Iterator[StringsEntry]:
        for section in self.sections:
            yield from section.entries

    def get_translation(self, key: str, lang: str) -> str | None:
        entry = self.entries_by_key.get(key)
        if entry is None:
            return None
        return entry.translations.get(lang)

    def set_translation(self, key: str, lang: str, value: str) -> None:
        entry = self.entries_by_key.get(key)
        if entry is None:
            entry = self.add_entry(UNCATEGORIZED_SECTION, key)
        entry.translations[lang] = value
        self.add_language(lang)

    def get_comment(self, key: str) -> str | None:
        entry = self.entries_by_key.get(key)
        return entry.comment if entry else None

    def set_comment(self, key: str, comment: str) -> None:
        entry = self.entries_by_key.get(key)
        if entry is None:
            entry = self.add_entry(UNCATEGORIZED_SECTION, key)
        entry.comment = comment

    def translation_or_fallback(self, entry: StringsEntry, lang: str) -> str | None:
        value = entry.translations.get(lang)
        if value is None and self.developer_language:
            value = entry.translations.get(self.developer_language)
        return value
