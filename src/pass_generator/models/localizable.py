"""Localizable text and string-table merging.

A localizable value is either plain text, written inline into pass.json, or a
mapping of language code to text. Mappings are written to pass.json as a
lookup key while the translations go to the ``<language>.lproj/pass.strings``
tables.
"""

import typing as t
from collections.abc import Iterable, Mapping

LocalizedString = dict[str, str]
LocalizableText = str | LocalizedString

# language code -> (lookup key -> text)
StringsTable = dict[str, dict[str, str]]


@t.runtime_checkable
class Localizable(t.Protocol):
    """Anything that contributes entries to the pass string tables."""

    @property
    def strings(self) -> StringsTable:
        """Entries keyed first by language, then by lookup key."""
        ...


def localized_entries(key: str, value: LocalizableText | None) -> StringsTable:
    """Build the string-table contribution of a single localizable value.

    Plain text and missing values contribute nothing.
    """
    if not isinstance(value, Mapping):
        return {}
    return {language: {key: text} for language, text in value.items()}


def merge_strings(tables: Iterable[Mapping[str, Mapping[str, str]]]) -> StringsTable:
    """Merge string tables; later tables win on key collisions."""
    merged: StringsTable = {}
    for table in tables:
        for language, entries in table.items():
            merged.setdefault(language, {}).update(entries)
    return merged


def lookup_key(key: str, value: LocalizableText | None) -> str | None:
    """Return what pass.json carries for a localizable value.

    Plain text is written inline; mappings are replaced by ``key``.
    """
    if value is None:
        return None
    if isinstance(value, Mapping):
        return key
    return value
