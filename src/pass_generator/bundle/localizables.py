"""String tables written as ``<language>.lproj/pass.strings``."""

import typing as t
from collections.abc import Mapping
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

LPROJ_SUFFIX = ".lproj"
STRINGS_FILE_NAME = "pass.strings"
STRINGS_ENCODING = "utf-8"

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n"}


def escape_strings_literal(text: str) -> str:
    """Escape text for a double-quoted literal of a .strings file."""
    return "".join(_ESCAPES.get(char, char) for char in text)


def format_strings(entries: Mapping[str, str]) -> str:
    """Render entries as ``"key" = "value";`` lines, one per entry."""
    return "".join(
        f'"{escape_strings_literal(key)}" = "{escape_strings_literal(value)}";\n' for key, value in entries.items()
    )


class LocalizablesGenerator:
    """Writes one string table per language into the bundle directory."""

    def __init__(self, log: t.Any = None) -> None:
        self.logger = log or logger

    def generate_localizables(self, strings: Mapping[str, Mapping[str, str]], directory: Path) -> None:
        """Write ``<language>.lproj/pass.strings`` for every language in ``strings``.

        A language without entries still gets its directory and an empty file.
        Missing parent directories are created.

        Args:
            strings: Entries keyed by language, then by lookup key.
            directory: The bundle directory.

        Raises:
            OSError: If a directory or file cannot be written.
        """
        self.logger.debug("localizables_generating", directory=str(directory), languages=sorted(strings))
        for language, entries in strings.items():
            lproj_directory = directory / f"{language}{LPROJ_SUFFIX}"
            lproj_directory.mkdir(parents=True, exist_ok=True)
            strings_path = lproj_directory / STRINGS_FILE_NAME
            strings_path.write_text(format_strings(entries), encoding=STRINGS_ENCODING)
            self.logger.debug(
                "strings_file_written",
                language=language,
                path=str(strings_path),
                entries=len(entries),
            )
