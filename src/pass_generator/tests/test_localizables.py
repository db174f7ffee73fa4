"""Tests for pass_generator/bundle/localizables.py."""

from pathlib import Path

import pytest

from pass_generator.bundle.localizables import LocalizablesGenerator, escape_strings_literal, format_strings
from pass_generator.models import Pass


class TestFormatStrings:
    """Tests for the .strings body."""

    def test_one_line_per_entry(self) -> None:
        """Each entry should be a newline terminated "key" = "value"; line."""
        body = format_strings({"pass.description": "Ticket", "pass.field.door": "Door"})

        assert body == '"pass.description" = "Ticket";\n"pass.field.door" = "Door";\n'

    def test_empty_table(self) -> None:
        """No entries give an empty body."""
        assert format_strings({}) == ""

    def test_quotes_backslashes_and_newlines_escaped(self) -> None:
        """Special characters should not break the literal or the line."""
        assert escape_strings_literal('say "hi"\\\nbye') == 'say \\"hi\\"\\\\\\nbye'


class TestLocalizablesGenerator:
    """Tests for writing the string tables."""

    def test_no_languages_creates_nothing(self, tmp_path: Path, minimal_pass: Pass) -> None:
        """A pass without translations should not create any lproj directory."""
        LocalizablesGenerator().generate_localizables(minimal_pass.strings, tmp_path)

        assert list(tmp_path.iterdir()) == []

    def test_one_directory_per_language(self, tmp_path: Path, localized_pass: Pass) -> None:
        """Every language should get its own lproj directory and strings file."""
        LocalizablesGenerator().generate_localizables(localized_pass.strings, tmp_path)

        assert sorted(path.name for path in tmp_path.iterdir()) == ["de.lproj", "en.lproj"]
        german = (tmp_path / "de.lproj" / "pass.strings").read_text(encoding="utf-8")
        assert '"pass.description" = "Konzertkarte";\n' in german
        assert '"pass.field.door" = "Einlass";\n' in german

    def test_language_without_entries_gets_empty_file(self, tmp_path: Path) -> None:
        """A language with no entries still gets a directory and an empty file."""
        LocalizablesGenerator().generate_localizables({"fr": {}}, tmp_path)

        assert (tmp_path / "fr.lproj" / "pass.strings").read_text(encoding="utf-8") == ""

    def test_missing_directory_is_created(self, tmp_path: Path) -> None:
        """Missing parents of the bundle directory should be created."""
        target = tmp_path / "nested" / "pass"

        LocalizablesGenerator().generate_localizables({"en": {"k": "v"}}, target)

        assert (target / "en.lproj" / "pass.strings").read_text(encoding="utf-8") == '"k" = "v";\n'

    def test_unwritable_target_raises(self, tmp_path: Path) -> None:
        """A target that is a file cannot hold lproj directories."""
        target = tmp_path / "file"
        target.write_text("not a directory")

        with pytest.raises(OSError):
            LocalizablesGenerator().generate_localizables({"en": {"k": "v"}}, target)
