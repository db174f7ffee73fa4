"""Tests for pass_generator/bundle/copier.py."""

from pathlib import Path

import pytest

from pass_generator.bundle.copier import ItemsCopier


@pytest.fixture
def bundle(tmp_path: Path) -> Path:
    path = tmp_path / "pass"
    path.mkdir()
    return path


class TestItemsCopier:
    """Tests for copying template assets into the bundle."""

    def test_copies_to_root_without_lproj(self, bundle: Path, image_template: Path) -> None:
        """Without lproj directories the template lands at the bundle root."""
        (image_template / "extra").mkdir()
        (image_template / "extra" / "notes.txt").write_text("hello")

        ItemsCopier().copy_items(image_template, bundle)

        assert sorted(path.name for path in bundle.iterdir()) == ["extra", "icon.png", "icon@2x.png", "logo.png"]
        assert (bundle / "extra" / "notes.txt").read_text() == "hello"
        assert (bundle / "icon.png").read_bytes() == (image_template / "icon.png").read_bytes()

    def test_copies_into_each_lproj(self, bundle: Path, image_template: Path) -> None:
        """With lproj directories every locale gets its own copy."""
        for language in ("en", "de"):
            (bundle / f"{language}.lproj").mkdir()
            (bundle / f"{language}.lproj" / "pass.strings").write_text("")

        ItemsCopier().copy_items(image_template, bundle)

        assert sorted(path.name for path in bundle.iterdir()) == ["de.lproj", "en.lproj"]
        for language in ("en", "de"):
            names = sorted(path.name for path in (bundle / f"{language}.lproj").iterdir())
            assert names == ["icon.png", "icon@2x.png", "logo.png", "pass.strings"]

    def test_empty_template(self, bundle: Path, empty_template: Path) -> None:
        """An empty template copies nothing."""
        ItemsCopier().copy_items(empty_template, bundle)

        assert list(bundle.iterdir()) == []

    def test_collision_is_fatal(self, bundle: Path, image_template: Path) -> None:
        """An item that already exists at its destination should fail the copy."""
        (bundle / "en.lproj").mkdir()
        (bundle / "en.lproj" / "logo.png").write_bytes(b"localized logo")

        with pytest.raises(FileExistsError):
            ItemsCopier().copy_items(image_template, bundle)

        assert (bundle / "en.lproj" / "logo.png").read_bytes() == b"localized logo"

    def test_missing_template_raises(self, bundle: Path, tmp_path: Path) -> None:
        """A template directory that does not exist should fail."""
        with pytest.raises(FileNotFoundError):
            ItemsCopier().copy_items(tmp_path / "missing", bundle)
