"""manifest.json: the SHA-1 digest of every file in the bundle."""

import hashlib
import json
import typing as t
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

MANIFEST_FILE_NAME = "manifest.json"
LPROJ_MARKER = "lproj"


def manifest_key(path: Path) -> str:
    """Return the manifest key of a bundle file.

    Files whose containing folder name contains "lproj" are keyed as
    ``<folder>/<file>`` so same-named files of different locales stay
    distinct. Everything else is keyed by its base name.
    """
    name = path.name
    containing_folder = next((part for part in reversed(path.parts) if part != name), None)
    if containing_folder is not None and LPROJ_MARKER in containing_folder:
        return f"{containing_folder}/{name}"
    return name


def file_sha1(path: Path) -> str:
    """Lowercase hex SHA-1 of a file's content."""
    return hashlib.sha1(path.read_bytes()).hexdigest()


class ManifestGenerator:
    """Hashes a bundle directory into manifest.json."""

    def __init__(self, log: t.Any = None) -> None:
        self.logger = log or logger

    def build_manifest(self, directory: Path) -> dict[str, str]:
        """Map the manifest key of every file below ``directory`` to its SHA-1.

        Raises:
            FileNotFoundError: If ``directory`` does not exist.
            NotADirectoryError: If ``directory`` is a file.
        """
        manifest: dict[str, str] = {}
        self._add_directory(manifest, directory)
        return manifest

    def _add_directory(self, manifest: dict[str, str], directory: Path) -> None:
        for item in sorted(directory.iterdir()):
            if item.is_dir():
                self._add_directory(manifest, item)
            elif item.is_file():
                manifest[manifest_key(item)] = file_sha1(item)

    def generate_manifest(self, directory: Path, manifest_path: Path) -> None:
        """Write the manifest of ``directory`` to ``manifest_path`` as pretty-printed JSON.

        Nothing is written when the directory cannot be walked.

        Args:
            directory: The bundle directory.
            manifest_path: Where to write manifest.json.

        Raises:
            FileNotFoundError: If ``directory`` does not exist.
            OSError: If a file cannot be read or the manifest cannot be written.
        """
        manifest = self.build_manifest(directory)
        manifest_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
        self.logger.debug("manifest_generated", path=str(manifest_path), files=len(manifest))
