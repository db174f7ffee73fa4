"""Compression of the bundle directory into the .pkpass archive."""

from pathlib import Path

from pass_generator.bundle.tool import ExternalTool
from pass_generator.exceptions import CannotZipError


class Zipper(ExternalTool):
    """Archives the bundle contents with the ``zip`` tool."""

    default_program = "zip"

    async def zip_items(self, directory: Path, zip_path: Path) -> None:
        """Archive everything inside ``directory``, recursively and quietly.

        The archive holds the directory's contents, not the directory itself.

        Raises:
            CannotZipError: If zip exits with a non-zero status, e.g. for an
                empty directory.
        """
        zip_path = zip_path.absolute()
        self.logger.debug("bundle_zipping", directory=str(directory), zip_path=str(zip_path))
        await self.run([str(zip_path), "-r", "-q", "."], CannotZipError, "zip_failed", cwd=directory)
