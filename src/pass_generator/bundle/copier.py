"""Copies template assets into the bundle directory."""

import errno
import os
import shutil
import typing as t
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

LPROJ_MARKER = "lproj"


def _copy_item(source: Path, destination: Path) -> None:
    if destination.exists():
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(destination))
    if source.is_dir():
        shutil.copytree(source, destination)
    else:
        shutil.copy2(source, destination)


class ItemsCopier:
    """Copies the template into the bundle, once per locale when localized."""

    def __init__(self, log: t.Any = None) -> None:
        self.logger = log or logger

    def copy_items(self, template_directory: Path, bundle_directory: Path) -> None:
        """Copy every top-level template item into the bundle.

        Without any lproj directory in the bundle the template items land at
        the bundle root. Otherwise each lproj directory receives its own copy
        of every template item.

        Args:
            template_directory: Directory holding the template assets.
            bundle_directory: The bundle directory.

        Raises:
            FileExistsError: If a copied item already exists at its destination.
            OSError: If the template cannot be read or an item cannot be copied.
        """
        lproj_directories = sorted(
            entry.name for entry in bundle_directory.iterdir() if LPROJ_MARKER in entry.name
        )
        template_items = sorted(template_directory.iterdir())
        self.logger.debug(
            "template_items_copying",
            template=str(template_directory),
            bundle=str(bundle_directory),
            items=len(template_items),
            lproj_directories=lproj_directories,
        )

        if not lproj_directories:
            for item in template_items:
                _copy_item(item, bundle_directory / item.name)
            return

        for lproj_directory in lproj_directories:
            for item in template_items:
                _copy_item(item, bundle_directory / lproj_directory / item.name)
