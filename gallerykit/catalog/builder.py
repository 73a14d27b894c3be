"""
Collects catalog entries from the configured image directories.
Directories are listed one level deep; sub-directories must be configured
explicitly to be cataloged.
"""
from pathlib import Path
from typing import List, Sequence
import logging

from ..core.extensions import expand_format_aliases, extension_of
from ..core.interfaces import CatalogEntry, ICatalogBuilder

logger = logging.getLogger(__name__)


class FileCatalogBuilder(ICatalogBuilder):
    """Lists allow-listed image files in each configured directory."""

    def __init__(self, root: Path, directories: Sequence[str], formats: Sequence[str]):
        self.root = Path(root)
        self.directories = list(directories)
        self.formats = set(expand_format_aliases(formats))

    @classmethod
    def from_config(cls, config) -> "FileCatalogBuilder":
        return cls(config.root, config.image_directory_paths, config.file_formats)

    def collect(self) -> List[CatalogEntry]:
        """Enumerate allow-listed images in every configured directory."""
        entries: List[CatalogEntry] = []
        for directory in self.directories:
            found = self._scan(directory)
            logger.debug(f"Found {len(found)} images in {directory}")
            entries.extend(found)

        logger.info(f"Cataloged {len(entries)} images from {len(self.directories)} directories")
        return entries

    def _scan(self, directory: str) -> List[CatalogEntry]:
        folder = self.root / directory
        return [
            CatalogEntry(directory, f.name)
            for f in folder.iterdir()
            if f.is_file() and self.is_allowed(f)
        ]

    def is_allowed(self, path: Path) -> bool:
        return extension_of(path) in self.formats
