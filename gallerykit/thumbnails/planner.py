"""
Thumbnail directory planning.

Every source directory in the catalog gets its own destination directory
under the thumbnail root. Planning runs to completion, directories included,
before any thumbnail is encoded; workers only ever read the plan.
"""
from pathlib import Path
from typing import Dict, List, Sequence, Set
import posixpath
import logging

from ..core.interfaces import IDirectoryPlanner, ThumbnailPlan

logger = logging.getLogger(__name__)


def source_directory(catalog_path: str) -> str:
    """Directory part of a catalog path, without a trailing slash."""
    return posixpath.dirname(catalog_path.replace("\\", "/"))


def safe_directory_name(directory: str) -> str:
    """Drop parent/current markers and empty segments from a relative directory."""
    parts = [p for p in directory.replace("\\", "/").split("/") if p not in ("", ".", "..")]
    return "/".join(parts)


class ThumbnailDirectoryPlanner(IDirectoryPlanner):
    """Maps source directories to unique destination directories."""

    def source_directories(self, catalog_paths: Sequence[str]) -> List[str]:
        """Distinct source directories in first-seen order."""
        seen: Dict[str, None] = {}
        for path in catalog_paths:
            seen.setdefault(source_directory(path), None)
        return list(seen)

    def assign(self, catalog_paths: Sequence[str]) -> ThumbnailPlan:
        """Compute destination directories without touching the filesystem."""
        taken: Set[str] = set()
        assignments: Dict[str, str] = {}

        for directory in self.source_directories(catalog_paths):
            candidate = safe_directory_name(directory)
            name = candidate
            suffix = 1
            while name in taken:
                name = f"{candidate}_{suffix}"
                suffix += 1

            if name != candidate:
                logger.warning(f"Thumbnail directory {candidate!r} already planned, using {name!r} for {directory!r}")
            taken.add(name)
            assignments[directory] = name

        return ThumbnailPlan(assignments)

    def plan(self, catalog_paths: Sequence[str], thumbnail_root: Path) -> ThumbnailPlan:
        """Compute destination directories and create them under ``thumbnail_root``."""
        thumbnail_root = Path(thumbnail_root)
        plan = self.assign(catalog_paths)

        thumbnail_root.mkdir(parents=True, exist_ok=True)
        for source, destination in plan.items():
            (thumbnail_root / destination).mkdir(parents=True, exist_ok=True)
            logger.debug(f"Planned {source or '.'} -> {thumbnail_root / destination}")

        logger.info(f"Created {len(plan)} thumbnail directories in {thumbnail_root}")
        return plan
