"""
GalleryGenerator - Main facade for both gallery phases.
Follows Facade Pattern: the catalog phase writes the catalog file, the
thumbnail phase reads it back and derives the thumbnail tree.
"""
from pathlib import Path
from typing import List, Optional
import logging

from .config.settings import CatalogConfig, ThumbnailConfig
from .core.interfaces import RunSummary
from .catalog.builder import FileCatalogBuilder
from .catalog.sorter import CatalogSorter
from .catalog.store import CatalogStore
from .thumbnails.planner import ThumbnailDirectoryPlanner
from .thumbnails.runner import PipelineRunner, ProgressCallback

logger = logging.getLogger(__name__)


class GalleryGenerator:
    """
    Unified API for building a gallery catalog and its thumbnails.

    Example:
        generator = GalleryGenerator()

        # Phase 1
        catalog_path = generator.build_catalog(CatalogConfig.from_file("catalog.json"))

        # Phase 2, possibly in another process
        summary = generator.generate_thumbnails(ThumbnailConfig.from_file("thumbs.json"))
        print(f"{summary.succeeded} generated, {summary.failed} failed")
    """

    def __init__(self, store: Optional[CatalogStore] = None, planner: Optional[ThumbnailDirectoryPlanner] = None):
        self.store = store or CatalogStore()
        self.planner = planner or ThumbnailDirectoryPlanner()
        self.runner: Optional[PipelineRunner] = None
        self._stop_requested = False

    def collect_catalog(self, config: CatalogConfig) -> List[str]:
        """Scan and order the configured directories without writing anything."""
        entries = FileCatalogBuilder.from_config(config).collect()
        return CatalogSorter.from_config(config).sort(entries)

    def build_catalog(self, config: CatalogConfig) -> Path:
        """
        Run the catalog phase.

        Returns:
            Path of the written catalog file
        """
        logger.info(f"Building catalog for {config.root}")
        paths = self.collect_catalog(config)
        return self.store.write(paths, config.catalog_path)

    def generate_thumbnails(
        self,
        config: ThumbnailConfig,
        progress: Optional[ProgressCallback] = None,
        **runner_options,
    ) -> RunSummary:
        """
        Run the thumbnail phase from the catalog file named in ``config``.

        Raises:
            CatalogReadError: If the catalog cannot be loaded
        """
        paths = self.store.read(config.catalog_path)

        # every destination directory exists before the first job is dispatched
        plan = self.planner.plan(paths, config.thumbnail_root)

        self.runner = PipelineRunner.from_config(config, progress=progress, **runner_options)
        if self._stop_requested:
            self.runner.stop()
        return self.runner.run(paths, plan)

    def stop(self) -> None:
        """Ask a running thumbnail phase to stop dispatching new images."""
        self._stop_requested = True
        if self.runner is not None:
            self.runner.stop()
