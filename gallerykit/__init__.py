"""
GalleryKit - Image gallery catalog and thumbnail toolkit.

Builds the two artifacts a static image gallery needs:
- A catalog: one ordered JSON list of image paths gathered from several
  directories and sorted by name, natural order or file date
- A thumbnail tree mirroring those directories, with proportionally
  scaled JPEG, WebP and PNG thumbnails generated in parallel

Example usage:
    from gallerykit import GalleryGenerator, CatalogConfig, ThumbnailConfig

    generator = GalleryGenerator()

    catalog_path = generator.build_catalog(CatalogConfig.from_mapping({
        "image_directory_root_path": "img/",
        "image_directory_paths": ["japan-photos/", "random-photos/"],
        "sorting_method": "DATE_MODIFIED",
    }))

    summary = generator.generate_thumbnails(ThumbnailConfig.from_mapping({
        "database_file_path": str(catalog_path),
        "thumbnail_size": 154,
    }))
    print(f"{summary.succeeded} generated, {summary.failed} failed")
"""

__version__ = "1.0.0"

from .gallery import GalleryGenerator
from .config import CatalogConfig, ThumbnailConfig, load_config_file
from .core.interfaces import (
    SortingMethod,
    CatalogEntry,
    ImageDimensions,
    ThumbnailPlan,
    EncoderSettings,
    RunSummary,
)
from .core.errors import (
    GalleryError,
    ConfigurationError,
    CatalogReadError,
    ImageProcessingError,
)
from .catalog import FileCatalogBuilder, CatalogSorter, CatalogStore
from .image import ImageScaler, ImageDecoder, ImageEncoder
from .thumbnails import ThumbnailDirectoryPlanner, PipelineRunner

__all__ = [
    # Main facade
    "GalleryGenerator",

    # Configuration
    "CatalogConfig",
    "ThumbnailConfig",
    "load_config_file",

    # Core types
    "SortingMethod",
    "CatalogEntry",
    "ImageDimensions",
    "ThumbnailPlan",
    "EncoderSettings",
    "RunSummary",

    # Errors
    "GalleryError",
    "ConfigurationError",
    "CatalogReadError",
    "ImageProcessingError",

    # Catalog phase
    "FileCatalogBuilder",
    "CatalogSorter",
    "CatalogStore",

    # Thumbnail phase
    "ImageScaler",
    "ImageDecoder",
    "ImageEncoder",
    "ThumbnailDirectoryPlanner",
    "PipelineRunner",
]
