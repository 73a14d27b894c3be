"""
Core module - Interfaces, data types, errors and format tables for gallerykit.
"""
from .interfaces import (
    # Enums
    SortingMethod,

    # Data classes
    CatalogEntry,
    ImageDimensions,
    ThumbnailPlan,
    EncoderSettings,
    ThumbnailJob,
    ThumbnailResult,
    RunSummary,

    # Abstract interfaces
    ICatalogBuilder,
    ISorter,
    ICatalogStore,
    IDirectoryPlanner,
    IImageScaler,
    IImageEncoder,
    IPipelineRunner,
)
from .errors import (
    GalleryError,
    ConfigurationError,
    CatalogReadError,
    ImageProcessingError,
)

__all__ = [
    # Enums
    "SortingMethod",

    # Data classes
    "CatalogEntry",
    "ImageDimensions",
    "ThumbnailPlan",
    "EncoderSettings",
    "ThumbnailJob",
    "ThumbnailResult",
    "RunSummary",

    # Abstract interfaces
    "ICatalogBuilder",
    "ISorter",
    "ICatalogStore",
    "IDirectoryPlanner",
    "IImageScaler",
    "IImageEncoder",
    "IPipelineRunner",

    # Errors
    "GalleryError",
    "ConfigurationError",
    "CatalogReadError",
    "ImageProcessingError",
]
