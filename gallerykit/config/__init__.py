"""
Configuration module for gallerykit.
"""
from .schema import Option, validate_options, sanitize_path
from .settings import (
    CatalogConfig,
    ThumbnailConfig,
    CATALOG_SCHEMA,
    THUMBNAIL_SCHEMA,
    load_config_file,
)

__all__ = [
    'Option',
    'validate_options',
    'sanitize_path',
    'CatalogConfig',
    'ThumbnailConfig',
    'CATALOG_SCHEMA',
    'THUMBNAIL_SCHEMA',
    'load_config_file',
]
