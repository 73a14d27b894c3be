"""
Exception hierarchy for gallerykit.

Configuration and catalog errors are fatal to a run; image processing
errors are scoped to a single file and never abort a batch.
"""
from pathlib import Path
from typing import Optional, Union


class GalleryError(Exception):
    """Base class for all gallerykit errors."""


class ConfigurationError(GalleryError, ValueError):
    """An option holds a value that defaulting must not paper over."""

    def __init__(self, option: str, reason: str):
        self.option = option
        self.reason = reason
        super().__init__(f"{option}: {reason}")


class CatalogReadError(GalleryError):
    """The catalog file is missing or malformed."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read catalog {self.path}: {reason}")


class ImageProcessingError(GalleryError):
    """A single image could not be decoded, scaled or encoded."""

    def __init__(self, path: Union[str, Path], reason: str, cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.reason = reason
        self.__cause__ = cause
        super().__init__(f"{self.path}: {reason}")
