"""
Abstract interfaces following Interface Segregation Principle (SOLID).
Defines contracts and shared value types for all gallerykit components.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple
from dataclasses import dataclass, field
from enum import Enum
import math


class SortingMethod(Enum):
    """Orderings available to the catalog phase."""
    NONE = "NONE"
    ALPHANUMERIC = "ALPHANUMERIC"
    NATURAL = "NATURAL"
    DATE_MODIFIED = "DATE_MODIFIED"
    DATE_CREATED = "DATE_CREATED"


@dataclass(frozen=True)
class CatalogEntry:
    """One cataloged image: root-relative directory (trailing slash) and filename."""
    directory: str
    filename: str

    @property
    def relative_path(self) -> str:
        return f"{self.directory}{self.filename}"


@dataclass(frozen=True)
class ImageDimensions:
    """Represents image dimensions with utility properties."""
    width: int
    height: int

    @property
    def max_dimension(self) -> int:
        return max(self.width, self.height)

    def fit_within(self, size: int) -> "ImageDimensions":
        """
        Bounding-box fit: the larger side becomes exactly ``size`` and the
        smaller one shrinks proportionally. Smaller images are scaled up.
        """
        if size <= 0:
            raise ValueError(f"Target size must be positive, got {size}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid image dimensions: {self.width}x{self.height}")

        scale = size / self.max_dimension
        return ImageDimensions(
            max(1, _round_half_up(self.width * scale)),
            max(1, _round_half_up(self.height * scale)),
        )

    def as_tuple(self) -> Tuple[int, int]:
        return (self.width, self.height)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ThumbnailPlan(Mapping[str, str]):
    """Read-only, injective mapping of source directory -> thumbnail directory."""

    def __init__(self, assignments: Mapping[str, str]):
        destinations = list(assignments.values())
        if len(set(destinations)) != len(destinations):
            raise ValueError("Thumbnail plan assigns one destination to several sources")
        self._assignments = MappingProxyType(dict(assignments))

    def __getitem__(self, source: str) -> str:
        return self._assignments[source]

    def __iter__(self) -> Iterator[str]:
        return iter(self._assignments)

    def __len__(self) -> int:
        return len(self._assignments)

    def __repr__(self) -> str:
        return f"ThumbnailPlan({dict(self._assignments)!r})"


@dataclass(frozen=True)
class EncoderSettings:
    """Per-format quality knobs for thumbnail encoding."""
    jpeg_quality: int = 75
    webp_quality: int = 8
    png_compression: int = 6


@dataclass(frozen=True)
class ThumbnailJob:
    """A single decode -> scale -> encode unit of work."""
    catalog_path: str
    source: Path
    destination: Path
    size: int
    encoder: EncoderSettings = field(default_factory=EncoderSettings)
    auto_orient: bool = True


@dataclass(frozen=True)
class ThumbnailResult:
    """Outcome of a ThumbnailJob, sent back from a worker."""
    catalog_path: str
    destination: Path
    ok: bool
    error: Optional[str] = None
    dimensions: Optional[ImageDimensions] = None


@dataclass
class RunSummary:
    """Aggregated outcome of a thumbnail run."""
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    stopped: bool = False
    failures: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return self.succeeded + self.failed

    @property
    def skipped(self) -> int:
        return self.total - self.processed


class ICatalogBuilder(ABC):
    """Interface for collecting catalog entries from configured directories."""

    @abstractmethod
    def collect(self) -> List[CatalogEntry]:
        """Enumerate allow-listed images in every configured directory."""
        pass


class ISorter(ABC):
    """Interface for catalog ordering."""

    @abstractmethod
    def sort(self, entries: Sequence[CatalogEntry]) -> List[str]:
        """Order entries and flatten them to relative path strings."""
        pass


class ICatalogStore(ABC):
    """Interface for persisting the catalog between phases."""

    @abstractmethod
    def write(self, paths: Sequence[str], output_path: Path) -> Path:
        """Persist the ordered path list."""
        pass

    @abstractmethod
    def read(self, catalog_path: Path) -> List[str]:
        """Load the ordered path list."""
        pass


class IDirectoryPlanner(ABC):
    """Interface for thumbnail directory planning."""

    @abstractmethod
    def assign(self, catalog_paths: Sequence[str]) -> ThumbnailPlan:
        """Compute destination directories without touching the filesystem."""
        pass

    @abstractmethod
    def plan(self, catalog_paths: Sequence[str], thumbnail_root: Path) -> ThumbnailPlan:
        """Compute destination directories and create them."""
        pass


class IImageScaler(ABC):
    """Interface for thumbnail scaling."""

    @abstractmethod
    def scale(self, image, size: int):
        """Return a bounding-box scaled copy of ``image``."""
        pass


class IImageEncoder(ABC):
    """Interface for format-dispatched image writing."""

    @abstractmethod
    def encode(self, image, output_path: Path) -> Path:
        """Write ``image`` using the format implied by ``output_path``."""
        pass


class IPipelineRunner(ABC):
    """Interface for running thumbnail jobs over a catalog."""

    @abstractmethod
    def run(self, catalog_paths: Sequence[str], plan: ThumbnailPlan) -> RunSummary:
        """Process every catalog entry and report aggregated counts."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop dispatching new work; in-flight work is allowed to finish."""
        pass

