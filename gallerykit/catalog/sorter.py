"""
Catalog ordering strategies.
Follows Strategy Pattern; reversal is a separate pass over the sorted result.
"""
from pathlib import Path
from typing import Callable, Dict, List, Optional, Protocol, Sequence
from natsort import natsorted
import os
import logging

from ..core.interfaces import CatalogEntry, ISorter, SortingMethod

logger = logging.getLogger(__name__)


class SortStrategy(Protocol):
    """Protocol for catalog sort strategies."""
    def order(self, entries: Sequence[CatalogEntry]) -> List[CatalogEntry]: ...


class EnumerationOrder:
    """Keeps the order the filesystem listed the files in."""

    def order(self, entries: Sequence[CatalogEntry]) -> List[CatalogEntry]:
        return list(entries)


class AlphanumericOrder:
    """Lexicographic by filename; the directory plays no part."""

    def order(self, entries: Sequence[CatalogEntry]) -> List[CatalogEntry]:
        return sorted(entries, key=lambda e: e.filename)


class NaturalOrder:
    """Human ordering of filenames, so img2 comes before img10."""

    def order(self, entries: Sequence[CatalogEntry]) -> List[CatalogEntry]:
        return natsorted(entries, key=lambda e: e.filename)


class TimestampOrder:
    """Newest first by a stat() timestamp."""

    def __init__(self, root: Path, timestamp: Callable[[os.stat_result], float]):
        self.root = Path(root)
        self.timestamp = timestamp

    def order(self, entries: Sequence[CatalogEntry]) -> List[CatalogEntry]:
        stamps = {e: self.timestamp((self.root / e.relative_path).stat()) for e in entries}
        return sorted(entries, key=lambda e: stamps[e], reverse=True)


def modified_time(stat: os.stat_result) -> float:
    return stat.st_mtime


def created_time(stat: os.stat_result) -> float:
    # st_birthtime only exists on macOS/BSD (and Windows on 3.12+)
    return getattr(stat, "st_birthtime", stat.st_ctime)


class CatalogSorter(ISorter):
    """
    Orders catalog entries by the configured method and flattens them to
    root-relative path strings.
    """

    def __init__(
        self,
        method: SortingMethod = SortingMethod.ALPHANUMERIC,
        reverse: bool = False,
        root: Optional[Path] = None,
    ):
        self.method = method
        self.reverse = reverse
        self.root = Path(root) if root is not None else Path(".")
        self.strategy = self._strategy_for(method)

    @classmethod
    def from_config(cls, config) -> "CatalogSorter":
        return cls(config.sorting_method, config.reverse_sorting, config.root)

    def _strategy_for(self, method: SortingMethod) -> SortStrategy:
        strategies: Dict[SortingMethod, Callable[[], SortStrategy]] = {
            SortingMethod.NONE: EnumerationOrder,
            SortingMethod.ALPHANUMERIC: AlphanumericOrder,
            SortingMethod.NATURAL: NaturalOrder,
            SortingMethod.DATE_MODIFIED: lambda: TimestampOrder(self.root, modified_time),
            SortingMethod.DATE_CREATED: lambda: TimestampOrder(self.root, created_time),
        }
        return strategies[method]()

    def order(self, entries: Sequence[CatalogEntry]) -> List[CatalogEntry]:
        """Sort entries, then reverse the whole sequence if requested."""
        ordered = self.strategy.order(entries)
        if self.reverse:
            ordered.reverse()
        return ordered

    def sort(self, entries: Sequence[CatalogEntry]) -> List[str]:
        """Order entries and flatten them to relative path strings."""
        logger.debug(f"Sorting {len(entries)} entries by {self.method.value} (reverse={self.reverse})")
        return [e.relative_path for e in self.order(entries)]
