"""
Catalog module: directory scanning, ordering and persistence.
"""
from .builder import FileCatalogBuilder
from .sorter import CatalogSorter, AlphanumericOrder, NaturalOrder, TimestampOrder
from .store import CatalogStore

__all__ = [
    'FileCatalogBuilder',
    'CatalogSorter',
    'AlphanumericOrder',
    'NaturalOrder',
    'TimestampOrder',
    'CatalogStore',
]
