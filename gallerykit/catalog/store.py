"""
Catalog persistence: the JSON hand-off between the catalog and thumbnail phases.
"""
from pathlib import Path
from typing import List, Sequence, Union
import json
import logging

from ..core.errors import CatalogReadError
from ..core.interfaces import ICatalogStore

logger = logging.getLogger(__name__)


class CatalogStore(ICatalogStore):
    """Writes and reads the catalog as a pretty-printed JSON array of paths."""

    def __init__(self, indent: int = 4):
        self.indent = indent

    def write(self, paths: Sequence[str], output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(list(paths), f, indent=self.indent, ensure_ascii=False)
            f.write("\n")
        logger.info(f"Catalog generated: {output_path} ({len(paths)} images)")
        return output_path

    def read(self, catalog_path: Union[str, Path]) -> List[str]:
        """
        Load the catalog exactly as written; the filesystem is not rescanned.

        Raises:
            CatalogReadError: If the file is missing, not JSON, or not a
                list of strings
        """
        catalog_path = Path(catalog_path)
        try:
            with open(catalog_path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise CatalogReadError(catalog_path, "file does not exist")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CatalogReadError(catalog_path, f"malformed JSON ({e})")
        except OSError as e:
            raise CatalogReadError(catalog_path, str(e))

        if not isinstance(data, list):
            raise CatalogReadError(catalog_path, f"expected a JSON array, got {type(data).__name__}")
        for item in data:
            if not isinstance(item, str):
                raise CatalogReadError(catalog_path, f"entry {item!r} is not a path string")

        logger.debug(f"Loaded {len(data)} catalog entries from {catalog_path}")
        return data
