"""
Immutable per-phase configuration.

Each phase reads its own option mapping (usually a JSON file), validates it
once against a schema and threads the resulting frozen dataclass through
every call.
"""
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union
from dataclasses import dataclass
import json
import logging

from ..core.errors import ConfigurationError
from ..core.extensions import ACCEPTED_FORMATS
from ..core.interfaces import EncoderSettings, SortingMethod
from .schema import (
    Option,
    int_range,
    non_empty_string,
    one_of,
    sanitize_path,
    string_list,
    validate_options,
)

logger = logging.getLogger(__name__)


def _existing_root(key: str, value: str, options: Mapping[str, Any]) -> str:
    value = non_empty_string(is_path=True)(key, value, options)
    if not Path(value).is_dir():
        raise ConfigurationError(key, f"image directory root {value} does not exist")
    return value


def _existing_subdirectory(key: str, value: str, options: Mapping[str, Any]) -> str:
    if len(value) == 0:
        raise ConfigurationError(key, "contains an empty string entry. This is not allowed.")
    value = sanitize_path(value)
    root = options["image_directory_root_path"]
    if not Path(root + value).is_dir():
        raise ConfigurationError(key, f"image directory {root}{value} does not exist")
    return value


def _unique_directories(key: str, value, options: Mapping[str, Any]) -> list:
    directories = string_list(_existing_subdirectory, allow_empty=False)(key, value, options)
    unique = list(dict.fromkeys(directories))
    if len(unique) != len(directories):
        logger.warning(f"{key} lists the same directory more than once, duplicates ignored")
    return unique


def _json_file_name(key: str, value: str, options: Mapping[str, Any]) -> str:
    value = non_empty_string(is_path=True, is_file=True)(key, value, options)
    if not value.endswith(".json"):
        logger.warning(f"{key} does not end in extension .json, appending it")
        value += ".json"
    return value


CATALOG_SCHEMA: Dict[str, Option] = {
    "image_directory_root_path": Option(str, "", _existing_root),
    "image_directory_paths": Option((list, tuple), [], _unique_directories),
    "database_output_file_name": Option(str, "db.json", _json_file_name),
    "file_formats": Option((list, tuple), ["jpg", "png", "gif"],
                           string_list(one_of(ACCEPTED_FORMATS, case_sensitive=False))),
    "sorting_method": Option(str, SortingMethod.ALPHANUMERIC.value,
                             one_of(m.value for m in SortingMethod)),
    "reverse_sorting": Option(bool, False),
}

THUMBNAIL_SCHEMA: Dict[str, Option] = {
    "database_file_path": Option(str, "", non_empty_string(is_path=True, is_file=True)),
    "thumbnail_directory_name": Option(str, "thumb", non_empty_string(is_path=True)),
    "thumbnail_size": Option(int, 154, int_range(minimum=1)),
    "jpeg_quality_level": Option(int, 75, int_range(0, 100)),
    "webp_quality_level": Option(int, 8, int_range(0, 9)),
    "png_compression_level": Option(int, 6, int_range(0, 9)),
    "max_workers": Option(int, 0, int_range(minimum=0)),
    "auto_orient": Option(bool, True),
}


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a JSON object of options from disk."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(str(path), "configuration file not found")
    except json.JSONDecodeError as e:
        raise ConfigurationError(str(path), f"configuration file is not valid JSON ({e})")

    if not isinstance(data, dict):
        raise ConfigurationError(str(path), "configuration file must contain a JSON object")
    return data


@dataclass(frozen=True)
class CatalogConfig:
    """Configuration for the catalog phase."""
    image_directory_root_path: str
    image_directory_paths: Tuple[str, ...]
    database_output_file_name: str = "db.json"
    file_formats: Tuple[str, ...] = ("jpg", "png", "gif")
    sorting_method: SortingMethod = SortingMethod.ALPHANUMERIC
    reverse_sorting: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "CatalogConfig":
        options = validate_options(raw, CATALOG_SCHEMA)
        return cls(
            image_directory_root_path=options["image_directory_root_path"],
            image_directory_paths=tuple(options["image_directory_paths"]),
            database_output_file_name=options["database_output_file_name"],
            file_formats=tuple(options["file_formats"]),
            sorting_method=SortingMethod(options["sorting_method"]),
            reverse_sorting=options["reverse_sorting"],
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CatalogConfig":
        return cls.from_mapping(load_config_file(path))

    @property
    def root(self) -> Path:
        return Path(self.image_directory_root_path)

    @property
    def catalog_path(self) -> Path:
        return self.root / self.database_output_file_name


@dataclass(frozen=True)
class ThumbnailConfig:
    """Configuration for the thumbnail phase."""
    database_file_path: str
    thumbnail_directory_name: str = "thumb/"
    thumbnail_size: int = 154
    jpeg_quality_level: int = 75
    webp_quality_level: int = 8
    png_compression_level: int = 6
    max_workers: int = 0
    auto_orient: bool = True

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ThumbnailConfig":
        return cls(**validate_options(raw, THUMBNAIL_SCHEMA))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ThumbnailConfig":
        return cls.from_mapping(load_config_file(path))

    @property
    def catalog_path(self) -> Path:
        return Path(self.database_file_path)

    @property
    def root(self) -> Path:
        """Directory holding the catalog; catalog paths are relative to it."""
        return self.catalog_path.parent

    @property
    def thumbnail_root(self) -> Path:
        return self.root / self.thumbnail_directory_name

    @property
    def encoder_settings(self) -> EncoderSettings:
        return EncoderSettings(
            jpeg_quality=self.jpeg_quality_level,
            webp_quality=self.webp_quality_level,
            png_compression=self.png_compression_level,
        )
