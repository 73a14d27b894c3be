"""
Image formats understood by the catalog and thumbnail phases.
"""
from pathlib import Path
from typing import Iterable, List, Union

ACCEPTED_FORMATS = ('jpg', 'jpeg', 'png', 'gif', 'bmp', 'webp')

JPEG_EXTENSIONS = {'.jpg', '.jpeg'}
WEBP_EXTENSIONS = {'.webp'}

# Source formats with no thumbnail encoder of their own
RETARGETED_EXTENSIONS = {'.gif', '.bmp'}

# Pillow format names, keyed by source extension
DECODER_FORMATS = {
    '.jpg': 'JPEG',
    '.jpeg': 'JPEG',
    '.png': 'PNG',
    '.gif': 'GIF',
    '.bmp': 'BMP',
    '.webp': 'WEBP',
}

_ALIASES = {
    'jpg': 'jpeg',
    'jpeg': 'jpg',
}


def expand_format_aliases(formats: Iterable[str]) -> List[str]:
    """Add the sibling spelling of every aliased format (jpg <-> jpeg)."""
    expanded = [f.lower() for f in formats]
    for fmt in list(expanded):
        alias = _ALIASES.get(fmt)
        if alias and alias not in expanded:
            expanded.append(alias)
    return expanded


def extension_of(path: Union[str, Path]) -> str:
    """Lower-cased extension without the dot."""
    return Path(path).suffix.lower().lstrip('.')


def thumbnail_name(filename: str) -> str:
    """Destination filename for a thumbnail; gif and bmp become png."""
    path = Path(filename)
    if path.suffix.lower() in RETARGETED_EXTENSIONS:
        return path.stem + '.png'
    return filename


def is_jpeg(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() in JPEG_EXTENSIONS


def is_webp(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() in WEBP_EXTENSIONS
