"""
Pytest configuration and fixtures for GalleryKit tests.
"""
import pytest
import tempfile
import shutil
import json
from pathlib import Path
from PIL import Image
import numpy as np


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="gallerykit_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def noise_image():
    """Random RGB image, so encoders have real detail to work with."""
    def make(width: int, height: int) -> Image.Image:
        rng = np.random.default_rng(seed=width * 10_000 + height)
        pixels = rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)
        return Image.fromarray(pixels, "RGB")
    return make


@pytest.fixture
def gallery_root(temp_dir) -> Path:
    """
    Image root with two directories:

        img/
          photos/   a.jpg  b.png  c.gif  notes.txt  nested/d.jpg
          scans/    e.jpeg f.bmp  g.webp
    """
    root = temp_dir / "img"
    photos = root / "photos"
    scans = root / "scans"
    (photos / "nested").mkdir(parents=True)
    scans.mkdir(parents=True)

    Image.new("RGB", (200, 100), color="red").save(photos / "a.jpg", "JPEG")
    Image.new("RGBA", (100, 200), color=(0, 255, 0, 128)).save(photos / "b.png", "PNG")
    Image.new("P", (120, 120)).save(photos / "c.gif", "GIF")
    (photos / "notes.txt").write_text("not an image")
    Image.new("RGB", (50, 50)).save(photos / "nested" / "d.jpg", "JPEG")

    Image.new("RGB", (300, 150), color="blue").save(scans / "e.jpeg", "JPEG")
    Image.new("RGB", (80, 60), color="yellow").save(scans / "f.bmp", "BMP")
    Image.new("RGB", (64, 128), color="purple").save(scans / "g.webp", "WEBP")
    return root


@pytest.fixture
def catalog_options(gallery_root) -> dict:
    """Valid catalog-phase options for gallery_root."""
    return {
        "image_directory_root_path": str(gallery_root),
        "image_directory_paths": ["photos", "scans/"],
        "database_output_file_name": "db.json",
        "file_formats": ["jpg", "png", "gif", "bmp", "webp"],
        "sorting_method": "ALPHANUMERIC",
        "reverse_sorting": False,
    }


@pytest.fixture
def catalog_file(temp_dir, noise_image) -> Path:
    """
    Catalog of nine valid images and one corrupt one, spread over two
    directories.
    """
    root = temp_dir / "site"
    for folder in ("one", "two"):
        (root / folder).mkdir(parents=True)

    paths = []
    for i in range(5):
        noise_image(160 + i * 10, 120).save(root / "one" / f"img_{i}.jpg", "JPEG")
        paths.append(f"one/img_{i}.jpg")
    for i in range(4):
        noise_image(90, 150 + i * 10).save(root / "two" / f"img_{i}.png", "PNG")
        paths.append(f"two/img_{i}.png")

    (root / "two" / "broken.jpg").write_bytes(b"this is not a jpeg")
    paths.append("two/broken.jpg")

    catalog = root / "db.json"
    catalog.write_text(json.dumps(paths, indent=4))
    return catalog


@pytest.fixture
def empty_dir(temp_dir) -> Path:
    """Create an empty directory."""
    empty = temp_dir / "empty"
    empty.mkdir()
    return empty
