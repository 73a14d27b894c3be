"""
Example: Building a gallery catalog and thumbnails with GalleryKit

This example demonstrates how to:
- Run both phases through the facade
- Use individual components for specific tasks
"""
from pathlib import Path
from gallerykit import (
    GalleryGenerator,
    CatalogConfig,
    ThumbnailConfig,
    SortingMethod,
    FileCatalogBuilder,
    CatalogSorter,
    ImageDecoder,
    ImageScaler,
    ImageEncoder,
)


def build_complete_gallery(root: Path):
    """Catalog every direct sub-directory of root, then generate thumbnails."""
    folders = sorted(p.name for p in root.iterdir() if p.is_dir() and p.name != "thumb")

    generator = GalleryGenerator()

    catalog_path = generator.build_catalog(CatalogConfig.from_mapping({
        "image_directory_root_path": str(root),
        "image_directory_paths": folders,
        "file_formats": ["jpg", "png", "gif", "bmp", "webp"],
        "sorting_method": "DATE_MODIFIED",
    }))
    print(f"Catalog written: {catalog_path}")

    summary = generator.generate_thumbnails(ThumbnailConfig.from_mapping({
        "database_file_path": str(catalog_path),
        "thumbnail_directory_name": "thumb",
        "thumbnail_size": 200,
        "jpeg_quality_level": 85,
    }))
    print(f"{summary.succeeded} generated successfully and {summary.failed} failed")
    for path, reason in summary.failures:
        print(f"  {path}: {reason}")

    return summary


def use_individual_components(root: Path, folder: str):
    """Use individual components for specific tasks."""
    entries = FileCatalogBuilder(root, [folder], ["jpg", "png"]).collect()
    print(f"Found {len(entries)} images")

    paths = CatalogSorter(SortingMethod.NATURAL).sort(entries)
    print(f"First image in natural order: {paths[0] if paths else None}")

    if paths:
        img = ImageDecoder().decode(root / paths[0])
        thumb = ImageScaler().scale(img, 120)
        output = ImageEncoder().encode(thumb, root / "preview.png")
        print(f"Preview: {output} ({thumb.width}x{thumb.height})")


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python build_gallery.py <image_root>")
        sys.exit(1)

    root = Path(sys.argv[1])
    if not root.is_dir():
        print(f"Folder not found: {root}")
        sys.exit(1)

    build_complete_gallery(root)
