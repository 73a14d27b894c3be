"""
Tests for the catalog phase: scanning, ordering and persistence.
"""
import json
import os
import pytest

from gallerykit.catalog import CatalogSorter, CatalogStore, FileCatalogBuilder
from gallerykit.config import CatalogConfig
from gallerykit.core.errors import CatalogReadError
from gallerykit.core.interfaces import CatalogEntry, SortingMethod


def names(entries):
    return sorted(e.filename for e in entries)


class TestFileCatalogBuilder:
    """Tests for FileCatalogBuilder class."""

    def test_filters_by_extension(self, gallery_root):
        builder = FileCatalogBuilder(gallery_root, ["photos/"], ["jpg", "png"])

        assert names(builder.collect()) == ["a.jpg", "b.png"]

    def test_does_not_recurse(self, gallery_root):
        builder = FileCatalogBuilder(gallery_root, ["photos/"], ["jpg"])

        entries = builder.collect()

        assert [e.filename for e in entries] == ["a.jpg"]

    def test_nested_directory_when_listed(self, gallery_root):
        builder = FileCatalogBuilder(gallery_root, ["photos/", "photos/nested/"], ["jpg"])

        paths = sorted(e.relative_path for e in builder.collect())

        assert paths == ["photos/a.jpg", "photos/nested/d.jpg"]

    def test_jpg_includes_jpeg(self, gallery_root):
        builder = FileCatalogBuilder(gallery_root, ["scans/"], ["jpg"])

        assert names(builder.collect()) == ["e.jpeg"]

    def test_jpeg_includes_jpg(self, gallery_root):
        builder = FileCatalogBuilder(gallery_root, ["photos/", "scans/"], ["jpeg"])

        assert names(builder.collect()) == ["a.jpg", "e.jpeg"]

    def test_extension_case_insensitive(self, temp_dir):
        (temp_dir / "UPPER.JPG").write_bytes(b"")
        builder = FileCatalogBuilder(temp_dir.parent, [temp_dir.name + "/"], ["jpg"])

        assert names(builder.collect()) == ["UPPER.JPG"]

    def test_entries_keep_directory(self, gallery_root):
        builder = FileCatalogBuilder(gallery_root, ["scans/"], ["bmp"])

        assert builder.collect() == [CatalogEntry("scans/", "f.bmp")]

    def test_catalogs_exactly_allowed(self, temp_dir):
        folder = temp_dir / "dir"
        folder.mkdir()
        for name in ("a.jpg", "b.png", "c.txt"):
            (folder / name).write_bytes(b"")

        builder = FileCatalogBuilder(temp_dir, ["dir/"], ["jpg", "png"])

        assert names(builder.collect()) == ["a.jpg", "b.png"]

    def test_from_config(self, catalog_options):
        builder = FileCatalogBuilder.from_config(CatalogConfig.from_mapping(catalog_options))

        assert names(builder.collect()) == ["a.jpg", "b.png", "c.gif", "e.jpeg", "f.bmp", "g.webp"]

    def test_directory_listed_twice_catalogs_once(self, catalog_options):
        catalog_options["image_directory_paths"] = ["photos", "photos/"]
        builder = FileCatalogBuilder.from_config(CatalogConfig.from_mapping(catalog_options))

        assert names(builder.collect()) == ["a.jpg", "b.png", "c.gif"]

    def test_empty_directory(self, empty_dir):
        builder = FileCatalogBuilder(empty_dir.parent, ["empty/"], ["jpg"])

        assert builder.collect() == []


class TestCatalogSorter:
    """Tests for CatalogSorter class."""

    ENTRIES = [CatalogEntry("d/", "b.png"), CatalogEntry("d/", "a.jpg"), CatalogEntry("d/", "c.gif")]

    def test_alphanumeric(self):
        sorter = CatalogSorter(SortingMethod.ALPHANUMERIC)

        assert sorter.sort(self.ENTRIES) == ["d/a.jpg", "d/b.png", "d/c.gif"]

    def test_alphanumeric_reversed(self):
        sorter = CatalogSorter(SortingMethod.ALPHANUMERIC, reverse=True)

        assert sorter.sort(self.ENTRIES) == ["d/c.gif", "d/b.png", "d/a.jpg"]

    def test_alphanumeric_ignores_directory(self):
        entries = [CatalogEntry("z/", "a.jpg"), CatalogEntry("a/", "b.jpg")]

        assert CatalogSorter(SortingMethod.ALPHANUMERIC).sort(entries) == ["z/a.jpg", "a/b.jpg"]

    def test_alphanumeric_is_stable(self):
        entries = [CatalogEntry("x/", "same.jpg"), CatalogEntry("a/", "same.jpg")]

        assert CatalogSorter(SortingMethod.ALPHANUMERIC).sort(entries) == ["x/same.jpg", "a/same.jpg"]

    def test_reverse_is_exact_reversal_of_ties(self):
        entries = [CatalogEntry("x/", "same.jpg"), CatalogEntry("a/", "same.jpg"), CatalogEntry("m/", "a.jpg")]

        forward = CatalogSorter(SortingMethod.ALPHANUMERIC).sort(entries)
        backward = CatalogSorter(SortingMethod.ALPHANUMERIC, reverse=True).sort(entries)

        assert backward == list(reversed(forward))

    def test_none_keeps_enumeration_order(self):
        sorter = CatalogSorter(SortingMethod.NONE)

        assert sorter.sort(self.ENTRIES) == ["d/b.png", "d/a.jpg", "d/c.gif"]

    def test_none_reversed(self):
        sorter = CatalogSorter(SortingMethod.NONE, reverse=True)

        assert sorter.sort(self.ENTRIES) == ["d/c.gif", "d/a.jpg", "d/b.png"]

    def test_natural(self):
        entries = [CatalogEntry("d/", f"img{i}.jpg") for i in (10, 2, 1)]

        assert CatalogSorter(SortingMethod.NATURAL).sort(entries) == ["d/img1.jpg", "d/img2.jpg", "d/img10.jpg"]
        assert CatalogSorter(SortingMethod.ALPHANUMERIC).sort(entries) == ["d/img1.jpg", "d/img10.jpg", "d/img2.jpg"]

    def test_date_modified_newest_first(self, temp_dir):
        folder = temp_dir / "d"
        folder.mkdir()
        for name, mtime in (("old.jpg", 1_000_000), ("new.jpg", 3_000_000), ("mid.jpg", 2_000_000)):
            path = folder / name
            path.write_bytes(b"")
            os.utime(path, (mtime, mtime))
        entries = [CatalogEntry("d/", n) for n in ("old.jpg", "new.jpg", "mid.jpg")]

        sorter = CatalogSorter(SortingMethod.DATE_MODIFIED, root=temp_dir)

        assert sorter.sort(entries) == ["d/new.jpg", "d/mid.jpg", "d/old.jpg"]

    def test_date_modified_reversed(self, temp_dir):
        folder = temp_dir / "d"
        folder.mkdir()
        for name, mtime in (("old.jpg", 1_000_000), ("new.jpg", 3_000_000)):
            path = folder / name
            path.write_bytes(b"")
            os.utime(path, (mtime, mtime))
        entries = [CatalogEntry("d/", "new.jpg"), CatalogEntry("d/", "old.jpg")]

        sorter = CatalogSorter(SortingMethod.DATE_MODIFIED, reverse=True, root=temp_dir)

        assert sorter.sort(entries) == ["d/old.jpg", "d/new.jpg"]

    def test_date_modified_ties_are_stable(self, temp_dir):
        folder = temp_dir / "d"
        folder.mkdir()
        for name in ("x.jpg", "y.jpg", "z.jpg"):
            path = folder / name
            path.write_bytes(b"")
            os.utime(path, (5_000_000, 5_000_000))
        entries = [CatalogEntry("d/", n) for n in ("y.jpg", "z.jpg", "x.jpg")]

        sorter = CatalogSorter(SortingMethod.DATE_MODIFIED, root=temp_dir)

        assert sorter.sort(entries) == ["d/y.jpg", "d/z.jpg", "d/x.jpg"]

    def test_date_created(self, gallery_root):
        entries = FileCatalogBuilder(gallery_root, ["photos/"], ["jpg", "png", "gif"]).collect()

        paths = CatalogSorter(SortingMethod.DATE_CREATED, root=gallery_root).sort(entries)

        assert sorted(paths) == ["photos/a.jpg", "photos/b.png", "photos/c.gif"]

    def test_empty(self):
        assert CatalogSorter().sort([]) == []


class TestCatalogStore:
    """Tests for CatalogStore class."""

    def test_write_pretty_json(self, temp_dir):
        store = CatalogStore()
        output = temp_dir / "db.json"

        result = store.write(["a/1.jpg", "b/2.png"], output)

        assert result == output
        text = output.read_text(encoding="utf-8")
        assert json.loads(text) == ["a/1.jpg", "b/2.png"]
        assert '\n    "a/1.jpg"' in text

    def test_write_keeps_unicode_and_slashes(self, temp_dir):
        output = CatalogStore().write(["fotos/café.jpg"], temp_dir / "db.json")

        text = output.read_text(encoding="utf-8")
        assert "café" in text
        assert "\\/" not in text

    def test_read_roundtrip_preserves_order(self, temp_dir):
        store = CatalogStore()
        paths = ["z.jpg", "a.jpg", "m/b.png"]

        assert store.read(store.write(paths, temp_dir / "db.json")) == paths

    def test_read_missing(self, temp_dir):
        with pytest.raises(CatalogReadError, match="does not exist"):
            CatalogStore().read(temp_dir / "missing.json")

    def test_read_malformed(self, temp_dir):
        path = temp_dir / "db.json"
        path.write_text("[\"a.jpg\",")

        with pytest.raises(CatalogReadError, match="malformed"):
            CatalogStore().read(path)

    def test_read_not_a_list(self, temp_dir):
        path = temp_dir / "db.json"
        path.write_text('{"a": 1}')

        with pytest.raises(CatalogReadError, match="array"):
            CatalogStore().read(path)

    def test_read_non_string_entry(self, temp_dir):
        path = temp_dir / "db.json"
        path.write_text('["a.jpg", 3]')

        with pytest.raises(CatalogReadError):
            CatalogStore().read(path)
