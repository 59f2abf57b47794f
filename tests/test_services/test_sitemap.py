"""
Tests for sitemap export and import.
"""

import logging
import os
from pathlib import Path

import pytest

from teseo.core.exceptions import (
    SitemapParseException,
    SitemapReadException,
    SitemapWriteException,
)
from teseo.schemas.schemaorg import ItemList, SiteNavigationElement
from teseo.services.sitemap import (
    export_sitemap,
    import_sitemap,
    parse_sitemap,
    render_sitemap,
)


class TestSitemapExport:
    """Tests for writing sitemap files."""

    def test_render(self, item_list: ItemList, sample_sitemap_xml: str):
        """Test the encoded document matches the reference layout."""
        assert render_sitemap(item_list) == sample_sitemap_xml

    def test_render_priority(self, item_list: ItemList):
        """Test an explicit priority is written for every entry."""
        xml = render_sitemap(item_list, priority="0.8")

        assert xml.count("<priority>0.8</priority>") == 2

    def test_render_empty(self):
        """Test an empty list still yields a urlset."""
        xml = render_sitemap(ItemList())

        assert xml.endswith(
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"></urlset>'
        )

    def test_render_escapes_urls(self):
        """Test reserved XML characters in URLs are escaped."""
        item_list = ItemList(item_list_element=[{"url": "https://example.com/?a=1&b=2"}])

        assert "<loc>https://example.com/?a=1&amp;b=2</loc>" in render_sitemap(item_list)

    def test_file_contents(
        self, navigation: SiteNavigationElement, sitemap_path: str, sample_sitemap_xml: str
    ):
        """Test the file holds exactly the encoded document."""
        navigation.to_sitemap_file(sitemap_path)

        assert Path(sitemap_path).read_bytes() == sample_sitemap_xml.encode("utf-8")

    def test_deterministic(self, item_list: ItemList, tmp_path):
        """Test exporting the same list twice produces identical files."""
        first = tmp_path / "first.xml"
        second = tmp_path / "second.xml"

        export_sitemap(item_list, first)
        export_sitemap(item_list, second)

        assert first.read_bytes() == second.read_bytes()

    def test_overwrites_and_leaves_no_temp_files(
        self, item_list: ItemList, tmp_path, sample_sitemap_xml: str
    ):
        """Test an existing sitemap is replaced in place."""
        target = tmp_path / "sitemap.xml"
        target.write_text("old", encoding="utf-8")

        export_sitemap(item_list, target)

        assert target.read_text(encoding="utf-8") == sample_sitemap_xml
        assert os.listdir(tmp_path) == ["sitemap.xml"]

    def test_file_mode(self, item_list: ItemList, sitemap_path: str):
        """Test the sitemap is world-readable."""
        export_sitemap(item_list, sitemap_path)

        assert os.stat(sitemap_path).st_mode & 0o777 == 0o644

    def test_missing_item_list(self, sitemap_path: str):
        """Test exporting without an ItemList fails."""
        navigation = SiteNavigationElement(name="Main Navigation")

        with pytest.raises(SitemapWriteException) as exc_info:
            navigation.to_sitemap_file(sitemap_path)

        assert exc_info.value.error == "sitemap_write_failed"
        assert not Path(sitemap_path).exists()

    def test_unwritable_destination(self, item_list: ItemList, tmp_path):
        """Test a missing destination directory raises SitemapWriteException."""
        target = tmp_path / "missing" / "sitemap.xml"

        with pytest.raises(SitemapWriteException) as exc_info:
            export_sitemap(item_list, target)

        assert exc_info.value.details == {"path": str(target)}
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_logging(self, item_list: ItemList, sitemap_path: str, caplog):
        """Test successful exports are logged."""
        caplog.set_level(logging.INFO, logger="teseo.services.sitemap")

        export_sitemap(item_list, sitemap_path)

        assert "Wrote sitemap with 2 URLs" in caplog.text


class TestSitemapImport:
    """Tests for reading sitemap files."""

    def test_import(self, sample_sitemap: str):
        """Test each url becomes a navigation element in order."""
        item_list = import_sitemap(sample_sitemap)

        assert item_list.context == "https://schema.org"
        assert item_list.type == "ItemList"
        assert [(e.type, e.url, e.position) for e in item_list.item_list_element] == [
            ("SiteNavigationElement", "http://www.example.com/", 1),
            ("SiteNavigationElement", "http://www.example.com/about", 2),
        ]

    def test_from_sitemap_file(self, sample_sitemap: str):
        """Test the receiver is reset to a SiteNavigationElement."""
        navigation = SiteNavigationElement(context="x", type="y", name="Kept")

        navigation.from_sitemap_file(sample_sitemap)

        assert navigation.context == "https://schema.org"
        assert navigation.type == "SiteNavigationElement"
        assert navigation.name == "Kept"
        assert len(navigation.item_list.item_list_element) == 2

    def test_round_trip_is_lossy(self, navigation: SiteNavigationElement, sitemap_path: str):
        """Test names and element types do not survive export/import."""
        navigation.to_sitemap_file(sitemap_path)
        restored = SiteNavigationElement()

        restored.from_sitemap_file(sitemap_path)

        original = navigation.item_list.item_list_element
        imported = restored.item_list.item_list_element
        assert [e.url for e in imported] == [e.url for e in original]
        assert [e.position for e in imported] == [e.position for e in original]
        assert all(e.name == "" for e in imported)
        assert all(e.type == "SiteNavigationElement" for e in imported)
        assert all(e.type == "ListItem" for e in original)

    def test_without_namespace(self):
        """Test elements are matched by local name."""
        item_list = parse_sitemap(
            "<urlset><url><loc> https://example.com/a </loc></url><other/></urlset>"
        )

        assert [e.url for e in item_list.item_list_element] == ["https://example.com/a"]

    def test_missing_file(self, tmp_path):
        """Test a missing file raises SitemapReadException."""
        with pytest.raises(SitemapReadException):
            import_sitemap(tmp_path / "missing.xml")

    def test_malformed_xml(self, tmp_path):
        """Test malformed content raises SitemapParseException."""
        path = tmp_path / "broken.xml"
        path.write_text("<urlset><url>", encoding="utf-8")

        with pytest.raises(SitemapParseException) as exc_info:
            import_sitemap(path)

        assert exc_info.value.details == {"path": str(path)}

    def test_wrong_root(self):
        """Test a sitemap index is not accepted as a urlset."""
        with pytest.raises(SitemapParseException):
            parse_sitemap(
                '<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"/>'
            )

    def test_failed_import_keeps_receiver(self, tmp_path):
        """Test the receiver is unchanged when the import fails."""
        navigation = SiteNavigationElement(name="Main")

        with pytest.raises(SitemapReadException):
            navigation.from_sitemap_file(str(tmp_path / "missing.xml"))

        assert navigation.item_list is None
        assert navigation.type == ""
