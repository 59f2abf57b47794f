"""
Pytest configuration and fixtures for teseo tests.
"""

import pytest

from teseo.config import get_settings
from teseo.schemas.schemaorg import (
    ItemList,
    SiteNavigationElement,
    new_item_list_element,
    new_site_navigation_element_with_item_list,
)

FIXED_KEY = "abcdefghijklmnop"

SAMPLE_SITEMAP_XML = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url>
    <loc>http://www.example.com/</loc>
    <priority>0.5</priority>
  </url>
  <url>
    <loc>http://www.example.com/about</loc>
    <priority>0.5</priority>
  </url>
</urlset>"""


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test so env overrides do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def key_generator():
    """Deterministic element id key generator."""
    return lambda: FIXED_KEY


@pytest.fixture
def sitemap_path(tmp_path) -> str:
    """Destination path for sitemap exports."""
    return str(tmp_path / "sitemap.xml")


@pytest.fixture
def sample_sitemap_xml() -> str:
    """Reference sitemap document with two URLs."""
    return SAMPLE_SITEMAP_XML


@pytest.fixture
def sample_sitemap(tmp_path) -> str:
    """Sitemap file with two URLs."""
    path = tmp_path / "sample.xml"
    path.write_text(SAMPLE_SITEMAP_XML, encoding="utf-8")
    return str(path)


@pytest.fixture
def item_list() -> ItemList:
    """Navigation entries matching the sample sitemap."""
    return ItemList(
        item_list_element=[
            new_item_list_element("Home", "http://www.example.com/", 1),
            new_item_list_element("About", "http://www.example.com/about", 2),
        ]
    )


@pytest.fixture
def navigation(item_list: ItemList) -> SiteNavigationElement:
    """Main navigation wrapping the sample entries."""
    return new_site_navigation_element_with_item_list(
        "Main Navigation",
        "http://www.example.com",
        item_list.item_list_element,
    )
