"""
Sitemap XML codec.

Exports a navigation ItemList to a sitemaps.org urlset file and imports one
back. The format only carries <loc> and <priority>, so names and
discriminators do not survive an export/import round trip.
"""

import logging
import os
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path

from teseo.config import get_settings
from teseo.core.exceptions import (
    SitemapParseException,
    SitemapReadException,
    SitemapWriteException,
)
from teseo.schemas.schemaorg.site_navigation import (
    ItemList,
    ItemListElement,
    SiteNavigationElement,
    new_item_list,
)

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Discriminator given to every imported entry
IMPORTED_ELEMENT_TYPE = SiteNavigationElement.SCHEMA_TYPE


def _local_name(tag: str) -> str:
    """Strip the {namespace} prefix from an ElementTree tag."""
    return tag.rpartition("}")[2]


def render_sitemap(item_list: ItemList, priority: str | None = None) -> str:
    """
    Encode an ItemList as sitemap XML.

    Args:
        item_list: Navigation entries, exported in list order
        priority: Priority for every entry. Defaults to settings.SITEMAP_PRIORITY

    Returns:
        XML document with declaration header, indented with two spaces
    """
    priority = priority or get_settings().SITEMAP_PRIORITY

    urlset = ET.Element("urlset", {"xmlns": SITEMAP_NAMESPACE})
    for element in item_list.item_list_element:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = element.url
        ET.SubElement(url, "priority").text = priority

    ET.indent(urlset, space="  ")
    body = ET.tostring(urlset, encoding="unicode", short_empty_elements=False)
    return XML_HEADER + body


def export_sitemap(item_list: ItemList, path: str | Path) -> None:
    """
    Write an ItemList to a sitemap file.

    The document is written to a temporary file next to the destination and
    moved into place, so a failed export never leaves a partial file behind.

    Raises:
        SitemapWriteException: If encoding or writing fails
    """
    target = Path(path)

    try:
        data = render_sitemap(item_list).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SitemapWriteException(
            message=f"Failed to encode sitemap: {str(e)}",
            path=str(target),
        ) from e

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, target)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        logger.warning(f"Failed to write sitemap {target}: {e}")
        raise SitemapWriteException(
            message=f"Failed to write sitemap: {str(e)}",
            path=str(target),
        ) from e

    logger.info(f"Wrote sitemap with {len(item_list.item_list_element)} URLs to {target}")


def parse_sitemap(content: str | bytes, source: str | None = None) -> ItemList:
    """
    Decode sitemap XML into an ItemList.

    Elements are matched by local name, with or without the sitemaps.org
    namespace. Each <url> becomes an ItemListElement with its <loc> as URL,
    positions assigned 1..n in document order.

    Args:
        content: Sitemap XML text
        source: File path, used in error details

    Returns:
        Defaulted ItemList

    Raises:
        SitemapParseException: If the XML is malformed or the root is not urlset
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise SitemapParseException(
            message=f"Could not parse sitemap XML: {str(e)}",
            path=source,
        ) from e

    if _local_name(root.tag) != "urlset":
        raise SitemapParseException(
            message=f"Expected <urlset> root element, found <{_local_name(root.tag)}>",
            path=source,
        )

    elements = []
    for url in root:
        if _local_name(url.tag) != "url":
            continue
        loc = next(
            ((child.text or "").strip() for child in url if _local_name(child.tag) == "loc"),
            "",
        )
        elements.append(
            ItemListElement(
                type=IMPORTED_ELEMENT_TYPE,
                url=loc,
                position=len(elements) + 1,
            )
        )

    return new_item_list(elements)


def import_sitemap(path: str | Path) -> ItemList:
    """
    Read a sitemap file into an ItemList.

    Raises:
        SitemapReadException: If the file cannot be opened or read
        SitemapParseException: If the content is not a valid urlset
    """
    source = Path(path)

    try:
        content = source.read_bytes()
    except OSError as e:
        logger.warning(f"Failed to read sitemap {source}: {e}")
        raise SitemapReadException(
            message=f"Could not read sitemap file: {str(e)}",
            path=str(source),
        ) from e

    item_list = parse_sitemap(content, source=str(source))
    logger.info(f"Loaded {len(item_list.item_list_element)} URLs from sitemap {source}")
    return item_list
