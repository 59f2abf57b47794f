"""
Schema.org SiteNavigationElement, the only entity with sitemap file I/O.

Example:
    nav = new_site_navigation_element_with_item_list(
        "Main Navigation",
        "https://www.example.com",
        [
            new_item_list_element("Home", "https://www.example.com", 1),
            new_item_list_element("About", "https://www.example.com/about", 2),
        ],
    )
    nav.to_sitemap_file("static/sitemap.xml")

Importing a sitemap keeps only the URLs: names are lost and every element
gets the SiteNavigationElement discriminator with positions 1..n.
"""

from typing import ClassVar

from pydantic import Field

from teseo.core.contracts import SitemapRenderer
from teseo.core.exceptions import SitemapWriteException
from teseo.schemas.base import SCHEMA_ORG_CONTEXT
from teseo.schemas.schemaorg.types import SchemaOrgEntity, SchemaOrgNode


class ItemListElement(SchemaOrgNode):
    """A single navigation entry."""

    SCHEMA_TYPE: ClassVar[str] = "ListItem"

    name: str = ""
    url: str = ""
    position: int = 0


class ItemList(SchemaOrgEntity):
    """Schema.org ItemList holding navigation entries in order."""

    SCHEMA_TYPE: ClassVar[str] = "ItemList"

    item_list_element: list[ItemListElement] = Field(default_factory=list)

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        for element in self.item_list_element:
            element.ensure_defaults()


class SiteNavigationElement(SchemaOrgEntity, SitemapRenderer):
    """Schema.org SiteNavigationElement."""

    SCHEMA_TYPE: ClassVar[str] = "SiteNavigationElement"

    name: str = ""
    url: str = ""
    position: int = 0
    identifier: str = ""
    item_list: ItemList | None = None

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        # Presence is the only condition: an empty ItemList is still defaulted
        if self.item_list is not None:
            self.item_list.ensure_defaults()

    def to_sitemap_file(self, path: str) -> None:
        from teseo.services.sitemap import export_sitemap

        if self.item_list is None:
            raise SitemapWriteException(
                message="ItemList is not set, cannot generate sitemap",
                path=str(path),
            )
        export_sitemap(self.item_list, path)

    def from_sitemap_file(self, path: str) -> None:
        from teseo.services.sitemap import import_sitemap

        item_list = import_sitemap(path)
        self.context = SCHEMA_ORG_CONTEXT
        self.type = self.SCHEMA_TYPE
        self.item_list = item_list


def new_item_list_element(name: str, url: str, position: int) -> ItemListElement:
    element = ItemListElement(name=name, url=url, position=position)
    element.ensure_defaults()
    return element


def new_item_list(elements: list[ItemListElement] | None = None) -> ItemList:
    item_list = ItemList(item_list_element=elements or [])
    item_list.ensure_defaults()
    return item_list


def new_site_navigation_element(
    name: str,
    url: str,
    position: int = 0,
    identifier: str = "",
    item_list: ItemList | None = None,
) -> SiteNavigationElement:
    """Create a defaulted SiteNavigationElement."""
    element = SiteNavigationElement(
        name=name,
        url=url,
        position=position,
        identifier=identifier,
        item_list=item_list,
    )
    element.ensure_defaults()
    return element


def new_site_navigation_element_with_item_list(
    name: str,
    url: str,
    items: list[ItemListElement],
) -> SiteNavigationElement:
    """Create a defaulted SiteNavigationElement wrapping the given entries."""
    return new_site_navigation_element(name, url, item_list=new_item_list(items))
