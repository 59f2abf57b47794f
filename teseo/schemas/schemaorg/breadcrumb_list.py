"""
Schema.org BreadcrumbList.

Expected output:

    {
      "@context": "https://schema.org",
      "@type": "BreadcrumbList",
      "itemListElement": [
        {
          "@type": "ListItem",
          "position": 1,
          "name": "Home",
          "item": "https://www.example.com"
        },
        {
          "@type": "ListItem",
          "position": 2,
          "name": "About",
          "item": "https://www.example.com/about"
        }
      ]
    }
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.schemaorg.types import SchemaOrgEntity, SchemaOrgNode


class ListItem(SchemaOrgNode):
    """One breadcrumb step; position is 1-based."""

    SCHEMA_TYPE: ClassVar[str] = "ListItem"

    position: int = 0
    name: str = ""
    item: str = ""


class BreadcrumbList(SchemaOrgEntity):
    """Schema.org BreadcrumbList."""

    SCHEMA_TYPE: ClassVar[str] = "BreadcrumbList"

    item_list_element: list[ListItem] = Field(default_factory=list)

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        for list_item in self.item_list_element:
            list_item.ensure_defaults()

    @classmethod
    def from_url(cls, url: str) -> "BreadcrumbList":
        """
        Derive a breadcrumb trail from a page URL.

        Raises:
            InvalidURLException: If the URL cannot be parsed
        """
        from teseo.services.breadcrumbs import breadcrumb_list_from_url

        return breadcrumb_list_from_url(url)


def new_breadcrumb_list(items: list[ListItem] | None = None) -> BreadcrumbList:
    """Create a defaulted BreadcrumbList from explicit items."""
    breadcrumb_list = BreadcrumbList(item_list_element=items or [])
    breadcrumb_list.ensure_defaults()
    return breadcrumb_list


def new_breadcrumb_list_from_url(url: str) -> BreadcrumbList:
    """
    Create a BreadcrumbList from a page URL.

    Raises:
        InvalidURLException: If the URL cannot be parsed
    """
    return BreadcrumbList.from_url(url)
