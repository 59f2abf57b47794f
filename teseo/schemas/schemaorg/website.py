"""
Schema.org WebSite with an optional search action.

Expected output:

    {
      "@context": "https://schema.org",
      "@type": "WebSite",
      "url": "https://www.example.com",
      "name": "Example Site",
      "potentialAction": {
        "@type": "SearchAction",
        "target": {
          "@type": "EntryPoint",
          "urlTemplate": "https://www.example.com/search?q={search_term_string}"
        },
        "query-input": "required name=search_term_string"
      }
    }
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.schemaorg.types import SchemaOrgEntity, SchemaOrgNode


class Target(SchemaOrgNode):
    """Schema.org EntryPoint used as an action target."""

    SCHEMA_TYPE: ClassVar[str] = "EntryPoint"

    url_template: str = ""


class Action(SchemaOrgNode):
    """Schema.org Action; set type="SearchAction" for sitelinks search boxes."""

    SCHEMA_TYPE: ClassVar[str] = "Action"

    target: Target | None = None
    query_input: str = Field(default="", alias="query-input")

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.target is not None:
            self.target.ensure_defaults()


class WebSite(SchemaOrgEntity):
    """Schema.org WebSite."""

    SCHEMA_TYPE: ClassVar[str] = "WebSite"

    url: str = ""
    name: str = ""
    alternate_name: str = ""
    description: str = ""
    potential_action: Action | None = None

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.potential_action is not None:
            self.potential_action.ensure_defaults()


def new_website(
    url: str,
    name: str = "",
    alternate_name: str = "",
    description: str = "",
    potential_action: Action | None = None,
) -> WebSite:
    """Create a defaulted WebSite."""
    website = WebSite(
        url=url,
        name=name,
        alternate_name=alternate_name,
        description=description,
        potential_action=potential_action,
    )
    website.ensure_defaults()
    return website
