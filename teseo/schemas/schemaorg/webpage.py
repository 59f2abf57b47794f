"""
Schema.org WebPage.
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.schemaorg.types import SchemaOrgEntity


class WebPage(SchemaOrgEntity):
    """Schema.org WebPage. Every field besides @context/@type is plain text."""

    SCHEMA_TYPE: ClassVar[str] = "WebPage"

    url: str = ""
    name: str = ""
    headline: str = ""
    description: str = ""
    about: str = ""
    keywords: str = ""
    in_language: str = ""
    is_part_of: str = ""
    last_reviewed: str = ""
    primary_image: str = Field(default="", alias="primaryImageOfPage")
    date_published: str = ""
    date_modified: str = ""


def new_webpage(
    url: str,
    name: str = "",
    headline: str = "",
    description: str = "",
    about: str = "",
    keywords: str = "",
    in_language: str = "",
    is_part_of: str = "",
    last_reviewed: str = "",
    primary_image: str = "",
    date_published: str = "",
    date_modified: str = "",
) -> WebPage:
    """Create a defaulted WebPage."""
    webpage = WebPage(
        url=url,
        name=name,
        headline=headline,
        description=description,
        about=about,
        keywords=keywords,
        in_language=in_language,
        is_part_of=is_part_of,
        last_reviewed=last_reviewed,
        primary_image=primary_image,
        date_published=date_published,
        date_modified=date_modified,
    )
    webpage.ensure_defaults()
    return webpage
