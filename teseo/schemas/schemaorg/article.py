"""
Schema.org Article.

Expected output:

    {
      "@context": "https://schema.org",
      "@type": "Article",
      "headline": "Example Article Headline",
      "image": [
        "https://www.example.com/images/image1.jpg"
      ],
      "author": {
        "@context": "https://schema.org",
        "@type": "Person",
        "name": "Jane Doe"
      },
      "datePublished": "2024-09-15",
      "description": "This is an example article."
    }
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.schemaorg.types import Organization, Person, SchemaOrgEntity


class Article(SchemaOrgEntity):
    """Schema.org Article."""

    SCHEMA_TYPE: ClassVar[str] = "Article"

    headline: str = ""
    image: list[str] = Field(default_factory=list)
    author: Person | None = None
    publisher: Organization | None = None
    date_published: str = ""
    date_modified: str = ""
    description: str = ""

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.author is not None:
            self.author.ensure_defaults()
        if self.publisher is not None:
            self.publisher.ensure_defaults()


def new_article(
    headline: str,
    images: list[str] | None = None,
    author: Person | None = None,
    publisher: Organization | None = None,
    date_published: str = "",
    date_modified: str = "",
    description: str = "",
) -> Article:
    """Create a defaulted Article."""
    article = Article(
        headline=headline,
        image=images or [],
        author=author,
        publisher=publisher,
        date_published=date_published,
        date_modified=date_modified,
        description=description,
    )
    article.ensure_defaults()
    return article
