"""
OpenGraph article.

Expected output:

    <meta property="og:type" content="article"/>
    <meta property="og:title" content="Example Article Title"/>
    <meta property="og:url" content="https://www.example.com/articles/example-article"/>
    <meta property="article:published_time" content="2024-09-15T09:00:00Z"/>
    <meta property="article:section" content="Technology"/>
    <meta property="article:author" content="https://www.example.com/authors/jane-doe"/>
    <meta property="article:tag" content="tech"/>
    <meta property="article:tag" content="innovation"/>
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.base import MetaTagValue
from teseo.schemas.opengraph.base import OpenGraphObject


class Article(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "article"

    published_time: str = ""
    modified_time: str = ""
    expiration_time: str = ""
    author: list[str] = Field(default_factory=list)
    section: str = ""
    tag: list[str] = Field(default_factory=list)

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("article:published_time", self.published_time),
            ("article:modified_time", self.modified_time),
            ("article:expiration_time", self.expiration_time),
            ("article:section", self.section),
            ("article:author", self.author),
            ("article:tag", self.tag),
        ]


def new_article(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    published_time: str = "",
    modified_time: str = "",
    expiration_time: str = "",
    author: list[str] | None = None,
    section: str = "",
    tags: list[str] | None = None,
) -> Article:
    article = Article(
        title=title,
        url=url,
        description=description,
        image=image,
        published_time=published_time,
        modified_time=modified_time,
        expiration_time=expiration_time,
        author=author or [],
        section=section,
        tag=tags or [],
    )
    article.ensure_defaults()
    return article
