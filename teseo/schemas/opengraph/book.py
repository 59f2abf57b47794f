"""
OpenGraph book.
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.base import MetaTagValue
from teseo.schemas.opengraph.base import OpenGraphObject


class Book(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "book"

    author: list[str] = Field(default_factory=list)
    isbn: str = ""
    release_date: str = ""
    tag: list[str] = Field(default_factory=list)

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("book:isbn", self.isbn),
            ("book:release_date", self.release_date),
            ("book:author", self.author),
            ("book:tag", self.tag),
        ]


def new_book(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    author: list[str] | None = None,
    isbn: str = "",
    release_date: str = "",
    tags: list[str] | None = None,
) -> Book:
    book = Book(
        title=title,
        url=url,
        description=description,
        image=image,
        author=author or [],
        isbn=isbn,
        release_date=release_date,
        tag=tags or [],
    )
    book.ensure_defaults()
    return book
