"""
Common OpenGraph metadata shared by every og:type.
"""

from typing import ClassVar

from teseo.schemas.base import MetaTagEntity, MetaTagValue


class OpenGraphObject(MetaTagEntity):
    """
    Base OpenGraph object (og:type, og:title, og:url, og:description, og:image).

    Subclasses set OG_TYPE, the og:type written when type is left empty.
    """

    OG_TYPE: ClassVar[str] = "website"

    type: str = ""
    title: str = ""
    url: str = ""
    description: str = ""
    image: str = ""

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = self.OG_TYPE

    def base_tags(self) -> list[tuple[str, MetaTagValue]]:
        """The og:* tags every object starts with."""
        return [
            ("og:type", self.type),
            ("og:title", self.title),
            ("og:url", self.url),
            ("og:description", self.description),
            ("og:image", self.image),
        ]

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags()
