"""
OpenGraph profile.
"""

from typing import ClassVar

from teseo.schemas.base import MetaTagValue
from teseo.schemas.opengraph.base import OpenGraphObject


class Profile(OpenGraphObject):
    """
    OpenGraph profile of a person.

    The profile:* tags are written between og:title and og:url.
    """

    OG_TYPE: ClassVar[str] = "profile"

    first_name: str = ""
    last_name: str = ""
    username: str = ""
    gender: str = ""

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return [
            ("og:type", self.type),
            ("og:title", self.title),
            ("profile:first_name", self.first_name),
            ("profile:last_name", self.last_name),
            ("profile:username", self.username),
            ("profile:gender", self.gender),
            ("og:url", self.url),
            ("og:description", self.description),
            ("og:image", self.image),
        ]


def new_profile(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    first_name: str = "",
    last_name: str = "",
    username: str = "",
    gender: str = "",
) -> Profile:
    profile = Profile(
        title=title,
        url=url,
        description=description,
        image=image,
        first_name=first_name,
        last_name=last_name,
        username=username,
        gender=gender,
    )
    profile.ensure_defaults()
    return profile
