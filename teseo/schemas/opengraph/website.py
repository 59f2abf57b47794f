"""
OpenGraph website, the default og:type.
"""

from typing import ClassVar

from teseo.schemas.opengraph.base import OpenGraphObject


class WebSite(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "website"


def new_website(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
) -> WebSite:
    website = WebSite(title=title, url=url, description=description, image=image)
    website.ensure_defaults()
    return website
