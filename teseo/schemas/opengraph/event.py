"""
OpenGraph event.
"""

from typing import ClassVar

from teseo.schemas.base import MetaTagValue
from teseo.schemas.opengraph.base import OpenGraphObject


class Event(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "event"

    start_date: str = ""
    end_date: str = ""
    location: str = ""

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("event:start_date", self.start_date),
            ("event:end_date", self.end_date),
            ("event:location", self.location),
        ]


def new_event(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    start_date: str = "",
    end_date: str = "",
    location: str = "",
) -> Event:
    event = Event(
        title=title,
        url=url,
        description=description,
        image=image,
        start_date=start_date,
        end_date=end_date,
        location=location,
    )
    event.ensure_defaults()
    return event
