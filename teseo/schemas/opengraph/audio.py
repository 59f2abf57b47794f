"""
OpenGraph audio (music.audio).
"""

from typing import ClassVar

from teseo.schemas.base import MetaTagValue
from teseo.schemas.opengraph.base import OpenGraphObject


class Audio(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "music.audio"

    duration: str = ""
    artist_url: str = ""

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("music:duration", self.duration),
            ("music:musician", self.artist_url),
        ]


def new_audio(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    duration: str = "",
    artist_url: str = "",
) -> Audio:
    audio = Audio(
        title=title,
        url=url,
        description=description,
        image=image,
        duration=duration,
        artist_url=artist_url,
    )
    audio.ensure_defaults()
    return audio
