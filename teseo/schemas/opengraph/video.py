"""
OpenGraph video vertical: movies and episodes.

Actor, director and series references are URLs to the pages describing
them. Durations are given in seconds, as text.
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.base import MetaTagValue
from teseo.schemas.opengraph.base import OpenGraphObject


class Video(OpenGraphObject):
    """Generic video, published as video.movie."""

    OG_TYPE: ClassVar[str] = "video.movie"

    duration: str = ""
    actor_urls: list[str] = Field(default_factory=list)
    director_url: str = ""
    release_date: str = ""

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("video:duration", self.duration),
            ("video:actor", self.actor_urls),
            ("video:director", self.director_url),
            ("video:release_date", self.release_date),
        ]


class VideoMovie(Video):
    OG_TYPE: ClassVar[str] = "video.movie"


class VideoEpisode(Video):
    OG_TYPE: ClassVar[str] = "video.episode"

    series_url: str = ""
    episode_number: int = 0

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return super().meta_tags() + [
            ("video:series", self.series_url),
            ("video:episode", str(self.episode_number) if self.episode_number else ""),
        ]


def new_video(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    duration: str = "",
    actor_urls: list[str] | None = None,
    director_url: str = "",
    release_date: str = "",
) -> Video:
    video = Video(
        title=title,
        url=url,
        description=description,
        image=image,
        duration=duration,
        actor_urls=actor_urls or [],
        director_url=director_url,
        release_date=release_date,
    )
    video.ensure_defaults()
    return video


def new_video_movie(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    duration: str = "",
    actor_urls: list[str] | None = None,
    director_url: str = "",
    release_date: str = "",
) -> VideoMovie:
    movie = VideoMovie(
        title=title,
        url=url,
        description=description,
        image=image,
        duration=duration,
        actor_urls=actor_urls or [],
        director_url=director_url,
        release_date=release_date,
    )
    movie.ensure_defaults()
    return movie


def new_video_episode(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    duration: str = "",
    actor_urls: list[str] | None = None,
    director_url: str = "",
    release_date: str = "",
    series_url: str = "",
    episode_number: int = 0,
) -> VideoEpisode:
    episode = VideoEpisode(
        title=title,
        url=url,
        description=description,
        image=image,
        duration=duration,
        actor_urls=actor_urls or [],
        director_url=director_url,
        release_date=release_date,
        series_url=series_url,
        episode_number=episode_number,
    )
    episode.ensure_defaults()
    return episode
