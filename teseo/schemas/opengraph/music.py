"""
OpenGraph music vertical: albums, playlists, radio stations and songs.

Durations are given in seconds, as text. Musician, song and album
references are URLs to the pages describing them.
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.base import MetaTagValue
from teseo.schemas.opengraph.base import OpenGraphObject


class MusicAlbum(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "music.album"

    musician: list[str] = Field(default_factory=list)
    release_date: str = ""
    genre: str = ""

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("music:release_date", self.release_date),
            ("music:genre", self.genre),
            ("music:musician", self.musician),
        ]


class MusicPlaylist(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "music.playlist"

    song_urls: list[str] = Field(default_factory=list)
    duration: str = ""

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("music:song", self.song_urls),
            ("music:duration", self.duration),
        ]


class MusicRadioStation(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "music.radio_station"


class MusicSong(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "music.song"

    duration: str = ""
    album_url: str = ""
    musician_urls: list[str] = Field(default_factory=list)

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("music:duration", self.duration),
            ("music:album", self.album_url),
            ("music:musician", self.musician_urls),
        ]


def new_music_album(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    musician: list[str] | None = None,
    release_date: str = "",
    genre: str = "",
) -> MusicAlbum:
    album = MusicAlbum(
        title=title,
        url=url,
        description=description,
        image=image,
        musician=musician or [],
        release_date=release_date,
        genre=genre,
    )
    album.ensure_defaults()
    return album


def new_music_playlist(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    song_urls: list[str] | None = None,
    duration: str = "",
) -> MusicPlaylist:
    playlist = MusicPlaylist(
        title=title,
        url=url,
        description=description,
        image=image,
        song_urls=song_urls or [],
        duration=duration,
    )
    playlist.ensure_defaults()
    return playlist


def new_music_radio_station(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
) -> MusicRadioStation:
    station = MusicRadioStation(title=title, url=url, description=description, image=image)
    station.ensure_defaults()
    return station


def new_music_song(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    duration: str = "",
    album_url: str = "",
    musician_urls: list[str] | None = None,
) -> MusicSong:
    song = MusicSong(
        title=title,
        url=url,
        description=description,
        image=image,
        duration=duration,
        album_url=album_url,
        musician_urls=musician_urls or [],
    )
    song.ensure_defaults()
    return song
