"""
OpenGraph protocol objects, rendered as <meta property="og:..."> tags.
"""

from teseo.schemas.opengraph.article import Article, new_article
from teseo.schemas.opengraph.audio import Audio, new_audio
from teseo.schemas.opengraph.base import OpenGraphObject
from teseo.schemas.opengraph.book import Book, new_book
from teseo.schemas.opengraph.business import Business, new_business
from teseo.schemas.opengraph.event import Event, new_event
from teseo.schemas.opengraph.music import (
    MusicAlbum,
    MusicPlaylist,
    MusicRadioStation,
    MusicSong,
    new_music_album,
    new_music_playlist,
    new_music_radio_station,
    new_music_song,
)
from teseo.schemas.opengraph.place import Place, Restaurant, new_place, new_restaurant
from teseo.schemas.opengraph.product import (
    Product,
    ProductGroup,
    new_product,
    new_product_group,
)
from teseo.schemas.opengraph.profile import Profile, new_profile
from teseo.schemas.opengraph.video import (
    Video,
    VideoEpisode,
    VideoMovie,
    new_video,
    new_video_episode,
    new_video_movie,
)
from teseo.schemas.opengraph.website import WebSite, new_website

__all__ = [
    "OpenGraphObject",
    "Article",
    "Audio",
    "Book",
    "Business",
    "Event",
    "MusicAlbum",
    "MusicPlaylist",
    "MusicRadioStation",
    "MusicSong",
    "Place",
    "Product",
    "ProductGroup",
    "Profile",
    "Restaurant",
    "Video",
    "VideoEpisode",
    "VideoMovie",
    "WebSite",
    "new_article",
    "new_audio",
    "new_book",
    "new_business",
    "new_event",
    "new_music_album",
    "new_music_playlist",
    "new_music_radio_station",
    "new_music_song",
    "new_place",
    "new_product",
    "new_product_group",
    "new_profile",
    "new_restaurant",
    "new_video",
    "new_video_episode",
    "new_video_movie",
    "new_website",
]
