"""
Tests for OpenGraph objects and meta tag output.
"""

import io

import pytest

from teseo.schemas import opengraph
from teseo.schemas.opengraph import (
    Article,
    MusicPlaylist,
    Place,
    Profile,
    VideoEpisode,
    new_article,
    new_restaurant,
    new_video_movie,
)


class TestDefaults:
    """Tests for og:type defaulting."""

    @pytest.mark.parametrize(
        "cls,og_type",
        [
            (opengraph.Article, "article"),
            (opengraph.Audio, "music.audio"),
            (opengraph.Book, "book"),
            (opengraph.Business, "business.business"),
            (opengraph.Event, "event"),
            (opengraph.MusicAlbum, "music.album"),
            (opengraph.MusicPlaylist, "music.playlist"),
            (opengraph.MusicRadioStation, "music.radio_station"),
            (opengraph.MusicSong, "music.song"),
            (opengraph.Place, "place"),
            (opengraph.Product, "product"),
            (opengraph.ProductGroup, "product.group"),
            (opengraph.Profile, "profile"),
            (opengraph.Restaurant, "restaurant"),
            (opengraph.Video, "video.movie"),
            (opengraph.VideoEpisode, "video.episode"),
            (opengraph.VideoMovie, "video.movie"),
            (opengraph.WebSite, "website"),
        ],
    )
    def test_og_type(self, cls, og_type):
        """Test each object type defaults its og:type."""
        obj = cls(title="Example")

        assert obj.meta_tag_pairs()[0] == ("og:type", og_type)

    def test_explicit_type_kept(self):
        """Test an explicit og:type is not overwritten."""
        article = Article(type="article.custom", title="Example")

        article.ensure_defaults()

        assert article.type == "article.custom"

    def test_render_does_not_mutate(self):
        """Test rendering leaves the receiver untouched."""
        article = Article(title="Example")

        article.to_html_meta_tags()

        assert article.type == ""


class TestMetaTags:
    """Tests for documented tag order and filtering."""

    def test_article(self):
        """Test article tags with collections expanded in place."""
        article = new_article(
            title="Example Article Title",
            url="https://www.example.com/articles/example-article",
            published_time="2024-09-15T09:00:00Z",
            section="Technology",
            author=["https://www.example.com/authors/jane-doe"],
            tags=["tech", "innovation"],
        )

        html = article.to_html_meta_tags()

        assert html == (
            '<meta property="og:type" content="article"/>\n'
            '<meta property="og:title" content="Example Article Title"/>\n'
            '<meta property="og:url" content="https://www.example.com/articles/example-article"/>\n'
            '<meta property="article:published_time" content="2024-09-15T09:00:00Z"/>\n'
            '<meta property="article:section" content="Technology"/>\n'
            '<meta property="article:author" content="https://www.example.com/authors/jane-doe"/>\n'
            '<meta property="article:tag" content="tech"/>\n'
            '<meta property="article:tag" content="innovation"/>\n'
        )

    def test_profile_order(self):
        """Test profile tags sit between og:title and og:url."""
        profile = Profile(
            title="Jane",
            url="https://example.com/jane",
            first_name="Jane",
            last_name="Doe",
            username="jdoe",
            gender="female",
            description="Profile",
        )

        keys = [key for key, _ in profile.meta_tag_pairs()]

        assert keys == [
            "og:type",
            "og:title",
            "profile:first_name",
            "profile:last_name",
            "profile:username",
            "profile:gender",
            "og:url",
            "og:description",
        ]

    def test_place_coordinates(self):
        """Test coordinates use six decimals."""
        place = Place(title="Empire State", latitude=40.748817, longitude=-73.985428)

        pairs = dict(place.meta_tag_pairs())

        assert pairs["place:location:latitude"] == "40.748817"
        assert pairs["place:location:longitude"] == "-73.985428"

    def test_place_zero_coordinates_omitted(self):
        """Test unset coordinates are left out."""
        keys = [key for key, _ in Place(title="Somewhere").meta_tag_pairs()]

        assert "place:location:latitude" not in keys
        assert "place:location:longitude" not in keys

    def test_place_non_finite_coordinate(self):
        """Test infinite coordinates are rejected."""
        with pytest.raises(ValueError):
            Place(title="Nowhere", latitude=float("inf")).meta_tag_pairs()

    def test_episode_number(self):
        """Test the episode number is written when set and omitted at zero."""
        episode = VideoEpisode(title="Pilot", series_url="https://example.com/show", episode_number=1)

        assert episode.meta_tag_pairs()[-2:] == [
            ("video:series", "https://example.com/show"),
            ("video:episode", "1"),
        ]
        assert ("video:episode", "0") not in VideoEpisode(title="Pilot").meta_tag_pairs()

    def test_video_actors(self):
        """Test actors follow duration and precede the director."""
        movie = new_video_movie(
            title="Movie",
            duration="7200",
            actor_urls=["https://example.com/a", "", "https://example.com/b"],
            director_url="https://example.com/d",
        )

        keys = [key for key, _ in movie.meta_tag_pairs()][2:]

        assert keys == ["video:duration", "video:actor", "video:actor", "video:director"]

    def test_playlist_songs(self):
        """Test songs are expanded before the duration."""
        playlist = MusicPlaylist(title="Mix", song_urls=["https://s/1", "https://s/2"], duration="600")

        assert playlist.meta_tag_pairs()[2:] == [
            ("music:song", "https://s/1"),
            ("music:song", "https://s/2"),
            ("music:duration", "600"),
        ]

    def test_restaurant(self):
        """Test restaurant contact data and links."""
        restaurant = new_restaurant(
            title="Trattoria",
            locality="Rome",
            phone="+39 06 000000",
            menu_url="https://example.com/menu",
        )

        assert restaurant.meta_tag_pairs()[2:] == [
            ("place:contact_data:locality", "Rome"),
            ("place:contact_data:phone_number", "+39 06 000000"),
            ("restaurant:menu", "https://example.com/menu"),
        ]

    def test_content_escaped(self):
        """Test attribute values are HTML-escaped."""
        html = Article(title='Fish & "Chips"').to_html_meta_tags()

        assert 'content="Fish &amp; &#34;Chips&#34;"' in html

    def test_write_to_sink(self):
        """Test streaming output matches the HTML output."""
        article = new_article(title="Example", tags=["a", "b"])
        writer = io.StringIO()

        article.to_meta_tags(writer)

        assert writer.getvalue() == article.to_html_meta_tags()

    def test_jsonld_empty(self, key_generator):
        """Test OpenGraph objects render no JSON-LD."""
        writer = io.StringIO()
        article = Article(title="Example")

        article.to_jsonld(writer, key_generator)

        assert writer.getvalue() == ""
        assert article.to_html_jsonld() == ""
