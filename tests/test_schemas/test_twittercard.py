"""
Tests for Twitter Card meta tags.
"""

from teseo.schemas.twittercard import (
    TwitterCard,
    TwitterCardType,
    new_app_card,
    new_player_card,
    new_summary_card,
    new_summary_large_image_card,
)


class TestTwitterCard:
    """Tests for card output and layout gating."""

    def test_default_card_type(self):
        """Test cards default to the summary layout."""
        card = TwitterCard(title="Example")

        card.ensure_defaults()

        assert card.card == TwitterCardType.SUMMARY
        assert card.meta_tag_pairs()[0] == ("twitter:card", "summary")

    def test_summary_card(self):
        """Test the full summary card output."""
        card = new_summary_card(
            title="Example Title",
            description="Example Description",
            image="https://www.example.com/image.jpg",
            site="@example_site",
            creator="@example_creator",
        )

        html = card.to_html_meta_tags()

        assert html == (
            '<meta name="twitter:card" content="summary"/>\n'
            '<meta name="twitter:title" content="Example Title"/>\n'
            '<meta name="twitter:description" content="Example Description"/>\n'
            '<meta name="twitter:image" content="https://www.example.com/image.jpg"/>\n'
            '<meta name="twitter:site" content="@example_site"/>\n'
            '<meta name="twitter:creator" content="@example_creator"/>\n'
        )

    def test_large_image_keeps_creator(self):
        """Test summary_large_image cards carry the creator."""
        card = new_summary_large_image_card(title="T", creator="@me")

        assert ("twitter:creator", "@me") in card.meta_tag_pairs()

    def test_app_card_gating(self):
        """Test app cards write the app id and drop the creator."""
        card = new_app_card(title="App", app_id="123456")
        card.creator = "@me"
        card.player_url = "https://example.com/player"

        pairs = card.meta_tag_pairs()

        assert ("twitter:app:id:iphone", "123456") in pairs
        assert all(key not in ("twitter:creator", "twitter:player") for key, _ in pairs)

    def test_player_card_gating(self):
        """Test player cards write the player URL only."""
        card = new_player_card(title="Video", player_url="https://example.com/player")
        card.app_id = "123456"

        keys = [key for key, _ in card.meta_tag_pairs()]

        assert keys == ["twitter:card", "twitter:title", "twitter:player"]

    def test_summary_ignores_app_id(self):
        """Test summary cards never write app or player tags."""
        card = TwitterCard(title="T", app_id="1", player_url="https://p")

        keys = [key for key, _ in card.meta_tag_pairs()]

        assert keys == ["twitter:card", "twitter:title"]

    def test_empty_card_type_defaults(self):
        """Test an empty card type renders as summary."""
        card = TwitterCard(card="", title="T", creator="@me")

        assert card.meta_tag_pairs() == [
            ("twitter:card", "summary"),
            ("twitter:title", "T"),
            ("twitter:creator", "@me"),
        ]

    def test_unknown_card_type_passes_through(self):
        """Test card types outside the named layouts are written as given."""
        card = TwitterCard(
            card="gallery",
            title="T",
            creator="@me",
            app_id="1",
            player_url="https://example.com/player",
        )

        assert card.meta_tag_pairs() == [
            ("twitter:card", "gallery"),
            ("twitter:title", "T"),
        ]

    def test_named_constant_accepted(self):
        """Test the card type can be given as a TwitterCardType member."""
        card = TwitterCard(card=TwitterCardType.PLAYER, player_url="https://p")

        assert card.meta_tag_pairs() == [
            ("twitter:card", "player"),
            ("twitter:player", "https://p"),
        ]
