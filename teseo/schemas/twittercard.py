"""
Twitter Card metadata, rendered as <meta name="twitter:..."> tags.
"""

from enum import Enum
from typing import ClassVar

from teseo.schemas.base import MetaTagEntity, MetaTagValue


class TwitterCardType(str, Enum):
    """Supported Twitter Card layouts."""

    SUMMARY = "summary"
    SUMMARY_LARGE_IMAGE = "summary_large_image"
    APP = "app"
    PLAYER = "player"


# Card types that carry a twitter:creator attribution
CREATOR_CARD_TYPES = frozenset(
    {TwitterCardType.SUMMARY.value, TwitterCardType.SUMMARY_LARGE_IMAGE.value}
)


def card_type_value(card: TwitterCardType | str) -> str:
    """Plain string value of a card type, named constant or not."""
    return card.value if isinstance(card, TwitterCardType) else card


class TwitterCard(MetaTagEntity):
    """
    Twitter Card.

    Some tags only apply to one layout: twitter:creator is written for
    summary cards, twitter:app:id:iphone for app cards and twitter:player
    for player cards. Values set for another layout are ignored. The card
    type is free text; TwitterCardType names the common layouts and an empty
    value defaults to summary.

    Example:
        card = new_summary_card(
            title="Example Title",
            description="Example Description",
            image="https://www.example.com/image.jpg",
            site="@example_site",
            creator="@example_creator",
        )
        html = card.to_html_meta_tags()
    """

    META_ATTRIBUTE: ClassVar[str] = "name"

    card: str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    site: str = ""
    creator: str = ""
    app_id: str = ""
    player_url: str = ""

    def ensure_defaults(self) -> None:
        if not self.card:
            self.card = TwitterCardType.SUMMARY.value

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        card = card_type_value(self.card) or TwitterCardType.SUMMARY.value
        tags: list[tuple[str, MetaTagValue]] = [
            ("twitter:card", card),
            ("twitter:title", self.title),
            ("twitter:description", self.description),
            ("twitter:image", self.image),
            ("twitter:site", self.site),
        ]
        if card in CREATOR_CARD_TYPES:
            tags.append(("twitter:creator", self.creator))
        if card == TwitterCardType.APP.value:
            tags.append(("twitter:app:id:iphone", self.app_id))
        if card == TwitterCardType.PLAYER.value:
            tags.append(("twitter:player", self.player_url))
        return tags


# ===================
# Factory Functions
# ===================

def new_card(
    card_type: TwitterCardType | str,
    title: str,
    description: str = "",
    image: str = "",
    site: str = "",
    creator: str = "",
) -> TwitterCard:
    card = TwitterCard(
        card=card_type_value(card_type),
        title=title,
        description=description,
        image=image,
        site=site,
        creator=creator,
    )
    card.ensure_defaults()
    return card


def new_summary_card(
    title: str,
    description: str = "",
    image: str = "",
    site: str = "",
    creator: str = "",
) -> TwitterCard:
    return new_card(TwitterCardType.SUMMARY, title, description, image, site, creator)


def new_summary_large_image_card(
    title: str,
    description: str = "",
    image: str = "",
    site: str = "",
    creator: str = "",
) -> TwitterCard:
    return new_card(TwitterCardType.SUMMARY_LARGE_IMAGE, title, description, image, site, creator)


def new_app_card(
    title: str,
    description: str = "",
    image: str = "",
    site: str = "",
    app_id: str = "",
) -> TwitterCard:
    card = TwitterCard(
        card=TwitterCardType.APP.value,
        title=title,
        description=description,
        image=image,
        site=site,
        app_id=app_id,
    )
    card.ensure_defaults()
    return card


def new_player_card(
    title: str,
    description: str = "",
    image: str = "",
    site: str = "",
    player_url: str = "",
) -> TwitterCard:
    card = TwitterCard(
        card=TwitterCardType.PLAYER.value,
        title=title,
        description=description,
        image=image,
        site=site,
        player_url=player_url,
    )
    card.ensure_defaults()
    return card
