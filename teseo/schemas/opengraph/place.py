"""
OpenGraph places: generic locations and restaurants.
"""

from typing import ClassVar

from teseo.core.rendering import format_float
from teseo.schemas.base import MetaTagValue
from teseo.schemas.opengraph.base import OpenGraphObject


def _coordinate(value: float) -> str:
    # Zero means unset
    return format_float(value) if value else ""


class Place(OpenGraphObject):
    """
    OpenGraph place.

    Coordinates are written with 6-decimal precision, e.g.
    <meta property="place:location:latitude" content="40.748817"/>
    """

    OG_TYPE: ClassVar[str] = "place"

    latitude: float = 0.0
    longitude: float = 0.0
    street_address: str = ""
    locality: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("place:location:latitude", _coordinate(self.latitude)),
            ("place:location:longitude", _coordinate(self.longitude)),
            ("place:contact_data:street_address", self.street_address),
            ("place:contact_data:locality", self.locality),
            ("place:contact_data:region", self.region),
            ("place:contact_data:postal_code", self.postal_code),
            ("place:contact_data:country_name", self.country),
        ]


class Restaurant(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "restaurant"

    street_address: str = ""
    locality: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""
    phone: str = ""
    menu_url: str = ""
    reservation_url: str = ""

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("place:contact_data:street_address", self.street_address),
            ("place:contact_data:locality", self.locality),
            ("place:contact_data:region", self.region),
            ("place:contact_data:postal_code", self.postal_code),
            ("place:contact_data:country_name", self.country),
            ("place:contact_data:phone_number", self.phone),
            ("restaurant:menu", self.menu_url),
            ("restaurant:reservation", self.reservation_url),
        ]


def new_place(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    latitude: float = 0.0,
    longitude: float = 0.0,
    street_address: str = "",
    locality: str = "",
    region: str = "",
    postal_code: str = "",
    country: str = "",
) -> Place:
    place = Place(
        title=title,
        url=url,
        description=description,
        image=image,
        latitude=latitude,
        longitude=longitude,
        street_address=street_address,
        locality=locality,
        region=region,
        postal_code=postal_code,
        country=country,
    )
    place.ensure_defaults()
    return place


def new_restaurant(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    street_address: str = "",
    locality: str = "",
    region: str = "",
    postal_code: str = "",
    country: str = "",
    phone: str = "",
    menu_url: str = "",
    reservation_url: str = "",
) -> Restaurant:
    restaurant = Restaurant(
        title=title,
        url=url,
        description=description,
        image=image,
        street_address=street_address,
        locality=locality,
        region=region,
        postal_code=postal_code,
        country=country,
        phone=phone,
        menu_url=menu_url,
        reservation_url=reservation_url,
    )
    restaurant.ensure_defaults()
    return restaurant
