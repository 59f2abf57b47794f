"""
OpenGraph business (business.business) with contact data.
"""

from typing import ClassVar

from teseo.schemas.base import MetaTagValue
from teseo.schemas.opengraph.base import OpenGraphObject


class Business(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "business.business"

    street_address: str = ""
    locality: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""
    email: str = ""
    phone_number: str = ""
    website: str = ""

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("business:contact_data:street_address", self.street_address),
            ("business:contact_data:locality", self.locality),
            ("business:contact_data:region", self.region),
            ("business:contact_data:postal_code", self.postal_code),
            ("business:contact_data:country_name", self.country),
            ("business:contact_data:email", self.email),
            ("business:contact_data:phone_number", self.phone_number),
            ("business:contact_data:website", self.website),
        ]


def new_business(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    street_address: str = "",
    locality: str = "",
    region: str = "",
    postal_code: str = "",
    country: str = "",
    email: str = "",
    phone_number: str = "",
    website: str = "",
) -> Business:
    business = Business(
        title=title,
        url=url,
        description=description,
        image=image,
        street_address=street_address,
        locality=locality,
        region=region,
        postal_code=postal_code,
        country=country,
        email=email,
        phone_number=phone_number,
        website=website,
    )
    business.ensure_defaults()
    return business
