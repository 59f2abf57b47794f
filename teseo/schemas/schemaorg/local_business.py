"""
Schema.org LocalBusiness.
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.schemaorg.types import (
    AggregateRating,
    GeoCoordinates,
    ImageObject,
    PostalAddress,
    Review,
    SchemaOrgEntity,
)


class LocalBusiness(SchemaOrgEntity):
    """
    Schema.org LocalBusiness.

    Example:
        business = LocalBusiness(
            name="Example Cafe",
            telephone="+1-555-555-5555",
            address=PostalAddress(street_address="123 Main St", address_locality="Anytown"),
            opening_hours=["Mo-Fr 08:00-18:00", "Sa 09:00-14:00"],
            geo=GeoCoordinates(latitude=40.7128, longitude=-74.006),
        )
    """

    SCHEMA_TYPE: ClassVar[str] = "LocalBusiness"

    name: str = ""
    description: str = ""
    url: str = ""
    logo: ImageObject | None = None
    telephone: str = ""
    address: PostalAddress | None = None
    opening_hours: list[str] = Field(default_factory=list)
    geo: GeoCoordinates | None = None
    aggregate_rating: AggregateRating | None = None
    review: list[Review] = Field(default_factory=list)

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.logo is not None:
            self.logo.ensure_defaults()
        if self.address is not None:
            self.address.ensure_defaults()
        if self.geo is not None:
            self.geo.ensure_defaults()
        if self.aggregate_rating is not None:
            self.aggregate_rating.ensure_defaults()
        for review in self.review:
            review.ensure_defaults()


def new_local_business(
    name: str,
    description: str = "",
    url: str = "",
    telephone: str = "",
    logo: ImageObject | None = None,
    address: PostalAddress | None = None,
    opening_hours: list[str] | None = None,
    geo: GeoCoordinates | None = None,
    aggregate_rating: AggregateRating | None = None,
    reviews: list[Review] | None = None,
) -> LocalBusiness:
    """Create a defaulted LocalBusiness."""
    business = LocalBusiness(
        name=name,
        description=description,
        url=url,
        telephone=telephone,
        logo=logo,
        address=address,
        opening_hours=opening_hours or [],
        geo=geo,
        aggregate_rating=aggregate_rating,
        review=reviews or [],
    )
    business.ensure_defaults()
    return business
