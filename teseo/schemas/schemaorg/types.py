"""
Common Schema.org types used across multiple JSON-LD entities.
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.base import SCHEMA_ORG_CONTEXT, JsonLdEntity, TeseoModel


# ===================
# Base Types
# ===================

class SchemaOrgNode(TeseoModel):
    """Nested Schema.org object carrying only a type discriminator."""

    SCHEMA_TYPE: ClassVar[str] = "Thing"

    type: str = Field(default="", alias="@type")

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = self.SCHEMA_TYPE


class SchemaOrgEntity(JsonLdEntity):
    """Schema.org entity with its own @context, renderable as JSON-LD."""

    SCHEMA_TYPE: ClassVar[str] = "Thing"

    context: str = Field(default="", alias="@context")
    type: str = Field(default="", alias="@type")

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_ORG_CONTEXT
        if not self.type:
            self.type = self.SCHEMA_TYPE


# ===================
# Shared Value Types
# ===================

class ImageObject(SchemaOrgNode):
    """Schema.org ImageObject."""

    SCHEMA_TYPE: ClassVar[str] = "ImageObject"

    url: str = ""


class ContactPoint(SchemaOrgNode):
    """Schema.org ContactPoint."""

    SCHEMA_TYPE: ClassVar[str] = "ContactPoint"

    telephone: str = ""
    contact_type: str = ""
    area_served: str = ""
    available_language: str = ""


class PostalAddress(SchemaOrgNode):
    """Schema.org PostalAddress."""

    SCHEMA_TYPE: ClassVar[str] = "PostalAddress"

    street_address: str = ""
    address_locality: str = ""
    address_region: str = ""
    postal_code: str = ""
    address_country: str = ""


class GeoCoordinates(SchemaOrgNode):
    """Schema.org GeoCoordinates. Rendered with 6-decimal precision."""

    SCHEMA_TYPE: ClassVar[str] = "GeoCoordinates"

    latitude: float = 0.0
    longitude: float = 0.0


class Offer(SchemaOrgNode):
    """Schema.org Offer. The price is kept as text to avoid float rounding."""

    SCHEMA_TYPE: ClassVar[str] = "Offer"

    url: str = ""
    price_currency: str = ""
    price: str = ""
    availability: str = ""
    item_condition: str = ""


class AggregateRating(SchemaOrgNode):
    """Schema.org AggregateRating."""

    SCHEMA_TYPE: ClassVar[str] = "AggregateRating"

    rating_value: float = 0.0
    review_count: int = 0


class Rating(SchemaOrgNode):
    """Schema.org Rating."""

    SCHEMA_TYPE: ClassVar[str] = "Rating"

    rating_value: float = 0.0
    best_rating: float = 0.0


# ===================
# Organization & Person
# ===================

class Organization(SchemaOrgEntity):
    """
    Schema.org Organization.

    Example:
        org = Organization(
            name="Example Corp",
            url="https://www.example.com",
            logo=ImageObject(url="https://www.example.com/logo.png"),
            same_as=["https://twitter.com/example"],
        )
        html = org.to_html_jsonld()
    """

    SCHEMA_TYPE: ClassVar[str] = "Organization"

    name: str = ""
    url: str = ""
    logo: ImageObject | None = None
    contact_points: list[ContactPoint] = Field(default_factory=list, alias="contactPoint")
    same_as: list[str] = Field(default_factory=list)

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.logo is not None:
            self.logo.ensure_defaults()
        for contact_point in self.contact_points:
            contact_point.ensure_defaults()


class Person(SchemaOrgEntity):
    """Schema.org Person."""

    SCHEMA_TYPE: ClassVar[str] = "Person"

    name: str = ""
    url: str = ""
    email: str = ""
    image: ImageObject | None = None
    job_title: str = ""
    works_for: Organization | None = None
    same_as: list[str] = Field(default_factory=list)
    gender: str = ""
    birth_date: str = ""
    nationality: str = ""
    telephone: str = ""
    address: PostalAddress | None = None
    affiliation: Organization | None = None

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.image is not None:
            self.image.ensure_defaults()
        if self.works_for is not None:
            self.works_for.ensure_defaults()
        if self.address is not None:
            self.address.ensure_defaults()
        if self.affiliation is not None:
            self.affiliation.ensure_defaults()


class Review(SchemaOrgNode):
    """Schema.org Review."""

    SCHEMA_TYPE: ClassVar[str] = "Review"

    author: Person | None = None
    date_published: str = ""
    review_body: str = ""
    review_rating: Rating | None = None

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.author is not None:
            self.author.ensure_defaults()
        if self.review_rating is not None:
            self.review_rating.ensure_defaults()


# ===================
# Factory Functions
# ===================

def new_organization(
    name: str,
    url: str = "",
    logo_url: str = "",
    contact_points: list[ContactPoint] | None = None,
    same_as: list[str] | None = None,
) -> Organization:
    """Create a defaulted Organization; a logo is attached when logo_url is set."""
    org = Organization(
        name=name,
        url=url,
        logo=ImageObject(url=logo_url) if logo_url else None,
        contact_points=contact_points or [],
        same_as=same_as or [],
    )
    org.ensure_defaults()
    return org


def new_person(
    name: str,
    url: str = "",
    email: str = "",
    image: ImageObject | None = None,
    job_title: str = "",
    works_for: Organization | None = None,
    same_as: list[str] | None = None,
    gender: str = "",
    birth_date: str = "",
    nationality: str = "",
    telephone: str = "",
    address: PostalAddress | None = None,
    affiliation: Organization | None = None,
) -> Person:
    """Create a defaulted Person."""
    person = Person(
        name=name,
        url=url,
        email=email,
        image=image,
        job_title=job_title,
        works_for=works_for,
        same_as=same_as or [],
        gender=gender,
        birth_date=birth_date,
        nationality=nationality,
        telephone=telephone,
        address=address,
        affiliation=affiliation,
    )
    person.ensure_defaults()
    return person
