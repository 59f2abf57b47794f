"""
Schema.org Product with its brand, offer, rating and review sub-objects.
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.schemaorg.types import (
    AggregateRating,
    Offer,
    Review,
    SchemaOrgEntity,
    SchemaOrgNode,
)


class Brand(SchemaOrgNode):
    """Schema.org Brand."""

    SCHEMA_TYPE: ClassVar[str] = "Brand"

    name: str = ""


class Product(SchemaOrgEntity):
    """
    Schema.org Product.

    Example:
        product = Product(
            name="Example Product",
            image=["https://www.example.com/images/product.jpg"],
            sku="12345",
            brand=Brand(name="Example Brand"),
            offers=Offer(price="29.99", price_currency="USD"),
            aggregate_rating=AggregateRating(rating_value=4.5, review_count=24),
        )
        product.to_jsonld(response_stream)

    The rating above renders as "ratingValue": 4.500000.
    """

    SCHEMA_TYPE: ClassVar[str] = "Product"

    name: str = ""
    description: str = ""
    image: list[str] = Field(default_factory=list)
    sku: str = ""
    brand: Brand | None = None
    offers: Offer | None = None
    category: str = ""
    aggregate_rating: AggregateRating | None = None
    review: list[Review] = Field(default_factory=list)

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.brand is not None:
            self.brand.ensure_defaults()
        if self.offers is not None:
            self.offers.ensure_defaults()
        if self.aggregate_rating is not None:
            self.aggregate_rating.ensure_defaults()
        for review in self.review:
            review.ensure_defaults()


def new_product(
    name: str,
    description: str = "",
    images: list[str] | None = None,
    sku: str = "",
    brand: Brand | None = None,
    offers: Offer | None = None,
    category: str = "",
    aggregate_rating: AggregateRating | None = None,
    reviews: list[Review] | None = None,
) -> Product:
    """Create a defaulted Product."""
    product = Product(
        name=name,
        description=description,
        image=images or [],
        sku=sku,
        brand=brand,
        offers=offers,
        category=category,
        aggregate_rating=aggregate_rating,
        review=reviews or [],
    )
    product.ensure_defaults()
    return product
