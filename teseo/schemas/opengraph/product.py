"""
OpenGraph products and product groups.
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.base import MetaTagValue
from teseo.schemas.opengraph.base import OpenGraphObject


class Product(OpenGraphObject):
    OG_TYPE: ClassVar[str] = "product"

    price: str = ""
    price_currency: str = ""

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("product:price:amount", self.price),
            ("product:price:currency", self.price_currency),
        ]


class ProductGroup(OpenGraphObject):
    """A group of products; each product is referenced by its page URL."""

    OG_TYPE: ClassVar[str] = "product.group"

    products: list[str] = Field(default_factory=list)

    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        return self.base_tags() + [
            ("product:group_item", self.products),
        ]


def new_product(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    price: str = "",
    price_currency: str = "",
) -> Product:
    product = Product(
        title=title,
        url=url,
        description=description,
        image=image,
        price=price,
        price_currency=price_currency,
    )
    product.ensure_defaults()
    return product


def new_product_group(
    title: str,
    url: str = "",
    description: str = "",
    image: str = "",
    products: list[str] | None = None,
) -> ProductGroup:
    group = ProductGroup(
        title=title,
        url=url,
        description=description,
        image=image,
        products=products or [],
    )
    group.ensure_defaults()
    return group
