"""
Metadata entity catalogs: Schema.org, OpenGraph and Twitter Cards.
"""

from teseo.schemas.base import JsonLdEntity, MetaTagEntity, TeseoModel

__all__ = [
    "JsonLdEntity",
    "MetaTagEntity",
    "TeseoModel",
]
