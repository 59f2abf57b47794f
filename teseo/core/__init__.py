"""
Core building blocks: exceptions, rendering primitives and capability contracts.
"""

from teseo.core.exceptions import (
    TeseoException,
    InvalidURLException,
    RenderException,
    SitemapException,
    SitemapWriteException,
    SitemapReadException,
    SitemapParseException,
)

__all__ = [
    "TeseoException",
    "InvalidURLException",
    "RenderException",
    "SitemapException",
    "SitemapWriteException",
    "SitemapReadException",
    "SitemapParseException",
]
