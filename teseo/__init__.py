"""
teseo - structured SEO metadata for Python web applications.

Schema.org JSON-LD entities, OpenGraph and Twitter Card meta tags,
breadcrumbs derived from URLs and sitemap XML import/export.

Entities live in their vocabulary packages:

    from teseo.schemas import schemaorg, opengraph, twittercard
"""

from teseo.bundle import SEOBundle
from teseo.core.exceptions import (
    InvalidURLException,
    RenderException,
    SitemapException,
    SitemapParseException,
    SitemapReadException,
    SitemapWriteException,
    TeseoException,
)

__version__ = "1.0.0"

__all__ = [
    "SEOBundle",
    "TeseoException",
    "InvalidURLException",
    "RenderException",
    "SitemapException",
    "SitemapParseException",
    "SitemapReadException",
    "SitemapWriteException",
]
