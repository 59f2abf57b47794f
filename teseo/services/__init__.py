"""
Derivation services: breadcrumbs from URLs and the sitemap XML codec.
"""

from teseo.services.breadcrumbs import breadcrumb_list_from_url
from teseo.services.sitemap import (
    export_sitemap,
    import_sitemap,
    parse_sitemap,
    render_sitemap,
)

__all__ = [
    "breadcrumb_list_from_url",
    "export_sitemap",
    "import_sitemap",
    "parse_sitemap",
    "render_sitemap",
]
