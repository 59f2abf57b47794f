"""
Breadcrumb derivation.
Builds a Schema.org BreadcrumbList from the path of a page URL.
"""

import logging
from urllib.parse import unquote, urlsplit

from teseo.core.exceptions import InvalidURLException
from teseo.schemas.schemaorg.breadcrumb_list import (
    BreadcrumbList,
    ListItem,
    new_breadcrumb_list,
)

logger = logging.getLogger(__name__)

HOME_LABEL = "Home"


def title_first(segment: str) -> str:
    """
    Title-case the first character of a path segment, leaving the rest as is.

    Unicode-aware: "café" -> "Café", "ǆungla" -> "ǅungla". A first character
    whose title case expands to several characters ("ß") is kept as is.
    """
    first = segment[:1].title()
    if len(first) != 1:
        first = segment[:1]
    return first + segment[1:]


def split_site_url(url: str) -> tuple[str, list[str]]:
    """
    Split an absolute URL into its site root and raw path segments.

    Segments keep their percent-escapes, so an escaped slash stays inside
    its segment.

    Args:
        url: Absolute page URL

    Returns:
        (scheme://host, [segment, ...]) with empty segments removed

    Raises:
        InvalidURLException: If the URL cannot be parsed or has no scheme/host
    """
    try:
        parsed = urlsplit(url)
        # Accessing port validates it
        parsed.port
    except ValueError as e:
        raise InvalidURLException(url, str(e)) from e

    if not parsed.scheme or not parsed.netloc:
        raise InvalidURLException(url, "scheme and host are required")

    host = parsed.netloc.rpartition("@")[2]
    segments = [segment for segment in parsed.path.split("/") if segment]
    return f"{parsed.scheme}://{host}", segments


def breadcrumb_list_from_url(url: str) -> BreadcrumbList:
    """
    Derive a BreadcrumbList from a page URL.

    The first item is always the site root labeled "Home". Each path segment
    adds one item whose URL is the cumulative path up to that segment, kept
    as escaped in the input. Only the label is percent-decoded.

    Example:
        https://www.example.com/blog/my-post ->
            1 Home    https://www.example.com
            2 Blog    https://www.example.com/blog
            3 My-post https://www.example.com/blog/my-post

    Args:
        url: Absolute page URL

    Returns:
        Defaulted BreadcrumbList

    Raises:
        InvalidURLException: If the URL cannot be parsed
    """
    base_url, segments = split_site_url(url)

    items = [ListItem(position=1, name=HOME_LABEL, item=base_url)]
    for index, segment in enumerate(segments):
        items.append(
            ListItem(
                position=index + 2,
                name=title_first(unquote(segment)),
                item=base_url + "/" + "/".join(segments[: index + 1]),
            )
        )

    logger.debug(f"Derived {len(items)} breadcrumb items from {url}")
    return new_breadcrumb_list(items)
