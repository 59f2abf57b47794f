"""
Page-level grouping of metadata entities.

A page usually carries several vocabularies at once (a WebPage and a
BreadcrumbList as JSON-LD, OpenGraph and Twitter tags for link previews).
SEOBundle keeps them together and renders the whole <head> fragment through
the shared contracts, without knowing which vocabulary each entity uses.
"""

import logging
from typing import Iterable, TextIO

from markupsafe import Markup

from teseo.core.contracts import Renderable
from teseo.core.rendering import KeyGenerator

logger = logging.getLogger(__name__)


class SEOBundle:
    """
    Ordered collection of renderable entities for one page.

    Example:
        bundle = SEOBundle([
            new_webpage(url="https://www.example.com", name="Home Page"),
            new_breadcrumb_list_from_url("https://www.example.com/about"),
            new_summary_card(title="Home Page"),
        ])
        head = bundle.render_head()
    """

    def __init__(self, items: Iterable[Renderable] | None = None):
        self.items: list[Renderable] = list(items or [])

    def add(self, *items: Renderable) -> "SEOBundle":
        """Append entities, keeping insertion order. Returns self for chaining."""
        self.items.extend(items)
        return self

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def render_jsonld(self) -> Markup:
        """Render the JSON-LD blocks of every entity, one per line."""
        blocks = [item.to_html_jsonld() for item in self.items]
        return Markup("\n").join(block for block in blocks if block)

    def render_meta_tags(self) -> Markup:
        """Render the meta tags of every entity."""
        return Markup("").join(item.to_html_meta_tags() for item in self.items)

    def render_head(self) -> Markup:
        """
        Render the complete <head> fragment.

        Meta tags come first, followed by the JSON-LD blocks.
        """
        return self.render_meta_tags() + self.render_jsonld()

    def write_head(self, writer: TextIO, key_generator: KeyGenerator | None = None) -> None:
        """
        Stream the <head> fragment to a text sink, JSON-LD blocks with ids.

        Raises:
            RenderException: If the sink rejects a write
        """
        for item in self.items:
            item.to_meta_tags(writer)
        for item in self.items:
            item.to_jsonld(writer, key_generator)
        logger.debug(f"Rendered SEO bundle with {len(self.items)} entities")
