"""
Capability contracts shared by every metadata entity.

Schema.org entities produce JSON-LD, OpenGraph and Twitter entities produce
meta tags, but all of them expose the same operation names so callers can
render a heterogeneous list uniformly. The operation that does not apply to
a vocabulary renders nothing.
"""

from abc import ABC, abstractmethod
from typing import Self, TextIO

from markupsafe import Markup

from teseo.core.rendering import KeyGenerator


class Defaultable(ABC):
    """Entities with implied constant fields filled in before rendering."""

    @abstractmethod
    def ensure_defaults(self) -> None:
        """
        Fill the vocabulary context and type discriminator when unset,
        then recurse into every present nested object.

        Idempotent; never overwrites explicitly set values; never fails.
        """
        pass

    @abstractmethod
    def with_defaults(self) -> Self:
        """
        Return a fully defaulted copy, leaving this instance untouched.
        """
        pass


class TemplateRenderer(ABC):
    """Entities rendered by writing directly to a text sink."""

    @abstractmethod
    def to_jsonld(self, writer: TextIO, key_generator: KeyGenerator | None = None) -> None:
        """
        Write a <script type="application/ld+json"> component.

        Args:
            writer: Text sink (file, StringIO, response stream)
            key_generator: Source of the element id suffix.
                Defaults to a random 16-character key

        Raises:
            RenderException: If the sink rejects the write
        """
        pass

    @abstractmethod
    def to_meta_tags(self, writer: TextIO) -> None:
        """
        Write the entity's <meta> tags, one per line.

        Raises:
            RenderException: If the sink rejects the write
        """
        pass


class HtmlRenderer(ABC):
    """Entities rendered to a ready-to-embed HTML string."""

    @abstractmethod
    def to_html_jsonld(self) -> Markup:
        """Render the JSON-LD <script> fragment as safe HTML."""
        pass

    @abstractmethod
    def to_html_meta_tags(self) -> Markup:
        """Render the <meta> tags as safe HTML."""
        pass


class SitemapRenderer(ABC):
    """Entities that can be exported to and imported from a sitemap file."""

    @abstractmethod
    def to_sitemap_file(self, path: str) -> None:
        """
        Write the entity's URLs as a sitemap XML file.

        Raises:
            SitemapWriteException: If encoding or writing fails
        """
        pass

    @abstractmethod
    def from_sitemap_file(self, path: str) -> None:
        """
        Load the entity's URLs from a sitemap XML file.

        Raises:
            SitemapReadException: If the file cannot be opened or read
            SitemapParseException: If the content is not a valid urlset
        """
        pass


class Renderable(Defaultable, TemplateRenderer, HtmlRenderer):
    """Every entity that can be placed in a page head."""
