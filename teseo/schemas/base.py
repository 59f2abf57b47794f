"""
Base models for metadata entities.

All entities are pydantic models: snake_case attributes, camelCase JSON-LD
keys. Zero values ("", 0, None, []) mean "absent" and are left out of the
rendered output.
"""

from abc import abstractmethod
from typing import Any, ClassVar, Self, TextIO

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from teseo.core.contracts import Defaultable, Renderable
from teseo.core.rendering import (
    KeyGenerator,
    generate_unique_key,
    prune_empty,
    render_jsonld_script,
    render_meta_tags,
    write_meta_tag,
    write_text,
)

SCHEMA_ORG_CONTEXT = "https://schema.org"

MetaTagValue = str | list[str]


class TeseoModel(BaseModel, Defaultable):
    """Base model for every entity, nested or top-level."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def with_defaults(self) -> Self:
        normalized = self.model_copy(deep=True)
        normalized.ensure_defaults()
        return normalized


class JsonLdEntity(TeseoModel, Renderable):
    """
    A Schema.org entity rendered as a JSON-LD script block.

    Rendering works on a defaulted copy; the instance itself is not mutated.
    """

    def element_prefix(self) -> str:
        """Prefix for the script element id (lowercase entity name)."""
        return type(self).__name__.lower()

    def jsonld_data(self) -> dict[str, Any]:
        """
        Get the JSON-LD object for this entity.

        Returns:
            Ordered dictionary with absent fields removed. @context and
            @type are always present.
        """
        return prune_empty(self.with_defaults().model_dump(by_alias=True))

    def to_jsonld(self, writer: TextIO, key_generator: KeyGenerator | None = None) -> None:
        key = (key_generator or generate_unique_key)()
        script = render_jsonld_script(self.jsonld_data(), f"{self.element_prefix()}-{key}")
        write_text(writer, script, f"{type(self).__name__} JSON-LD")

    def to_html_jsonld(self) -> Markup:
        return render_jsonld_script(self.jsonld_data())

    def to_meta_tags(self, writer: TextIO) -> None:
        # Schema.org entities have no meta tag representation
        return None

    def to_html_meta_tags(self) -> Markup:
        return Markup("")


class MetaTagEntity(TeseoModel, Renderable):
    """
    An OpenGraph or Twitter entity rendered as a sequence of <meta> tags.

    Subclasses list their candidate tags in documented order through
    meta_tags(); variant gating belongs there as well.
    """

    META_ATTRIBUTE: ClassVar[str] = "property"

    @abstractmethod
    def meta_tags(self) -> list[tuple[str, MetaTagValue]]:
        """
        Candidate (key, value) pairs in output order.

        A list value is a collection field expanded in place into one tag
        per element.
        """
        pass

    def meta_tag_pairs(self) -> list[tuple[str, str]]:
        """
        Get the tags that will be rendered, in order.

        Collections are expanded and empty values dropped.
        """
        pairs = []
        for key, value in self.with_defaults().meta_tags():
            values = value if isinstance(value, list) else [value]
            pairs.extend((key, item) for item in values if item)
        return pairs

    def to_meta_tags(self, writer: TextIO) -> None:
        for key, content in self.meta_tag_pairs():
            write_meta_tag(writer, self.META_ATTRIBUTE, key, content)

    def to_html_meta_tags(self) -> Markup:
        return render_meta_tags(self.META_ATTRIBUTE, self.meta_tag_pairs())

    def to_jsonld(self, writer: TextIO, key_generator: KeyGenerator | None = None) -> None:
        # Meta tag vocabularies have no JSON-LD representation
        return None

    def to_html_jsonld(self) -> Markup:
        return Markup("")
