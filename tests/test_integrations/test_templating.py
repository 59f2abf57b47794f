"""
Tests for the Jinja2 filters.
"""

from jinja2 import Environment

from teseo.schemas.opengraph import new_website as new_og_website
from teseo.schemas.schemaorg import new_webpage
from teseo.templating import register_jinja_filters


def make_env() -> Environment:
    return register_jinja_filters(Environment(autoescape=True))


class TestJinjaFilters:
    """Tests for template rendering."""

    def test_jsonld_filter(self):
        """Test the JSON-LD block is not escaped by autoescaping."""
        webpage = new_webpage("https://www.example.com", name="Tom & Jerry")

        html = make_env().from_string("{{ page | jsonld }}").render(page=webpage)

        assert html == str(webpage.to_html_jsonld())
        assert "\\u0026" in html

    def test_meta_tags_filter(self):
        """Test meta tags render with escaped attribute values."""
        og = new_og_website("Tom & Jerry", url="https://www.example.com")

        html = make_env().from_string("{{ og | meta_tags }}").render(og=og)

        assert html == str(og.to_html_meta_tags())
        assert 'content="Tom &amp; Jerry"' in html

    def test_none_renders_nothing(self):
        """Test missing entities produce empty output."""
        template = make_env().from_string("{{ page | jsonld }}{{ page | meta_tags }}")

        assert template.render(page=None) == ""

    def test_seo_head(self):
        """Test the seo_head global renders every entity and skips None."""
        webpage = new_webpage("https://www.example.com")
        og = new_og_website("Example")

        html = make_env().from_string("{{ seo_head(og, page, none) }}").render(
            og=og, page=webpage, none=None
        )

        assert html == str(og.to_html_meta_tags() + webpage.to_html_jsonld())
