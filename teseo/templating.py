"""
Jinja2 integration.

Registers filters that render entities inside templates:

    {{ webpage | jsonld }}
    {{ og_profile | meta_tags }}
    {{ seo_head(webpage, breadcrumbs, twitter_card) }}

Works with a plain jinja2.Environment as well as with FastAPI's
Jinja2Templates(...).env. Output is Markup, so autoescaping leaves it intact.
"""

from jinja2 import Environment
from markupsafe import Markup

from teseo.bundle import SEOBundle
from teseo.core.contracts import Renderable


def jsonld_filter(entity: Renderable | None) -> Markup:
    """Render an entity's JSON-LD block; None renders nothing."""
    if entity is None:
        return Markup("")
    return entity.to_html_jsonld()


def meta_tags_filter(entity: Renderable | None) -> Markup:
    """Render an entity's meta tags; None renders nothing."""
    if entity is None:
        return Markup("")
    return entity.to_html_meta_tags()


def seo_head(*entities: Renderable | None) -> Markup:
    """Render meta tags and JSON-LD for every given entity, skipping None."""
    return SEOBundle(entity for entity in entities if entity is not None).render_head()


def register_jinja_filters(env: Environment) -> Environment:
    """
    Add the teseo filters and globals to a Jinja2 environment.

    Args:
        env: Environment to extend (modified in place)

    Returns:
        The same environment
    """
    env.filters["jsonld"] = jsonld_filter
    env.filters["meta_tags"] = meta_tags_filter
    env.globals["seo_head"] = seo_head
    return env
