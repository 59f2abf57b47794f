"""
Escaping and tag-writing primitives shared by every entity.

JSON-LD output is produced by a small ordered encoder instead of json.dumps
so that floats keep a fixed decimal precision and strings are escaped for
safe embedding inside a <script> element.
"""

import json
import logging
import math
import secrets
import string
from typing import Any, Callable, TextIO

from markupsafe import Markup

from teseo.config import get_settings
from teseo.core.exceptions import RenderException

logger = logging.getLogger(__name__)

JSONLD_MIME_TYPE = "application/ld+json"
JSONLD_INDENT = 2

# Ratings, coordinates and other float fields always use this precision
FLOAT_PRECISION = 6

# Keys kept in JSON-LD output even when their value is empty
ALWAYS_EMITTED_KEYS = frozenset({"@context", "@type"})

KEY_ALPHABET = string.ascii_letters + string.digits

# Characters that could terminate or confuse the surrounding <script> element
_SCRIPT_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

KeyGenerator = Callable[[], str]


def generate_unique_key(length: int | None = None) -> str:
    """
    Generate a random alphanumeric key for JSON-LD element identifiers.

    Args:
        length: Number of characters. Defaults to settings.UNIQUE_KEY_LENGTH

    Returns:
        Random string drawn from [a-zA-Z0-9]
    """
    length = length or get_settings().UNIQUE_KEY_LENGTH
    return "".join(secrets.choice(KEY_ALPHABET) for _ in range(length))


def format_float(value: float) -> str:
    """
    Format a float with the fixed JSON-LD/meta-tag precision.

    Raises:
        ValueError: If the value is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"Non-finite float {value!r} cannot be rendered")
    return f"{value:.{FLOAT_PRECISION}f}"


def escape_json_string(value: str) -> str:
    """Encode a string as a JSON literal that is safe inside <script>."""
    encoded = json.dumps(value, ensure_ascii=False)
    for char, replacement in _SCRIPT_UNSAFE.items():
        encoded = encoded.replace(char, replacement)
    return encoded


def is_empty(value: Any) -> bool:
    """
    Check whether a value counts as absent for serialization.

    Empty strings, zero numbers, None and empty collections are absent.
    Booleans are never absent.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def prune_empty(value: Any) -> Any:
    """
    Recursively drop absent fields from dumped model data.

    Dictionary keys with absent values are removed except the vocabulary
    context and type discriminator. List elements are kept as they are,
    only nested dictionaries inside them are pruned.
    """
    if isinstance(value, dict):
        pruned = {}
        for key, item in value.items():
            item = prune_empty(item)
            if key in ALWAYS_EMITTED_KEYS or not is_empty(item):
                pruned[key] = item
        return pruned
    if isinstance(value, (list, tuple)):
        return [prune_empty(item) for item in value]
    return value


def encode_jsonld(value: Any, level: int = 0) -> str:
    """
    Encode data as indented JSON in insertion order.

    Args:
        value: dict/list/str/int/float/bool/None tree
        level: Current nesting depth (used for indentation)

    Returns:
        JSON text with two-space indentation

    Raises:
        TypeError: If the tree contains an unsupported value
        ValueError: If the tree contains a NaN or infinite float
    """
    inner = " " * (JSONLD_INDENT * (level + 1))
    outer = " " * (JSONLD_INDENT * level)

    if isinstance(value, dict):
        if not value:
            return "{}"
        members = [
            f"{inner}{escape_json_string(str(key))}: {encode_jsonld(item, level + 1)}"
            for key, item in value.items()
        ]
        return "{\n" + ",\n".join(members) + "\n" + outer + "}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        elements = [f"{inner}{encode_jsonld(item, level + 1)}" for item in value]
        return "[\n" + ",\n".join(elements) + "\n" + outer + "]"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, str):
        return escape_json_string(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON-LD serializable")


def render_jsonld_script(data: dict[str, Any], element_id: str | None = None) -> Markup:
    """
    Wrap JSON-LD data in a <script type="application/ld+json"> element.

    Args:
        data: Pruned JSON-LD data
        element_id: Optional id attribute for component-style output

    Returns:
        The complete script fragment
    """
    if element_id:
        opening = Markup('<script id="{}" type="{}">').format(element_id, JSONLD_MIME_TYPE)
    else:
        opening = Markup('<script type="{}">').format(JSONLD_MIME_TYPE)
    return opening + Markup(f"\n{encode_jsonld(data)}\n</script>")


def format_meta_tag(attribute: str, key: str, content: str) -> Markup:
    """
    Format a single meta tag with HTML-escaped attribute values.

    Args:
        attribute: "property" (OpenGraph) or "name" (Twitter)
        key: Tag key, e.g. "og:title"
        content: Tag content

    Returns:
        A <meta .../> element
    """
    return Markup('<meta {}="{}" content="{}"/>').format(attribute, key, content)


def render_meta_tags(attribute: str, pairs: list[tuple[str, str]]) -> Markup:
    """Render meta tag pairs as newline-terminated <meta> elements."""
    return Markup("").join(
        format_meta_tag(attribute, key, content) + Markup("\n")
        for key, content in pairs
    )


def write_text(writer: TextIO, text: str, what: str) -> None:
    """
    Write rendered text to a sink, surfacing sink failures.

    Raises:
        RenderException: If the sink is closed or the write fails
    """
    try:
        writer.write(str(text))
    except (OSError, ValueError, TypeError) as e:
        logger.warning(f"Failed to write {what}: {e}")
        raise RenderException(
            message=f"Failed to write {what}: {str(e)}",
            details={"output": what},
        ) from e


def write_meta_tag(writer: TextIO, attribute: str, key: str, content: str) -> None:
    """
    Write a single meta tag to a sink. Empty content writes nothing.

    Raises:
        RenderException: If the sink rejects the write
    """
    if not content:
        return
    write_text(writer, format_meta_tag(attribute, key, content) + Markup("\n"), f"{key} meta tag")
