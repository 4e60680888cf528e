# blocks/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)

GLOBAL_ATTRIBUTES = {"class", "id", "title", "role"}


def _allow_global_attribute(tag, name, value):
    """Attributes allowed on every tag, including data-* and aria-*."""
    return name in GLOBAL_ATTRIBUTES or name.startswith(("data-", "aria-"))


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "section",
            "cite",
            "mark",
            "ins",
            "del",
            "sup",  # superscript (for footnotes)
            "sub",  # subscript
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            # tables
            "table",
            "thead",
            "tbody",
            "tr",
            "th",
            "td",
            "caption",
            "colgroup",
            "col",
            # media
            "img",
            "figure",
            "figcaption",
            # forms (for task lists)
            "input",
            "label",
            # semantic
            "time",
            "abbr",
        }
    )

    allowed_attrs = {
        "*": _allow_global_attribute,
        "a": ["href", "title", "rel", "target", "class", "id", "role"],
        "img": ["src", "alt", "title", "width", "height", "loading"],
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "input": ["type", "checked", "disabled"],
        "time": ["datetime"],
        "abbr": ["title"],
        "ol": ["start", "type", "class"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor and should run before any other HTML modifications.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    sanitized = bleach.clean(
        html,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        strip=False,  # Keep disallowed tags escaped rather than dropped
    )
    logger.debug("Sanitized %d characters of HTML", len(html))
    return sanitized
