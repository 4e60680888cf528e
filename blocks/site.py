# blocks/site.py
"""
Site object holding the configured converter instances.

Block handlers reach converters through a Site, looked up by converter
class, the same way a page build would pick the converter for a file.
"""

import logging
from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

# Template context variable holding the Site for block handlers
SITE_CONTEXT_KEY = "converter_site"

DEFAULT_CONVERTERS = [
    "blocks.converters.MarkdownConverter",
    "blocks.converters.IdentityConverter",
]


class ConverterNotFound(LookupError):
    """Raised when a site has no converter of the requested class."""


class Site:
    def __init__(self, converters=()):
        self._converters = []
        for converter in converters:
            self.add_converter(converter)

    @property
    def converters(self):
        return tuple(self._converters)

    def add_converter(self, converter):
        logger.debug("Registering converter %s", type(converter).__name__)
        self._converters.append(converter)
        return converter

    def find_converter_instance(self, klass):
        """
        Return the first registered converter that is an instance of klass.

        Raises:
            ConverterNotFound: if no registered converter matches
        """
        for converter in self._converters:
            if isinstance(converter, klass):
                return converter
        raise ConverterNotFound(f"No Converters found for {klass.__name__}")

    @classmethod
    def from_settings(cls):
        """Build a site from SITE_CONVERTERS and SITE_CONVERTER_OPTIONS."""
        paths = getattr(settings, "SITE_CONVERTERS", DEFAULT_CONVERTERS)
        options = getattr(settings, "SITE_CONVERTER_OPTIONS", {})

        site = cls()
        for path in paths:
            converter_class = import_string(path)
            site.add_converter(converter_class(options.get(path)))

        logger.debug("Built site with %d converters", len(site.converters))
        return site

    def __repr__(self):
        names = ", ".join(type(c).__name__ for c in self._converters)
        return f"<Site converters=[{names}]>"


@lru_cache(maxsize=1)
def get_default_site():
    """Process-wide site built from settings on first use."""
    return Site.from_settings()


def reset_default_site():
    get_default_site.cache_clear()
