"""
Django settings for SiteBuild.

Only what the template layer needs: the blocks app, the template engine
with the aside tag library as a builtin, converter and Markdown options.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "sitebuild-insecure-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "blocks",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "blocks.context_processors.site",
            ],
            # Tag libraries available without {% load %}
            "builtins": [
                "blocks.templatetags.aside_tags",
            ],
        },
    },
]

# Converter classes the site instantiates, in lookup order
SITE_CONVERTERS = [
    "blocks.converters.MarkdownConverter",
    "blocks.converters.IdentityConverter",
]

# Per-converter options, keyed by dotted path
SITE_CONVERTER_OPTIONS = {}

# Overrides merged into blocks.markdown.config.get_pandoc_config()
MARKDOWN_PANDOC = {}

# Links under this prefix are not treated as external
MARKDOWN_SITE_URL = os.environ.get("SITE_URL", "")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "blocks": {
            "handlers": ["console"],
            "level": os.environ.get("BLOCKS_LOG_LEVEL", "INFO"),
        },
    },
}
