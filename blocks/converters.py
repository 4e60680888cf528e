# blocks/converters.py
"""
Text converters registered on a Site.

A converter turns source text into output markup. Converters are looked
up by class, so subclassing MarkdownConverter replaces the Markdown
engine for every block handler that asks for one.
"""

from .markdown.renderer import render_markdown


class Converter:
    """Base converter. Subclasses implement convert()."""

    def __init__(self, config=None):
        self.config = dict(config or {})

    def convert(self, text: str) -> str:
        raise NotImplementedError(
            f"{type(self).__name__} must implement convert()"
        )


class MarkdownConverter(Converter):
    """Markdown to HTML via the pandoc rendering pipeline."""

    def convert(self, text: str) -> str:
        return render_markdown(text, context=dict(self.config.get("context") or {}))


class IdentityConverter(Converter):
    """Passes text through unchanged."""

    def convert(self, text: str) -> str:
        return text
