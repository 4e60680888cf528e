# blocks/markdown/renderer.py

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors


def render_markdown(text, context=None):
    """
    Render markdown to HTML with pypandoc, then run the postprocessors

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data
    """
    context = context or {}

    # Nothing for pandoc to do; skip spawning it
    if not text or not text.strip():
        return ""

    pandoc_config = get_pandoc_config()

    html = pypandoc.convert_text(
        text,
        to=pandoc_config["to"],
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
        filters=pandoc_config.get("filters", []),
    )

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    return html
