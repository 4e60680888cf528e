from django.conf import settings

PANDOC_FROM = (
    "markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists"
    "+smart+pipe_tables+grid_tables+definition_lists+footnotes"
    "+fenced_code_blocks+fenced_code_attributes+raw_html+header_attributes"
    "+implicit_header_references+fancy_lists+tex_math_dollars"
)


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Defaults enable the Pandoc markdown extensions a site's prose relies on
    (tables, footnotes, task lists, math). The MARKDOWN_PANDOC setting may
    override "format", "to", "extra_args" and "filters".
    """
    config = {
        "format": PANDOC_FROM,
        "to": "html5",
        "extra_args": [
            # Math rendering with MathJax
            "--mathjax",
            # Keep long lines as written
            "--wrap=preserve",
        ],
        # Pandoc filters can be added here (Python or Lua filters)
        "filters": [],
    }
    config.update(getattr(settings, "MARKDOWN_PANDOC", {}) or {})
    return config
