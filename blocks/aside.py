from django.utils.safestring import mark_safe

from .block_tags import BlockHandler
from .converters import MarkdownConverter
from .site import SITE_CONTEXT_KEY, Site, get_default_site


class AsideBlock(BlockHandler):
    """Renders the enclosed Markdown inside <div class="aside">."""

    def render(self, inner_text, context):
        site = context.get(SITE_CONTEXT_KEY)
        if not isinstance(site, Site):
            site = get_default_site()
        converter = site.find_converter_instance(MarkdownConverter)
        output = converter.convert(inner_text)
        return mark_safe(f'<div class="aside">{output}</div>')
