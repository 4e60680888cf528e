# blocks/templatetags/aside_tags.py

from django import template

from blocks.aside import AsideBlock
from blocks.block_tags import register_block

register = template.Library()

"""
Usage in templates:

    {% load aside_tags %}
    {% aside %}
    Markdown shown **beside** the main text.
    {% endaside %}

The library can also be listed in TEMPLATES OPTIONS "builtins" so that
no {% load %} is needed.
"""

register_block(register, "aside", AsideBlock())
