# blocks/block_tags.py
"""
Plumbing for paired block tags ({% name %} ... {% endname %}).

A BlockHandler only sees the rendered inner text and the template
context; parsing the begin/end pair and rendering the enclosed nodes is
done here, once per occurrence.
"""

from django import template


class BlockHandler:
    """Turns the captured inner text of a block tag into output markup."""

    def render(self, inner_text, context):
        raise NotImplementedError(
            f"{type(self).__name__} must implement render()"
        )


class BlockNode(template.Node):
    def __init__(self, handler, nodelist):
        self.handler = handler
        self.nodelist = nodelist

    def render(self, context):
        # Nested tags and variables are resolved by the template engine
        inner_text = self.nodelist.render(context)
        return self.handler.render(inner_text, context)


def register_block(library, name, handler, end_name=None):
    """
    Register a block tag on a template Library.

    Usage:
        register = template.Library()
        register_block(register, "aside", AsideBlock())

    The tag takes no arguments and is closed by {% end<name> %} unless
    end_name is given. Registering a name twice replaces the earlier tag.
    """
    end_name = end_name or f"end{name}"

    def compile_block(parser, token):
        bits = token.split_contents()
        if len(bits) != 1:
            raise template.TemplateSyntaxError(
                f"'{bits[0]}' tag takes no arguments"
            )

        nodelist = parser.parse((end_name,))
        parser.delete_first_token()

        return BlockNode(handler, nodelist)

    compile_block.__name__ = f"do_{name}"
    library.tag(name, compile_block)
    return compile_block
