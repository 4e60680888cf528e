"""Tests for the {% aside %} block tag."""

from __future__ import annotations

import pytest
from django.template import Context, Engine, TemplateSyntaxError, engines
from django.test import RequestFactory, override_settings

from blocks.aside import AsideBlock
from blocks.site import SITE_CONTEXT_KEY, ConverterNotFound, Site
from tests.fakes import BrokenConverter, RecordingConverter


def _render(source: str, registry: Site | None = None, **extra) -> str:
    template = engines["django"].from_string(source)
    context = dict(extra)
    if registry is not None:
        context[SITE_CONTEXT_KEY] = registry
    return template.render(context)


def _site(**outputs) -> tuple[Site, RecordingConverter]:
    converter = RecordingConverter({"outputs": outputs})
    return Site([converter]), converter


def test_bold_markdown_is_wrapped_once() -> None:
    site, _ = _site(**{"**bold**": "<p><strong>bold</strong></p>"})

    out = _render("{% aside %}**bold**{% endaside %}", site)

    assert out == '<div class="aside"><p><strong>bold</strong></p></div>'


def test_empty_block_still_calls_converter_and_wraps() -> None:
    site, converter = _site(**{"": "<!-- empty -->"})

    out = _render("{% aside %}{% endaside %}", site)

    assert converter.calls == [""]
    assert out == '<div class="aside"><!-- empty --></div>'


def test_inner_text_is_captured_once_and_passed_literally() -> None:
    site, converter = _site()

    _render("{% aside %}\n  * item\n{% endaside %}", site)

    assert converter.calls == ["\n  * item\n"]


def test_nested_template_markup_is_resolved_before_conversion() -> None:
    site, converter = _site()

    out = _render(
        "{% aside %}Hi {{ name }}{% if show %}!{% endif %}{% endaside %}",
        site,
        name="Ada",
        show=True,
    )

    assert converter.calls == ["Hi Ada!"]
    assert out == '<div class="aside"><p>Hi Ada!</p></div>'


def test_surrounding_output_is_untouched() -> None:
    site, _ = _site(x="<p>x</p>")

    out = _render("<main>{% aside %}x{% endaside %}</main>", site)

    assert out == '<main><div class="aside"><p>x</p></div></main>'


def test_same_input_renders_identically() -> None:
    site, _ = _site()
    source = "{% aside %}same{% endaside %}"

    assert _render(source, site) == _render(source, site)


def test_converter_output_is_not_escaped() -> None:
    site, _ = _site(raw="<script>x()</script>")

    out = _render("{% aside %}raw{% endaside %}", site)

    assert out == '<div class="aside"><script>x()</script></div>'


def test_lookup_failure_propagates() -> None:
    with pytest.raises(ConverterNotFound, match="MarkdownConverter"):
        _render("{% aside %}x{% endaside %}", Site())


def test_converter_failure_propagates() -> None:
    with pytest.raises(ValueError, match="malformed input"):
        _render("{% aside %}x{% endaside %}", Site([BrokenConverter()]))


def test_tag_rejects_arguments() -> None:
    with pytest.raises(TemplateSyntaxError, match="takes no arguments"):
        engines["django"].from_string("{% aside wide %}x{% endaside %}")


def test_unclosed_tag_is_a_syntax_error() -> None:
    with pytest.raises(TemplateSyntaxError):
        engines["django"].from_string("{% aside %}x")


def test_engine_without_library_does_not_know_the_tag() -> None:
    engine = Engine()

    with pytest.raises(TemplateSyntaxError, match="aside"):
        engine.from_string("{% aside %}x{% endaside %}")


def test_load_makes_tag_available() -> None:
    engine = Engine(libraries={"aside_tags": "blocks.templatetags.aside_tags"})
    site, _ = _site(x="<p>x</p>")

    template = engine.from_string("{% load aside_tags %}{% aside %}x{% endaside %}")

    assert template.render(Context({SITE_CONTEXT_KEY: site})) == '<div class="aside"><p>x</p></div>'


@override_settings(
    SITE_CONVERTERS=["tests.fakes.RecordingConverter"],
    SITE_CONVERTER_OPTIONS={"tests.fakes.RecordingConverter": {"outputs": {"x": "<p>X</p>"}}},
)
def test_request_context_uses_default_site() -> None:
    template = engines["django"].from_string("{% aside %}x{% endaside %}")

    out = template.render({}, request=RequestFactory().get("/"))

    assert out == '<div class="aside"><p>X</p></div>'


@override_settings(SITE_CONVERTERS=["tests.fakes.RecordingConverter"])
def test_default_site_used_without_site_in_context() -> None:
    assert _render("{% aside %}y{% endaside %}") == '<div class="aside"><p>y</p></div>'


def test_handler_can_be_called_directly() -> None:
    site, _ = _site(z="<p>z</p>")

    out = AsideBlock().render("z", Context({SITE_CONTEXT_KEY: site}))

    assert out == '<div class="aside"><p>z</p></div>'


class SitesFrameworkSite:
    """Shaped like django.contrib.sites' Site, which templates often expose as `site`."""

    domain = "example.com"
    name = "Example"


@override_settings(SITE_CONVERTERS=["tests.fakes.RecordingConverter"])
def test_unrelated_site_variable_is_ignored() -> None:
    out = _render("{% aside %}x{% endaside %}{{ site.domain }}", site=SitesFrameworkSite())

    assert out == '<div class="aside"><p>x</p></div>example.com'


@override_settings(SITE_CONVERTERS=["tests.fakes.RecordingConverter"])
def test_non_site_value_under_converter_key_falls_back_to_default() -> None:
    out = _render("{% aside %}x{% endaside %}", **{SITE_CONTEXT_KEY: "not a site"})

    assert out == '<div class="aside"><p>x</p></div>'
