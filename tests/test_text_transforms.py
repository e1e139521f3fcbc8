"""Tests for the text transform pipeline."""

import pytest

from services.errors import ConfigurationError
from services.text_transforms import TextTransformPipeline, filter_xss, filter_xss_strict, html_to_text


@pytest.fixture
def pipeline():
    return TextTransformPipeline()


@pytest.mark.parametrize("name", [None, "", "none"])
def test_identity(pipeline, name):
    assert pipeline.apply(name, "<b>Hi</b>\n") == "<b>Hi</b>\n"
    assert not pipeline.has_transform(name)


def test_strict_filter_strips_all_tags(pipeline):
    assert pipeline.apply("filter_xss_strict", "<b>Hi</b>") == "Hi"


def test_legacy_names_are_accepted(pipeline):
    assert pipeline.apply("filter_xss_all", "<b>Hi</b>") == "Hi"
    assert pipeline.apply("strip_html_to_text", "<p>Hi</p>") == "Hi"


def test_unknown_transform(pipeline):
    with pytest.raises(ConfigurationError, match="rot13"):
        pipeline.apply("rot13", "text")


def test_filter_xss_keeps_allowed_tags():
    result = filter_xss('<p><strong onclick="steal()">Bold</strong> <script>x</script></p>')
    assert result == "<strong>Bold</strong> x"


def test_filter_xss_drops_unsafe_links():
    assert filter_xss('<a href="javascript:alert(1)">go</a>') == "<a>go</a>"
    assert filter_xss('<a href="https://example.com">go</a>') == '<a href="https://example.com">go</a>'


def test_filter_trims_newlines():
    assert filter_xss_strict("\n<p>Hi</p>\n\n") == "Hi"


def test_html_to_text_block_elements():
    html = "<h2>Title</h2><p>First <em>para</em></p><ul><li>one</li><li>two</li></ul>"
    assert html_to_text(html) == "Title\nFirst para\none\ntwo"


def test_html_to_text_line_breaks_and_scripts():
    assert html_to_text("a<br>b<script>alert(1)</script>") == "a\nb"


def test_html_to_text_decodes_entities():
    assert html_to_text("Fish &amp; chips") == "Fish & chips"


@pytest.mark.parametrize("name", ["html_to_text", "filter_xss_strict"])
@pytest.mark.parametrize("text", ["plain text", "two\nlines", "Fish & chips", ""])
def test_idempotent_on_plain_text(pipeline, name, text):
    once = pipeline.apply(name, text)
    assert pipeline.apply(name, once) == once
