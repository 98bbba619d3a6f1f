"""Unit tests for fragment building and escaping."""

import pytest

from markupsafe import Markup

from woo_category_widget.utils.colors import card_style, resolve_color
from woo_category_widget.utils.html import element, esc_url, style


@pytest.mark.unit
class TestEscUrl:
    """Tests for esc_url."""

    def test_keeps_https_url(self):
        assert esc_url("https://site/cat/shoes") == "https://site/cat/shoes"

    def test_keeps_relative_url(self):
        assert esc_url("/uploads/a.png") == "/uploads/a.png"

    def test_drops_javascript_scheme(self):
        assert esc_url("javascript:alert(1)") == ""
        assert esc_url("  JavaScript:alert(1)") == ""

    def test_encodes_spaces(self):
        assert esc_url("https://site/my image.png") == "https://site/my%20image.png"

    def test_empty_and_none(self):
        assert esc_url("") == ""
        assert esc_url(None) == ""
        assert esc_url("   ") == ""

    def test_bare_host_gets_http_prefix(self):
        assert esc_url("example.com/shop") == "http://example.com/shop"

    def test_host_with_port_and_no_scheme_is_dropped(self):
        assert esc_url("localhost:8080/x") == ""

    def test_php_file_stays_relative(self):
        assert esc_url("index.php?p=1") == "index.php?p=1"

    def test_fragment_and_query_stay_relative(self):
        assert esc_url("#top") == "#top"
        assert esc_url("?page=2") == "?page=2"


@pytest.mark.unit
class TestElement:
    """Tests for element."""

    def test_escapes_text_children(self):
        result = element("h2", None, "<script>alert(1)</script>")
        assert result == "<h2>&lt;script&gt;alert(1)&lt;/script&gt;</h2>"

    def test_escapes_attribute_values(self):
        result = element("img", {"alt": 'a "quoted" <b>'})
        assert result == '<img alt="a &#34;quoted&#34; &lt;b&gt;">'

    def test_url_attributes_are_cleaned(self):
        result = element("a", {"href": "javascript:alert(1)"}, "x")
        assert result == '<a href="">x</a>'

    def test_nested_markup_is_not_escaped_twice(self):
        inner = element("span", None, "a & b")
        result = element("p", None, inner)
        assert result == "<p><span>a &amp; b</span></p>"

    def test_none_attributes_are_omitted(self):
        assert element("div", {"class": None, "id": "x"}) == '<div id="x"></div>'

    def test_void_elements_have_no_closing_tag(self):
        assert element("img", {"src": "/a.png"}) == '<img src="/a.png">'

    def test_returns_markup(self):
        assert isinstance(element("p", None, "x"), Markup)

    def test_integer_children(self):
        assert element("p", None, 42) == "<p>42</p>"


@pytest.mark.unit
class TestStyles:
    """Tests for style composition and color fallbacks."""

    def test_style_joins_declarations(self):
        assert style(("color", "red"), ("margin", "0")) == "color: red; margin: 0;"

    def test_resolve_color_fallbacks(self):
        assert resolve_color(None, "#000000") == "#000000"
        assert resolve_color("", "#ffffff") == "#ffffff"
        assert resolve_color("#123456", "#ffffff") == "#123456"

    def test_card_style_prefixes_colors(self):
        result = card_style("#112233", "#ffffff")
        assert "background-color: #112233;" in result
        assert "color: #ffffff;" in result
        assert result.startswith("display: flex;")
