"""Tests for the markup builder."""

import pytest

from counseling_site.classes.html_builder import HtmlBuilder, format_attrs, render_components
from counseling_site.errors import MarkupNestingError


class TestAttributes:
    def test_keyword_names_are_normalized(self) -> None:
        assert format_attrs(class_='nav', aria_label='Main') == ' class="nav" aria-label="Main"'

    def test_true_is_bare_and_none_is_dropped(self) -> None:
        assert format_attrs(required=True, hidden=False, title=None) == ' required'

    def test_empty_string_is_kept(self) -> None:
        assert format_attrs(crossorigin='') == ' crossorigin=""'

    def test_values_are_escaped(self) -> None:
        assert format_attrs(title='"a" & <b>') == ' title="&#34;a&#34; &amp; &lt;b&gt;"'

    def test_dict_attrs_come_before_keywords(self) -> None:
        assert format_attrs({'data-id': 3}, class_='x') == ' data-id="3" class="x"'


class TestBuilder:
    def test_nested_tags(self) -> None:
        b = HtmlBuilder()
        with b.tag('div', class_='container'):
            b.element('h1', 'Hello')
            b.element('p', 'World')
        assert b.to_html() == '<div class="container"><h1>Hello</h1><p>World</p></div>'

    def test_void_elements_are_not_left_open(self) -> None:
        b = HtmlBuilder()
        with b.tag('div'):
            b.open('img', src='/logo.png', alt='Logo')
            b.open('br')
        assert str(b) == '<div><img src="/logo.png" alt="Logo"><br></div>'

    def test_text_is_escaped(self) -> None:
        b = HtmlBuilder()
        b.element('p', 'Terms & <Conditions>')
        assert b.to_html() == '<p>Terms &amp; &lt;Conditions&gt;</p>'

    def test_raw_is_not_escaped(self) -> None:
        b = HtmlBuilder()
        with b.tag('style'):
            b.raw("body { font-family: 'Open Sans'; }")
        assert b.to_html() == "<style>body { font-family: 'Open Sans'; }</style>"

    def test_element_without_text(self) -> None:
        b = HtmlBuilder()
        b.element('textarea', name='message')
        assert b.to_html() == '<textarea name="message"></textarea>'

    def test_mismatched_close_raises(self) -> None:
        b = HtmlBuilder()
        b.open('div').open('span')
        with pytest.raises(MarkupNestingError, match='innermost open element is <span>'):
            b.close('div')

    def test_close_with_nothing_open_raises(self) -> None:
        with pytest.raises(MarkupNestingError):
            HtmlBuilder().close('div')

    def test_unclosed_element_fails_serialization(self) -> None:
        b = HtmlBuilder()
        b.open('section')
        with pytest.raises(MarkupNestingError, match='<section>'):
            b.to_html()


class TestRenderComponents:
    def test_components_render_in_order(self) -> None:
        class Heading:
            def __init__(self, text):
                self.text = text

            def render(self, b):
                b.element('h2', self.text)

        b = render_components(HtmlBuilder(), Heading('one'), Heading('two'))
        assert b.to_html() == '<h2>one</h2><h2>two</h2>'
