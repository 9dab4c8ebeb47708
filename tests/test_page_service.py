"""Tests for page assembly and the stylesheet loader."""

import logging

import pytest

from counseling_site.models.entities.page import HeadLink, Page, StyleSheet
from counseling_site.services.page_service import BasicPageService, CounselingPageService
from counseling_site.utils.style_loader import load_stylesheet


class TestPage:
    def test_document_layout(self) -> None:
        class Hello:
            def render(self, b):
                b.element('p', 'hi')

        page = Page('T', StyleSheet('s', 'p{}'), [Hello()], head_links=[HeadLink('icon', '/i.png')])
        assert page.render() == (
            '<!DOCTYPE html><html lang="en"><head><meta charset="UTF-8"><title>T</title>'
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">'
            '<link rel="icon" href="/i.png"><style>p{}</style></head>'
            '<body><p>hi</p></body></html>'
        )


class TestCounselingPageService:
    def test_uses_given_stylesheet(self) -> None:
        html = CounselingPageService(StyleSheet('test', '.marker{}')).generate_home_page()
        assert '<style>.marker{}</style>' in html

    def test_services_dropdown(self) -> None:
        html = CounselingPageService(StyleSheet('test', '')).generate_home_page()
        assert '<a href="/services" class="dropdown-toggle">Services <span>▾</span></a>' in html
        assert html.count('class="benefit-item"') == 11


class TestBasicPageService:
    def test_pages_differ_only_where_expected(self) -> None:
        service = BasicPageService()
        about, contact = service.generate_about_page(), service.generate_contact_page()
        assert 'About Us' in about and '<form' not in about
        assert '<form' in contact and 'About Us' not in contact


class TestStyleLoader:
    def test_loads_home_stylesheet(self) -> None:
        sheet = load_stylesheet('home')
        assert sheet.name == 'home'
        assert '.hero-section' in sheet.css

    def test_logs_size(self, tmp_path, caplog) -> None:
        (tmp_path / 'tiny.css').write_text('a{}', encoding='utf-8')
        with caplog.at_level(logging.DEBUG, logger='counseling_site.utils.style_loader'):
            sheet = load_stylesheet('tiny', styles_dir=tmp_path)
        assert sheet.css == 'a{}'
        assert 'Loaded stylesheet tiny.css (3 bytes)' in caplog.text

    def test_missing_stylesheet_fails(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_stylesheet('nope', styles_dir=tmp_path)
