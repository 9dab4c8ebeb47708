from counseling_site.classes.html_builder import HtmlBuilder, render_components

DOCTYPE = '<!DOCTYPE html>'


# --- StyleSheet Entity ---
class StyleSheet:
    def __init__(self, name, css):
        self.name = name
        self.css = css

    def render(self, builder):
        with builder.tag('style'):
            builder.raw(self.css)


# --- HeadLink Entity ---
class HeadLink:
    def __init__(self, rel, href, crossorigin=None):
        self.rel = rel
        self.href = href
        self.crossorigin = crossorigin

    def render(self, builder):
        builder.open('link', rel=self.rel, href=self.href, crossorigin=self.crossorigin)


# --- Page Entity ---
class Page:
    """
    One full HTML document: a title, a stylesheet, extra head links and
    the body sections in display order. Built per request, then discarded.
    """
    def __init__(self, title, stylesheet, sections, head_links=()):
        self.title = title
        self.stylesheet = stylesheet
        self.sections = tuple(sections)
        self.head_links = tuple(head_links)

    def render(self):
        """Assembles the document and returns it as a string."""
        b = HtmlBuilder()
        b.raw(DOCTYPE)
        with b.tag('html', lang='en'):
            with b.tag('head'):
                b.open('meta', charset='UTF-8')
                b.element('title', self.title)
                b.open('meta', name='viewport', content='width=device-width, initial-scale=1.0')
                render_components(b, *self.head_links)
                self.stylesheet.render(b)
            with b.tag('body'):
                render_components(b, *self.sections)
        return b.to_html()
