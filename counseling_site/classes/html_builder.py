"""
File: html_builder.py
Purpose: Small markup builder used by every section to write HTML into one buffer.
"""
from contextlib import contextmanager

from markupsafe import escape

from counseling_site.errors import MarkupNestingError

VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'source', 'track', 'wbr',
})


def _attr_name(name):
    # class_ -> class, aria_label -> aria-label
    return name.rstrip('_').replace('_', '-')


def format_attrs(attrs=None, **kwargs):
    """Serializes attributes in insertion order. True is bare, None/False is dropped."""
    merged = dict(attrs or {})
    merged.update({_attr_name(k): v for k, v in kwargs.items()})

    parts = []
    for name, value in merged.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f' {name}')
        else:
            parts.append(f' {name}="{escape(value)}"')
    return ''.join(parts)


class HtmlBuilder:
    """
    Accumulates markup into a list buffer.
    Sections call open/close (or the tag() context manager), text and element;
    to_html() joins the buffer once everything has been closed.
    """
    def __init__(self):
        self._buffer = []
        self._open_tags = []

    # --- Nodes ---
    def open(self, tag, attrs=None, **kwargs):
        """Opens a node. Void elements are written whole and never stay open."""
        self._buffer.append(f'<{tag}{format_attrs(attrs, **kwargs)}>')
        if tag not in VOID_ELEMENTS:
            self._open_tags.append(tag)
        return self

    def close(self, tag):
        """Closes the innermost open node, which must be `tag`."""
        if not self._open_tags:
            raise MarkupNestingError(f"cannot close <{tag}>: no element is open")
        current = self._open_tags[-1]
        if current != tag:
            raise MarkupNestingError(f"cannot close <{tag}>: innermost open element is <{current}>")
        self._open_tags.pop()
        self._buffer.append(f'</{tag}>')
        return self

    @contextmanager
    def tag(self, tag, attrs=None, **kwargs):
        self.open(tag, attrs, **kwargs)
        yield self
        if tag not in VOID_ELEMENTS:
            self.close(tag)

    def element(self, tag, text=None, attrs=None, **kwargs):
        """Writes a leaf node with optional escaped text content."""
        self.open(tag, attrs, **kwargs)
        if tag in VOID_ELEMENTS:
            return self
        if text is not None:
            self.text(text)
        return self.close(tag)

    # --- Content ---
    def text(self, content):
        self._buffer.append(str(escape(content)))
        return self

    def raw(self, markup):
        """Appends trusted markup as-is (style payloads, the doctype)."""
        self._buffer.append(str(markup))
        return self

    # --- Output ---
    def to_html(self):
        if self._open_tags:
            unclosed = ', '.join(f'<{t}>' for t in self._open_tags)
            raise MarkupNestingError(f"unclosed elements at end of document: {unclosed}")
        return ''.join(self._buffer)

    def __str__(self):
        return self.to_html()


def render_components(builder, *components):
    """Renders each component into the builder, in order."""
    for component in components:
        component.render(builder)
    return builder
