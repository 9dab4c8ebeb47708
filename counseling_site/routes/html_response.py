"""
File: html_response.py
Purpose: Turns a page generator into a text/html response, wrapping failures with context.
"""
from flask import Response

from counseling_site.errors import PageRenderError


def write_html(page_name, generate_page):
    """Calls generate_page() and returns its document as the response body."""
    try:
        html = generate_page()
        return Response(html, status=200, mimetype='text/html')
    except Exception as err:
        raise PageRenderError(page_name) from err
