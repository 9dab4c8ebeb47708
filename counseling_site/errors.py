"""
File: errors.py
Purpose: Exception hierarchy shared by the builder, page services and routes.
"""


class SiteError(Exception):
    """Base for all site-specific errors."""


class MarkupNestingError(SiteError):
    """
    Raised when builder calls do not nest properly.
    This is a logic error in the calling section, never a runtime fault.
    """


class PageRenderError(SiteError):
    """Raised when a page could not be produced or written to the response."""

    def __init__(self, page_name, message=None):
        self.page_name = page_name
        super().__init__(message or f"failed to write {page_name} page HTML")


class UnknownSiteError(SiteError):
    """Raised when create_app is asked for a site variant that does not exist."""
