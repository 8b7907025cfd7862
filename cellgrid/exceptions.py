"""
Errors raised at the page-source boundary.

The geometry stages never raise: malformed drawing input is skipped.
Only loading a page from a PDF file can fail.
"""


class PageSourceError(Exception):
    """Base class for failures while reading a page from a document."""


class PDFNotReadable(PageSourceError):
    """Raised when the file is missing or pdfplumber cannot parse it."""


class PageOutOfRange(PageSourceError):
    """Raised when the requested page number is not in the document."""
