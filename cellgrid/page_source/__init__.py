"""
Page Source Module
==================
pdfplumber adapter producing the pipeline's operator list and text runs.
"""

from .adapter import PageContent, build_page_content, load_page_content

__all__ = ['PageContent', 'build_page_content', 'load_page_content']
