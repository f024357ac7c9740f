"""Render Markdown documents into complete, styled HTML pages."""

from styled_page.adapters.markdown_converter import PythonMarkdownConverter
from styled_page.config import options_from_env
from styled_page.core.fallback_markdown import ParagraphFallbackConverter, paragraphs_to_html
from styled_page.core.page_renderer import render
from styled_page.domain.options import RenderOptions
from styled_page.domain.ports import MarkdownConverter

__all__ = [
    "MarkdownConverter",
    "ParagraphFallbackConverter",
    "PythonMarkdownConverter",
    "RenderOptions",
    "options_from_env",
    "paragraphs_to_html",
    "render",
]
