"""Render options contract and converter port."""

from styled_page.domain.options import DEFAULT_TITLE, RenderOptions
from styled_page.domain.ports import MarkdownConverter

__all__ = ["DEFAULT_TITLE", "MarkdownConverter", "RenderOptions"]
