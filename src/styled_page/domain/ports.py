"""Ports for Markdown conversion."""

from __future__ import annotations

from typing import Protocol


class MarkdownConverter(Protocol):
    """Turns Markdown text into an HTML fragment."""

    def convert(self, text: str) -> str:
        ...
