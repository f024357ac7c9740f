"""Markdown converter backed by the Python-Markdown package."""

from __future__ import annotations

from collections.abc import Sequence

import markdown

DEFAULT_EXTENSIONS: tuple[str, ...] = ("fenced_code", "tables")


class PythonMarkdownConverter:
    """Full Markdown conversion through `markdown.markdown`.

    A new parser is built on every call, so one instance can be shared
    between threads.
    """

    name = "python-markdown"

    def __init__(self, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> None:
        self.extensions = tuple(extensions)

    def convert(self, text: str) -> str:
        return markdown.markdown(text, extensions=list(self.extensions))
