from __future__ import annotations

from datetime import datetime

from styled_page import PythonMarkdownConverter, render


def test_python_markdown_converts_headings_lists_and_code() -> None:
    converter = PythonMarkdownConverter()
    html = converter.convert("## Section\n\n- one\n- two\n\n```\nx = 1\n```")
    assert "<h2>Section</h2>" in html
    assert "<li>one</li>" in html
    assert "<code>x = 1\n</code>" in html


def test_python_markdown_supports_tables_by_default() -> None:
    html = PythonMarkdownConverter().convert("| a | b |\n| --- | --- |\n| 1 | 2 |")
    assert "<table>" in html


def test_extensions_are_configurable() -> None:
    converter = PythonMarkdownConverter(extensions=())
    assert converter.extensions == ()
    assert "<table>" not in converter.convert("| a | b |\n| --- | --- |\n| 1 | 2 |")


def test_render_with_python_markdown_converter() -> None:
    page = render(
        "# Hello\n\nSome *text*.",
        {"title": "Site"},
        converter=PythonMarkdownConverter(),
        clock=lambda: datetime(2025, 1, 1),
    )
    assert "<h1>Hello</h1>" in page
    assert "<em>text</em>" in page
    assert "&copy; 2025 Site." in page
