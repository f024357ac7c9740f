"""Minimal Markdown fallback: paragraphs and line breaks only."""

from __future__ import annotations

from html import escape


def paragraphs_to_html(text: str) -> str:
    """Convert blank-line separated blocks into escaped `<p>` elements.

    Lines inside a block are joined with `<br/>`. Headings, lists, emphasis,
    links and code are left as literal text.
    """
    html_lines: list[str] = []
    paragraph_buffer: list[str] = []

    def flush_paragraph() -> None:
        """Emit the current paragraph buffer as a single `<p>` block."""
        if paragraph_buffer:
            html_lines.append(f"<p>{'<br/>'.join(paragraph_buffer)}</p>")
            paragraph_buffer.clear()

    for line in text.splitlines():
        if not line.strip():
            flush_paragraph()
            continue
        paragraph_buffer.append(escape(line))

    flush_paragraph()
    return "\n".join(html_lines)


class ParagraphFallbackConverter:
    """`MarkdownConverter` wrapper around `paragraphs_to_html`."""

    name = "fallback.paragraphs"

    def convert(self, text: str) -> str:
        return paragraphs_to_html(text)
