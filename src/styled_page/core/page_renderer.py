"""Page renderer: Markdown body plus escaped chrome in one HTML document."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from html import escape
from typing import Any
from urllib.parse import quote

from styled_page.core.fallback_markdown import paragraphs_to_html
from styled_page.core.stylesheet import DEFAULT_CSS_HREF, PAGE_STYLESHEET
from styled_page.domain.options import RenderOptions
from styled_page.domain.ports import MarkdownConverter

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def convert_body(markdown: str, converter: MarkdownConverter | None = None) -> str:
    """Convert the page body, falling back to paragraph splitting.

    A converter that raises or returns `None` is logged and replaced by the
    fallback output so callers always get HTML back.
    """
    if converter is None:
        logger.debug("page.convert converter=fallback.paragraphs")
        return paragraphs_to_html(markdown)
    converter_name = getattr(converter, "name", type(converter).__name__)
    try:
        html_body = converter.convert(markdown)
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "page.convert converter=%s failed error=%s; using fallback.paragraphs",
            converter_name,
            exc,
        )
        return paragraphs_to_html(markdown)
    if html_body is None:
        logger.warning(
            "page.convert converter=%s returned no output; using fallback.paragraphs",
            converter_name,
        )
        return paragraphs_to_html(markdown)
    logger.debug("page.convert converter=%s", converter_name)
    return str(html_body)


def stylesheet_href(options: RenderOptions) -> str:
    """Return the linked stylesheet reference, defaulting to `styles.css`."""
    if options.css_href:
        return options.css_href
    if options.css_version:
        return f"{DEFAULT_CSS_HREF}?v={quote(options.css_version, safe='')}"
    return DEFAULT_CSS_HREF


def build_head_styles(options: RenderOptions) -> str:
    lines: list[str] = []
    if options.font_href:
        lines.append(f'  <link href="{escape(options.font_href)}" rel="stylesheet" />')
    if options.style_mode == "linked":
        lines.append(f"  <link rel='stylesheet' href='{escape(stylesheet_href(options))}' />")
    else:
        lines.append(f"  <style>\n{PAGE_STYLESHEET}  </style>")
    return "\n".join(lines)


def build_quotes(quotes: tuple[str, ...]) -> str:
    """Render up to two quote lines; the second gets the delayed `q2` class."""
    lines: list[str] = []
    if len(quotes) > 0 and quotes[0]:
        lines.append(f"    <p>{escape(quotes[0])}</p>")
    if len(quotes) > 1 and quotes[1]:
        lines.append(f'    <p class="q2">{escape(quotes[1])}</p>')
    if not lines:
        return ""
    body = "\n".join(lines)
    return f'  <div class="quote">\n{body}\n  </div>\n'


def build_page(body_html: str, options: RenderOptions, *, year: int) -> str:
    """Wrap converted Markdown in the full page template."""
    title = escape(options.title)
    heading = '<h1 class="shimmer">' if options.shimmer_title else "<h1>"
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{title}</title>
{build_head_styles(options)}
</head>
<body>
  <header>
    {heading}{title}</h1>
  </header>
  <main class="container">
{body_html}
  </main>
{build_quotes(options.quotes)}  <footer>
    <p>&copy; {year} {title}. All rights reserved.</p>
  </footer>
</body>
</html>
"""


def render(
    markdown: str | None = "",
    options: RenderOptions | Mapping[str, Any] | None = None,
    *,
    converter: MarkdownConverter | None = None,
    clock: Clock | None = None,
) -> str:
    """Render Markdown into a complete, styled HTML document.

    `options` may be a `RenderOptions`, a mapping with snake_case or camelCase
    keys, or `None`. `converter` handles the body when given; otherwise the
    paragraph fallback is used. `clock` supplies the copyright year and
    defaults to the local system time.
    """
    resolved = RenderOptions.from_value(options)
    text = "" if markdown is None else str(markdown)
    now = clock() if clock is not None else datetime.now()
    body_html = convert_body(text, converter)
    return build_page(body_html, resolved, year=now.year)
