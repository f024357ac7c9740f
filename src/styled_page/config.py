"""Environment-driven render defaults for composition roots."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from styled_page.domain.options import RenderOptions

ENV_PREFIX = "STYLED_PAGE_"
QUOTE_SEPARATOR = "|"

_ENV_FIELDS = {
    "TITLE": "title",
    "SHIMMER_TITLE": "shimmer_title",
    "STYLE_MODE": "style_mode",
    "CSS_HREF": "css_href",
    "CSS_VERSION": "css_version",
    "FONT_HREF": "font_href",
}


def options_from_env(environ: Mapping[str, str] | None = None) -> RenderOptions:
    """Build `RenderOptions` from `STYLED_PAGE_*` variables.

    Unset variables keep the model defaults. `STYLED_PAGE_QUOTES` holds up to
    two quote lines separated by `|`; empty parts are dropped.
    """
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        raw = env.get(f"{ENV_PREFIX}{suffix}")
        if raw is None:
            continue
        # A blank font href disables the web font link; other blanks mean unset.
        if raw.strip() or field_name == "font_href":
            values[field_name] = raw
    raw_quotes = env.get(f"{ENV_PREFIX}QUOTES", "").strip()
    if raw_quotes:
        parts = [part.strip() for part in raw_quotes.split(QUOTE_SEPARATOR)]
        values["quotes"] = [part for part in parts if part]
    return RenderOptions.model_validate(values)
