"""Typed render options shared by the page renderer and its callers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TITLE = "Ashley Ye"
DEFAULT_FONT_HREF = (
    "https://fonts.googleapis.com/css2?family=Playfair+Display:wght@400;500;600&display=swap"
)
MAX_QUOTES = 2
FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})

StyleMode = Literal["inline", "linked"]


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    # Blank means unset; anything else is kept as given.
    return text if text.strip() else None


class RenderOptions(BaseModel):
    """Page-level settings for one render call.

    Values are coerced rather than rejected: unknown keys are ignored, `None`
    falls back to the field default, and camelCase aliases are accepted next
    to the snake_case field names.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    title: str = DEFAULT_TITLE
    quotes: tuple[str, ...] = ()
    shimmer_title: bool = Field(default=True, alias="shimmerTitle")
    style_mode: StyleMode = Field(default="inline", alias="styleMode")
    css_href: str | None = Field(default=None, alias="cssHref")
    css_version: str | None = Field(default=None, alias="cssVersion")
    font_href: str | None = Field(default=DEFAULT_FONT_HREF, alias="fontHref")

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> str:
        if value is None:
            return DEFAULT_TITLE
        return str(value)

    @field_validator("quotes", mode="before")
    @classmethod
    def _coerce_quotes(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, Iterable):
            return (str(value),)
        lines = ["" if item is None else str(item) for item in value]
        return tuple(lines[:MAX_QUOTES])

    @field_validator("shimmer_title", mode="before")
    @classmethod
    def _coerce_shimmer(cls, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return value.strip().lower() not in FALSE_STRINGS
        return bool(value)

    @field_validator("style_mode", mode="before")
    @classmethod
    def _coerce_style_mode(cls, value: Any) -> str:
        normalized = str(value or "").strip().lower()
        if normalized == "linked":
            return "linked"
        return "inline"

    @field_validator("css_href", "css_version", "font_href", mode="before")
    @classmethod
    def _coerce_optional_text(cls, value: Any) -> str | None:
        return _optional_text(value)

    @classmethod
    def from_value(cls, value: RenderOptions | Mapping[str, Any] | None) -> RenderOptions:
        """Accept an options instance, a plain mapping, or nothing."""
        if isinstance(value, RenderOptions):
            return value
        if not value:
            return cls()
        return cls.model_validate(dict(value))
