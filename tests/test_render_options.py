from __future__ import annotations

import pytest
from pydantic import ValidationError

from styled_page.domain.options import DEFAULT_FONT_HREF, DEFAULT_TITLE, RenderOptions


def test_defaults() -> None:
    options = RenderOptions()
    assert options.title == DEFAULT_TITLE == "Ashley Ye"
    assert options.quotes == ()
    assert options.shimmer_title is True
    assert options.style_mode == "inline"
    assert options.css_href is None
    assert options.css_version is None
    assert options.font_href == DEFAULT_FONT_HREF


def test_camel_case_and_snake_case_keys_are_accepted() -> None:
    camel = RenderOptions.model_validate({"shimmerTitle": False, "cssHref": "/a.css"})
    snake = RenderOptions.model_validate({"shimmer_title": False, "css_href": "/a.css"})
    assert camel == snake
    assert camel.shimmer_title is False
    assert camel.css_href == "/a.css"


def test_malformed_values_are_coerced() -> None:
    options = RenderOptions.model_validate(
        {
            "title": 42,
            "quotes": "solo",
            "shimmerTitle": "off",
            "styleMode": "fancy",
            "cssHref": "   ",
            "unknown": "ignored",
        }
    )
    assert options.title == "42"
    assert options.quotes == ("solo",)
    assert options.shimmer_title is False
    assert options.style_mode == "inline"
    assert options.css_href is None


def test_none_values_fall_back_to_defaults() -> None:
    options = RenderOptions.model_validate({"title": None, "quotes": None, "shimmerTitle": None})
    assert options.title == DEFAULT_TITLE
    assert options.quotes == ()
    assert options.shimmer_title is True


def test_quotes_are_truncated_to_two_lines() -> None:
    options = RenderOptions(quotes=["a", "b", "c"])
    assert options.quotes == ("a", "b")


def test_from_value_accepts_instance_mapping_or_none() -> None:
    instance = RenderOptions(title="X")
    assert RenderOptions.from_value(instance) is instance
    assert RenderOptions.from_value(None) == RenderOptions()
    assert RenderOptions.from_value({}) == RenderOptions()
    assert RenderOptions.from_value({"title": "Y"}).title == "Y"


def test_options_are_immutable() -> None:
    options = RenderOptions()
    with pytest.raises(ValidationError):
        options.title = "changed"  # type: ignore[misc]


def test_non_blank_hrefs_are_kept_exactly() -> None:
    options = RenderOptions.model_validate({"cssHref": " /a.css ", "fontHref": "\t/f.css"})
    assert options.css_href == " /a.css "
    assert options.font_href == "\t/f.css"
