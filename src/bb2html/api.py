#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bb2html/api.py
"""Public conversion functions."""

from __future__ import annotations

import html
from typing import Any, Callable, Optional, TypeVar

from bb2html.exceptions import ValidationError
from bb2html.options import BBCodeHtmlOptions
from bb2html.parser import BBCodeHtmlParser

T = TypeVar("T")


def _resolve_options(options: BBCodeHtmlOptions | None, kwargs: dict[str, Any]) -> BBCodeHtmlOptions | None:
    if not kwargs:
        return options
    return (options or BBCodeHtmlOptions()).create_updated(**kwargs)


def parse(
    text: str,
    callback: Optional[Callable[[str], T]] = None,
    options: BBCodeHtmlOptions | None = None,
    **kwargs: Any,
) -> str | T:
    """Convert HTML-escaped text containing BBCode to HTML.

    Parameters
    ----------
    text : str
        Input text. It must already be HTML-entity-encoded; only markup
        produced by the parser will contain raw ``<``, ``>`` or ``&``.
    callback : callable or None, default None
        Completion callback receiving the final HTML. Its return value is
        returned when given.
    options : BBCodeHtmlOptions or None, default None
        Conversion options
    **kwargs
        Individual option overrides, e.g. ``link_target=None``

    Returns
    -------
    str
        The HTML, or the callback's return value

    Examples
    --------
        >>> parse("[b]x[/b]")
        '<strong>x</strong>'
        >>> parse("[i]x[/i]", callback=len)
        10

    """
    parser = BBCodeHtmlParser(_resolve_options(options, kwargs))
    return parser.parse(text, callback)


def to_html(
    raw_text: str,
    callback: Optional[Callable[[str], T]] = None,
    options: BBCodeHtmlOptions | None = None,
    **kwargs: Any,
) -> str | T:
    """HTML-escape ``raw_text`` and convert its BBCode to HTML.

    Use this when the text comes straight from the user. Quotes are escaped
    too, so the quotes of an option such as ``[url="..."]`` end up in the
    value as ``&quot;`` entities; write ``[url=...]`` instead.
    """
    if not isinstance(raw_text, str):
        raise ValidationError(
            f"BBCode input must be a string, got {type(raw_text).__name__}",
            parameter_name="raw_text",
            parameter_value=raw_text,
        )
    return parse(html.escape(raw_text), callback, options, **kwargs)
