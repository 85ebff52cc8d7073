"""bb2html - convert BBCode in user-submitted text to safe HTML.

bb2html turns the bracket markup used on bulletin boards (``[b]``, ``[url]``,
``[quote]``, ``[code]`` and friends) into HTML in a single left-to-right pass.
It never builds a tree and never fails: unknown tags, openers without a
closer and closers without an opener are simply left in the output as the
original text.

The input must already be HTML-entity-encoded. bb2html only adds markup of
its own; it does not sanitize arbitrary HTML.

Examples
--------
Converting pre-escaped text:

    >>> from bb2html import parse
    >>> parse("[b]x[/b]")
    '<strong>x</strong>'
    >>> parse("[url]https://a.b[/url]")
    '<a target="_blank" href="https://a.b">https://a.b</a>'

Converting raw user text:

    >>> from bb2html import to_html
    >>> to_html("[i]<tag>[/i]")
    '<em>&lt;tag&gt;</em>'

Passing the result to a callback:

    >>> parse("[s]gone[/s]", callback=str.upper)
    '<SPAN STYLE="TEXT-DECORATION: LINE-THROUGH">GONE</SPAN>'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from bb2html.api import parse, to_html
from bb2html.exceptions import Bb2HtmlError, InputError, InvalidOptionsError, ValidationError
from bb2html.options import BBCodeHtmlOptions
from bb2html.parser import BBCodeHtmlParser

__all__ = [
    "parse",
    "to_html",
    "BBCodeHtmlParser",
    "BBCodeHtmlOptions",
    "Bb2HtmlError",
    "ValidationError",
    "InvalidOptionsError",
    "InputError",
]
