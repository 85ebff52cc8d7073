#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bb2html/parser.py
"""BBCode to HTML driver.

This module ties the pieces together: the optional markdown-list rewrite,
the tokenizer, the resolver and a final cosmetic cleanup. The whole input is
converted in a single left-to-right pass without building a tree.

The input must already be HTML-entity-encoded. Only markup the engine emits
itself contains raw ``<``, ``>`` or ``&``.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, TypeVar

from bb2html.exceptions import InvalidOptionsError, ValidationError
from bb2html.options import BBCodeHtmlOptions
from bb2html.preprocessor import expand_markdown_lists
from bb2html.resolver import TagResolver
from bb2html.state import ParserState
from bb2html.tokenizer import tokenize

logger = logging.getLogger(__name__)

T = TypeVar("T")

# A <br> directly after a closing HTML element emitted by the resolver
BREAK_AFTER_CLOSING_TAG = re.compile(r"(</[a-z]{1,16}>)<br>")

# The whole run of <br> directly after a closing HTML element
BREAKS_AFTER_CLOSING_TAG = re.compile(r"(</[a-z]{1,16}>)(?:<br>)+")


class BBCodeHtmlParser:
    """Convert HTML-escaped text containing BBCode into HTML.

    The parser keeps no state between calls; a fresh ``ParserState`` is
    created for every ``parse`` call, so one instance can be shared freely.

    Parameters
    ----------
    options : BBCodeHtmlOptions or None, default None
        Conversion options

    Examples
    --------
    Basic parsing:

        >>> parser = BBCodeHtmlParser()
        >>> parser.parse("[b]x[/b]")
        '<strong>x</strong>'

    Malformed markup is kept as text:

        >>> parser.parse("[b]unclosed")
        '[b]unclosed'

    """

    def __init__(self, options: BBCodeHtmlOptions | None = None):
        """Initialize the parser with options."""
        if options is not None and not isinstance(options, BBCodeHtmlOptions):
            raise InvalidOptionsError(
                converter_name="bbcode",
                expected_type=BBCodeHtmlOptions,
                received_type=type(options),
            )
        self.options: BBCodeHtmlOptions = options or BBCodeHtmlOptions()

    def parse(self, text: str, callback: Optional[Callable[[str], T]] = None) -> str | T:
        """Convert ``text`` to HTML.

        Parameters
        ----------
        text : str
            HTML-escaped text containing BBCode
        callback : callable or None, default None
            Completion callback. When given, it receives the final HTML and
            its return value is returned instead.

        Returns
        -------
        str
            The HTML, or whatever ``callback`` returned

        Raises
        ------
        ValidationError
            If ``text`` is not a string

        """
        if not isinstance(text, str):
            raise ValidationError(
                f"BBCode input must be a string, got {type(text).__name__}",
                parameter_name="text",
                parameter_value=text,
            )

        result = self._convert(text) if text else ""
        return callback(result) if callback is not None else result

    def _convert(self, text: str) -> str:
        if self.options.markdown_lists:
            text = expand_markdown_lists(text)

        state = ParserState(source=text)
        resolver = TagResolver(state, self.options)

        position = 0
        for token in tokenize(text):
            state.emit(text[position : token.start])
            state.emit(resolver.resolve(token))
            position = token.end
        state.emit(text[position:])

        # Frames survive to here when closers arrive out of order or the only
        # later [/name] sat inside a verbatim region. Close them so the
        # output stays well nested.
        while state.stack:
            frame = state.pop()
            logger.debug(f"Closing [{frame.tag_name}] left open at end of input")
            state.emit(frame.closing_html)

        return self._trim_breaks(state.getvalue())

    def _trim_breaks(self, html: str) -> str:
        mode = self.options.trim_breaks
        if mode == "none":
            return html
        if mode == "first":
            return BREAK_AFTER_CLOSING_TAG.sub(r"\1", html, count=1)
        return BREAKS_AFTER_CLOSING_TAG.sub(r"\1", html)
