#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bb2html/tags.py
"""Tag dispatch table.

Most tags are fully described by a ``TagRule``: the HTML to open and close
them, an optional validator for their option and the default used when the
option is missing or rejected, and the effect they have on line-break
handling. ``code``, ``noparse``, ``url``/``link`` and ``img`` need more than
a table entry and are handled by the resolver directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from bb2html.allowlists import is_valid_color, is_valid_number, is_valid_uri
from bb2html.constants import (
    DEFAULT_COLOR,
    DEFAULT_FONT_SIZE,
    MAX_FONT_SIZE_EM,
    MIN_FONT_SIZE_EM,
)

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Format ``value`` the shortest way, without a trailing ``.0``.

    Examples
    --------
        >>> format_number(3.0)
        '3'
        >>> format_number(0.7)
        '0.7'

    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def clamp_font_size(value: str) -> str:
    """Clamp a numeric font size to the supported em range.

    Parameters
    ----------
    value : str
        Numeric string that already passed the number allow-list

    Returns
    -------
    str
        Size between 0.7 and 3 inclusive, formatted for a CSS ``em`` value.
        Strings that are not a valid number (``"1.2.3"``) count as ``1``.

    """
    try:
        size = float(value)
    except ValueError:
        logger.debug(f"Font size {value!r} is not a number, using {DEFAULT_FONT_SIZE}")
        size = float(DEFAULT_FONT_SIZE)
    return format_number(min(max(size, MIN_FONT_SIZE_EM), MAX_FONT_SIZE_EM))


@dataclass(frozen=True)
class TagRule:
    """Emission rule for a table-driven tag.

    Parameters
    ----------
    opening : str
        HTML emitted when the tag has no usable option
    closing : str
        HTML emitted by the matching closer
    opening_with_option : str or None
        Template with an ``{option}`` placeholder, used when an option value
        (given or defaulted) is available
    validator : callable or None
        Predicate an option must satisfy to be used
    default : str or None
        Option value substituted when the option is missing or invalid
    convert : callable or None
        Transformation applied to the option value before formatting
    disables_line_breaks : bool
        Opening the tag stops line feeds becoming ``<br>``
    restores_line_breaks : bool
        Closing the tag turns line feed conversion back on

    """

    opening: str
    closing: str
    opening_with_option: Optional[str] = None
    validator: Optional[Callable[[Optional[str]], bool]] = None
    default: Optional[str] = None
    convert: Optional[Callable[[str], str]] = None
    disables_line_breaks: bool = False
    restores_line_breaks: bool = False

    def resolve_option(self, option: Optional[str]) -> Optional[str]:
        """Return the option value to emit, or None to emit ``opening``."""
        if self.opening_with_option is None:
            return None
        if option is not None and (self.validator is None or self.validator(option)):
            value: Optional[str] = option
        else:
            if option is not None:
                logger.debug(f"Rejected option {option!r}, substituting {self.default!r}")
            value = self.default
        if value is not None and self.convert is not None:
            value = self.convert(value)
        return value

    def render_opening(self, option: Optional[str]) -> str:
        value = self.resolve_option(option)
        if value is None or self.opening_with_option is None:
            return self.opening
        return self.opening_with_option.format(option=value)


_COLOR_RULE = TagRule(
    opening=f'<span style="color: {DEFAULT_COLOR}">',
    closing="</span>",
    opening_with_option='<span style="color: {option}">',
    validator=is_valid_color,
    default=DEFAULT_COLOR,
)

_QUOTE_RULE = TagRule(
    opening="<blockquote>",
    closing="</blockquote>",
    opening_with_option='<blockquote cite="{option}">',
    validator=is_valid_uri,
)

TAG_RULES: dict[str, TagRule] = {
    "code": TagRule("<pre><code>", "</code></pre>", disables_line_breaks=True, restores_line_breaks=True),
    "pre": TagRule("<pre>", "</pre>", disables_line_breaks=True, restores_line_breaks=True),
    # [/center] leaves line feed conversion switched off
    "center": TagRule("<center>", "</center>", disables_line_breaks=True),
    "color": _COLOR_RULE,
    "colour": _COLOR_RULE,
    "size": TagRule(
        opening=f'<span style="font-size: {DEFAULT_FONT_SIZE}em">',
        closing="</span>",
        opening_with_option='<span style="font-size: {option}em">',
        validator=is_valid_number,
        default=DEFAULT_FONT_SIZE,
        convert=clamp_font_size,
    ),
    "s": TagRule('<span style="text-decoration: line-through">', "</span>"),
    "q": TagRule("<q>", "</q>", opening_with_option='<q cite="{option}">', validator=is_valid_uri),
    "quote": _QUOTE_RULE,
    "blockquote": _QUOTE_RULE,
    "list": TagRule("<ol>", "</ol>"),
    "ulist": TagRule("<ul>", "</ul>"),
    "b": TagRule("<strong>", "</strong>"),
    "i": TagRule("<em>", "</em>"),
}


def get_rule(tag_name: str) -> TagRule:
    """Return the rule for a lowercase tag name.

    Tags without an entry (``u``, ``samp``, ``li``) map to the HTML element
    of the same name.
    """
    rule = TAG_RULES.get(tag_name)
    if rule is None:
        rule = TagRule(f"<{tag_name}>", f"</{tag_name}>")
    return rule
