#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bb2html/allowlists.py
"""Static allow-lists for tag names and attribute values.

Every pattern here is compiled once at import time and never changes. The
resolver consults these to decide whether a tag is interpreted at all and
whether an attribute value is emitted as given or replaced by a default.
"""

from __future__ import annotations

import re
from typing import Optional

from bb2html.constants import (
    ALLOWED_TAG_NAMES,
    CSS_COLOR_NAMES,
    MAX_NUMBER_LENGTH,
    MAX_URI_LENGTH,
)

# Color keywords or #rgb / #rrggbb hex
COLOR_PATTERN = re.compile(
    rf"^(?:{'|'.join(CSS_COLOR_NAMES)}|#(?:[0-9a-f]{{3}})?[0-9a-f]{{3}})$",
    re.IGNORECASE,
)

NUMBER_PATTERN = re.compile(rf"^[.0-9]{{1,{MAX_NUMBER_LENGTH}}}$")

# Reserved, unreserved, escaped and alphanumeric characters (RFC 2396)
URI_PATTERN = re.compile(
    rf"^[-;/?:@&=+$,_.!~*'()%0-9a-z]{{1,{MAX_URI_LENGTH}}}$",
    re.IGNORECASE,
)

# Characters an option value may never contain: NUL through '"', quote,
# parentheses, angle brackets and square brackets.
ATTRIBUTE_VALUE_CLASS = r"[^\x00-\"'()<>\[\]]"


def is_valid_tag(name: Optional[str]) -> bool:
    """Return True if ``name`` is an interpreted BBCode tag.

    A single leading slash is accepted so closing-tag names can be checked
    as written.

    Examples
    --------
        >>> is_valid_tag("B")
        True
        >>> is_valid_tag("/url")
        True
        >>> is_valid_tag("script")
        False

    """
    if not name:
        return False
    if name.startswith("/"):
        name = name[1:]
    return name.lower() in ALLOWED_TAG_NAMES


def is_valid_color(value: Optional[str]) -> bool:
    """Return True for a CSS color keyword or a 3/6 digit hex color."""
    return bool(value) and COLOR_PATTERN.match(value) is not None


def is_valid_number(value: Optional[str]) -> bool:
    """Return True for a short string made only of digits and dots."""
    return bool(value) and NUMBER_PATTERN.match(value) is not None


def is_valid_uri(value: Optional[str]) -> bool:
    """Return True if ``value`` only uses RFC 2396 URI characters.

    Notes
    -----
    This is a character-set check only. It does not look at the scheme, so
    the caller-side HTML escaping is what keeps the value inside its
    attribute.

    """
    return bool(value) and URI_PATTERN.match(value) is not None
