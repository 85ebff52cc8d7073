#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bb2html/options.py
"""Configuration options for BBCode to HTML conversion.

The engine has no configuration beyond its built-in grammar and allow-lists;
these options only adjust the surroundings of the transform. The defaults
give the classic forum output: links open in a new window and
bullet lines become list items.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field, replace
from typing import Any, get_args

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from bb2html.constants import (
    DEFAULT_LINK_TARGET,
    DEFAULT_MARKDOWN_LISTS,
    DEFAULT_TRIM_BREAKS,
    BreakTrimMode,
)
from bb2html.exceptions import ValidationError

_LINK_TARGET_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BBCodeHtmlOptions(CloneFrozenMixin):
    """Configuration options for BBCode-to-HTML conversion.

    Parameters
    ----------
    markdown_lists : bool, default True
        Rewrite lines starting with ``* `` into ``[li]`` items before parsing.
    link_target : str or None, default "_blank"
        Value of the ``target`` attribute on emitted anchors. ``None`` omits
        the attribute entirely.
    trim_breaks : {"first", "all", "none"}, default "all"
        Which ``<br>`` elements directly following a closing HTML tag are
        removed after parsing:
        - "all": every one, including runs of several breaks, so parsing
          the output again leaves it unchanged
        - "first": only the first occurrence in the document, as classic
          forum engines did
        - "none": leave the output untouched

    Examples
    --------
    Basic usage:
        >>> from bb2html import BBCodeHtmlParser, BBCodeHtmlOptions
        >>> parser = BBCodeHtmlParser(BBCodeHtmlOptions(link_target=None))
        >>> parser.parse("[url=http://example.com]x[/url]")
        '<a href="http://example.com">x</a>'

    """

    markdown_lists: bool = field(
        default=DEFAULT_MARKDOWN_LISTS,
        metadata={"help": "Convert '* ' prefixed lines into list items"},
    )
    link_target: str | None = field(
        default=DEFAULT_LINK_TARGET,
        metadata={"help": "target attribute for links (omitted when None)"},
    )
    trim_breaks: BreakTrimMode = field(
        default=DEFAULT_TRIM_BREAKS,
        metadata={"help": "Remove <br> right after closing tags: all, first, or none"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If any field value is outside its valid range.

        """
        if self.trim_breaks not in get_args(BreakTrimMode):
            raise ValidationError(
                f"trim_breaks must be one of {', '.join(get_args(BreakTrimMode))}, got {self.trim_breaks!r}",
                parameter_name="trim_breaks",
                parameter_value=self.trim_breaks,
            )
        if self.link_target is not None and not _LINK_TARGET_PATTERN.match(self.link_target):
            raise ValidationError(
                f"link_target must be a plain token such as '_blank', got {self.link_target!r}",
                parameter_name="link_target",
                parameter_value=self.link_target,
            )
