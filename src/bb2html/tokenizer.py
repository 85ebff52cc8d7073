#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bb2html/tokenizer.py
"""Lexical scanner for BBCode markup.

The tokenizer finds the next significant unit in the source text: a single
line-break character, an opening tag expression or a closing tag expression.
Everything between two tokens is literal text that the driver copies to the
output unchanged.

The match is purely lexical. Tag names are only checked for shape (1-16 ASCII
letters); whether a name is actually interpreted is decided by the resolver.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from bb2html.allowlists import ATTRIBUTE_VALUE_CLASS
from bb2html.constants import MAX_OPTION_LENGTH, MAX_TAG_NAME_LENGTH

_NAME = rf"[a-z]{{1,{MAX_TAG_NAME_LENGTH}}}"

# CR/LF, [tag], [tag=option], [tag="option"], [tag='option'] or [/tag].
# The quotes on either side of the option are independently optional.
TOKEN_PATTERN = re.compile(
    rf"([\r\n])"
    rf"|(?:\[({_NAME})(?:=(?:\"|'|)({ATTRIBUTE_VALUE_CLASS}{{1,{MAX_OPTION_LENGTH}}}))?(?:\"|'|)\])"
    rf"|(?:\[/({_NAME})\])",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class LineBreak:
    """A single carriage return or line feed character.

    Parameters
    ----------
    raw : str
        Either ``"\\r"`` or ``"\\n"``
    start : int
        Offset of the character in the source text
    end : int
        Offset just after the character

    """

    raw: str
    start: int
    end: int


@dataclass(frozen=True)
class OpenTag:
    """An opening tag expression such as ``[b]`` or ``[url=...]``.

    Parameters
    ----------
    raw : str
        The exact matched text
    name : str
        Tag name as written (case preserved)
    option : str or None
        Option value without surrounding quotes, if any
    start : int
        Offset of the opening bracket in the source text
    end : int
        Offset just after the closing bracket

    """

    raw: str
    name: str
    option: Optional[str]
    start: int
    end: int


@dataclass(frozen=True)
class CloseTag:
    """A closing tag expression such as ``[/b]``."""

    raw: str
    name: str
    start: int
    end: int


Token = Union[LineBreak, OpenTag, CloseTag]


def tokenize(source: str) -> Iterator[Token]:
    """Yield the tokens of ``source`` from left to right.

    Parameters
    ----------
    source : str
        Text to scan

    Yields
    ------
    Token
        Non-overlapping ``LineBreak``, ``OpenTag`` and ``CloseTag`` tokens

    Examples
    --------
        >>> [type(t).__name__ for t in tokenize("[b]x[/b]\\n")]
        ['OpenTag', 'CloseTag', 'LineBreak']

    """
    for match in TOKEN_PATTERN.finditer(source):
        line_break, open_name, option, close_name = match.groups()
        start, end = match.span()
        if line_break is not None:
            yield LineBreak(raw=line_break, start=start, end=end)
        elif open_name is not None:
            yield OpenTag(raw=match.group(0), name=open_name, option=option, start=start, end=end)
        else:
            yield CloseTag(raw=match.group(0), name=close_name, start=start, end=end)
