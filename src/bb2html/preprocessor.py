#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bb2html/preprocessor.py
"""Line-oriented rewrites applied before tokenization."""

from __future__ import annotations

import re

from bb2html.constants import MAX_TAG_NAME_LENGTH

# "* " at the start of a line, where a bare CR also ends a line, then the
# content up to the first lowercase closing tag or the end of the line.
MARKDOWN_ITEM_PATTERN = re.compile(
    rf"(?:^|(?<=\r))\* ([^\r\n]*?)(\[/[a-z]{{1,{MAX_TAG_NAME_LENGTH}}}\]|(?=[\r\n])|\Z)",
    re.MULTILINE,
)


def expand_markdown_lists(text: str) -> str:
    """Wrap markdown-style bullet lines in ``[li]`` tags.

    The closing tag that ends an item, if any, is kept right after the
    inserted ``[/li]``.

    Examples
    --------
        >>> expand_markdown_lists("[ulist]\\n* one\\n* two[/ulist]")
        '[ulist]\\n[li]one[/li]\\n[li]two[/li][/ulist]'

    """
    return MARKDOWN_ITEM_PATTERN.sub(r"[li]\1[/li]\2", text)
