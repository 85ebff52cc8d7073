#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the bb2html library.

This module centralizes the grammar limits, allow-list vocabularies, default
attribute values and option defaults used across bb2html.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Grammar Limits - Lengths accepted by the tokenizer and allow-lists
3. Allow-list Vocabularies - Tag names and CSS color names
4. Attribute Defaults - Values substituted for invalid options
5. Option Defaults - Defaults for BBCodeHtmlOptions
6. CLI - Environment variable prefix
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

# How the driver removes <br> elements that directly follow a closing tag
BreakTrimMode = Literal["first", "all", "none"]

# =============================================================================
# Grammar Limits
# =============================================================================

MAX_TAG_NAME_LENGTH = 16
MAX_OPTION_LENGTH = 256
MAX_NUMBER_LENGTH = 8
MAX_URI_LENGTH = 512

# =============================================================================
# Allow-list Vocabularies
# =============================================================================

ALLOWED_TAG_NAMES: frozenset[str] = frozenset(
    {
        "b",
        "i",
        "u",
        "s",
        "q",
        "pre",
        "center",
        "samp",
        "code",
        "color",
        "colour",
        "size",
        "noparse",
        "url",
        "link",
        "img",
        "quote",
        "blockquote",
        "list",
        "ulist",
        "li",
    }
)

# The sixteen HTML 4 color keywords
CSS_COLOR_NAMES: tuple[str, ...] = (
    "black",
    "silver",
    "gray",
    "white",
    "maroon",
    "red",
    "purple",
    "fuchsia",
    "green",
    "lime",
    "olive",
    "yellow",
    "navy",
    "blue",
    "teal",
    "aqua",
)

# =============================================================================
# Attribute Defaults
# =============================================================================

DEFAULT_COLOR = "inherit"
DEFAULT_FONT_SIZE = "1"
MIN_FONT_SIZE_EM = 0.7
MAX_FONT_SIZE_EM = 3.0

LINE_BREAK_HTML = "<br>"

# =============================================================================
# Option Defaults
# =============================================================================

DEFAULT_MARKDOWN_LISTS = True
DEFAULT_LINK_TARGET: str | None = "_blank"
DEFAULT_TRIM_BREAKS: BreakTrimMode = "all"

# =============================================================================
# CLI
# =============================================================================

ENV_VAR_PREFIX = "BB2HTML_"
