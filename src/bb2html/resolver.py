#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bb2html/resolver.py
"""Translate tokens into HTML fragments.

The resolver receives tokens in source order together with the per-call
``ParserState`` and returns the fragment that replaces each token in the
output. Anything it does not accept is returned as the raw matched text, so
malformed markup shows up literally instead of failing.
"""

from __future__ import annotations

import logging
from typing import Optional

from bb2html.allowlists import is_valid_tag, is_valid_uri
from bb2html.constants import LINE_BREAK_HTML
from bb2html.options import BBCodeHtmlOptions
from bb2html.state import ParserState
from bb2html.tags import get_rule
from bb2html.tokenizer import CloseTag, LineBreak, OpenTag, Token

logger = logging.getLogger(__name__)

_IMG_CLOSING = '" />'


class TagResolver:
    """Decide the HTML replacement for each token.

    Parameters
    ----------
    state : ParserState
        Context for a single parse call
    options : BBCodeHtmlOptions or None, default None
        Conversion options; only ``link_target`` is used here

    """

    def __init__(self, state: ParserState, options: BBCodeHtmlOptions | None = None):
        """Bind the resolver to one call's state."""
        self.state = state
        self.options = options or BBCodeHtmlOptions()

    def resolve(self, token: Token) -> str:
        """Return the replacement text for ``token``, updating state."""
        if isinstance(token, LineBreak):
            return self._resolve_line_break(token)
        if isinstance(token, OpenTag):
            return self._resolve_open(token)
        return self._resolve_close(token)

    # ------------------------------------------------------------------
    # Line breaks
    # ------------------------------------------------------------------

    def _resolve_line_break(self, token: LineBreak) -> str:
        if token.raw == "\r":
            return ""
        return LINE_BREAK_HTML if self.state.line_breaks_to_html else token.raw

    # ------------------------------------------------------------------
    # Opening tags
    # ------------------------------------------------------------------

    def _resolve_open(self, token: OpenTag) -> str:
        state = self.state

        if not is_valid_tag(token.name):
            return token.raw

        if not state.is_closed_later(token.name, token.end):
            logger.debug(f"Unbalanced opening tag {token.raw!r} at {token.start}, emitting literally")
            return token.raw

        if state.verbatim:
            return token.raw

        # Everything inside an option-less url/link/img is harvested as its target
        if state.deferred_start is not None:
            return token.raw

        name = token.name.lower()

        if name == "noparse":
            state.enter_verbatim(name)
            return ""
        if name in ("url", "link"):
            return self._open_link(name, token.option)
        if name == "img":
            return self._open_image(token.option)

        rule = get_rule(name)
        state.push(name, rule.closing)
        if name == "code":
            state.enter_verbatim(name)
        if rule.disables_line_breaks:
            state.line_breaks_to_html = False
        return rule.render_opening(token.option)

    def _anchor_start(self) -> str:
        target = self.options.link_target
        return f'<a target="{target}" href="' if target else '<a href="'

    def _open_link(self, name: str, option: Optional[str]) -> str:
        self.state.push(name, "</a>")
        if is_valid_uri(option):
            return f'{self._anchor_start()}{option}">'
        if option is not None:
            logger.debug(f"Rejected [{name}] target {option!r}, using tag content instead")
        opening = self._anchor_start()
        # The capture starts right after the dangling href=" emitted here
        self.state.deferred_start = self.state.output_length + len(opening)
        return opening

    def _open_image(self, option: Optional[str]) -> str:
        self.state.push("img", _IMG_CLOSING)
        if is_valid_uri(option):
            return f'<img src="{option}'
        self.state.deferred_start = self.state.output_length + len('<img src="')
        return '<img src="'

    # ------------------------------------------------------------------
    # Closing tags
    # ------------------------------------------------------------------

    def _resolve_close(self, token: CloseTag) -> str:
        state = self.state

        if not is_valid_tag(token.name):
            return token.raw

        name = token.name.lower()

        if state.verbatim:
            if name != state.verbatim_tag:
                return token.raw
            state.leave_verbatim()
            if name == "noparse":
                return ""
            # [code] is the only other verbatim tag and always has a frame
            state.line_breaks_to_html = True
            return state.pop().closing_html

        top = state.top
        if top is None or top.tag_name != name:
            logger.debug(f"Mismatched closing tag {token.raw!r} at {token.start}, emitting literally")
            return token.raw

        frame = state.pop()

        if name in ("url", "link") and state.deferred_start is not None:
            content = state.output_since(state.deferred_start)
            state.deferred_start = None
            return f'">{content}{frame.closing_html}'

        if name == "img":
            state.deferred_start = None
        elif get_rule(name).restores_line_breaks:
            state.line_breaks_to_html = True

        return frame.closing_html
