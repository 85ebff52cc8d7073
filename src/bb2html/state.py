#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bb2html/state.py
"""Per-invocation parser state.

A ``ParserState`` is created fresh for every call to the driver and is never
shared between calls, so one parser object can serve concurrent callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TagFrame:
    """One accepted opening tag awaiting its closer.

    Parameters
    ----------
    tag_name : str
        Lowercase BBCode tag name
    closing_html : str
        HTML emitted when the matching closer is resolved

    """

    tag_name: str
    closing_html: str


@dataclass
class ParserState:
    """Mutable context threaded through the resolver.

    Parameters
    ----------
    source : str
        Preprocessed text being parsed, used for the balanced-opener lookahead
    verbatim : bool
        Whether tag interpretation is suspended
    verbatim_tag : str or None
        Lowercase name of the tag that switched verbatim mode on
    line_breaks_to_html : bool
        Whether a line feed becomes a ``<br>`` element
    deferred_start : int or None
        Output offset where an option-less ``url``/``link``/``img`` began
    stack : list of TagFrame
        Open tag stack, top of stack last

    """

    source: str = ""
    verbatim: bool = False
    verbatim_tag: Optional[str] = None
    line_breaks_to_html: bool = True
    deferred_start: Optional[int] = None
    stack: list[TagFrame] = field(default_factory=list)
    _fragments: list[str] = field(default_factory=list, repr=False)
    _length: int = field(default=0, repr=False)
    _closer_positions: dict[str, int] = field(default_factory=dict, repr=False)

    @property
    def output_length(self) -> int:
        """Number of characters emitted so far."""
        return self._length

    @property
    def top(self) -> Optional[TagFrame]:
        """The innermost open frame, or None when the stack is empty."""
        return self.stack[-1] if self.stack else None

    def emit(self, fragment: str) -> None:
        """Append ``fragment`` to the output."""
        if fragment:
            self._fragments.append(fragment)
            self._length += len(fragment)

    def output_since(self, offset: int) -> str:
        """Return the output text emitted from ``offset`` onwards."""
        return self.getvalue()[offset:]

    def getvalue(self) -> str:
        """Return the output emitted so far as one string."""
        if len(self._fragments) > 1:
            self._fragments[:] = ["".join(self._fragments)]
        return self._fragments[0] if self._fragments else ""

    def push(self, tag_name: str, closing_html: str) -> None:
        self.stack.append(TagFrame(tag_name, closing_html))

    def pop(self) -> TagFrame:
        return self.stack.pop()

    def enter_verbatim(self, tag_name: str) -> None:
        self.verbatim = True
        self.verbatim_tag = tag_name

    def leave_verbatim(self) -> None:
        self.verbatim = False
        self.verbatim_tag = None

    def is_closed_later(self, name: str, position: int) -> bool:
        """Return True if the literal ``[/name]`` occurs in the source at or after ``position``.

        The last occurrence of each closer is looked up once per call, which
        gives the same answer as a substring search of the remaining text.
        The test is case-sensitive and not nesting aware.
        """
        closer = f"[/{name}]"
        last = self._closer_positions.get(closer)
        if last is None:
            last = self.source.rfind(closer)
            self._closer_positions[closer] = last
        return last >= position
