"""Property-based fuzzing tests for the BBCode parser.

This test module uses Hypothesis to generate random text and well-formed
BBCode and checks properties that must hold for every input.

Test Coverage:
- Arbitrary text never raises
- Text without markup passes through unchanged
- Well-nested simple tags map one to one onto HTML elements
- Escaped user text never yields raw script elements
- Output is stable when parsed a second time
"""

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from bb2html import BBCodeHtmlParser, parse, to_html

SIMPLE_TAGS = {
    "b": ("<strong>", "</strong>"),
    "i": ("<em>", "</em>"),
    "u": ("<u>", "</u>"),
    "samp": ("<samp>", "</samp>"),
    "s": ('<span style="text-decoration: line-through">', "</span>"),
}

# Letters, digits and spaces only, so no generated text can form markup of its own
plain_words = st.text(alphabet=st.characters(categories=["L", "N"]) | st.just(" "), max_size=20)
plain_words = plain_words.filter(lambda s: "[" not in s and "]" not in s)


def _nested_markup(children):
    return st.tuples(st.sampled_from(sorted(SIMPLE_TAGS)), st.lists(children, max_size=3)).map(
        lambda pair: ("tag", pair[0], pair[1])
    )


markup_trees = st.recursive(plain_words.map(lambda text: ("text", text)), _nested_markup, max_leaves=12)

# Same trees with line feeds mixed in, including runs of them after closing tags
markup_trees_with_breaks = st.recursive(
    (plain_words | st.sampled_from(["\n", "\n\n"])).map(lambda text: ("text", text)), _nested_markup, max_leaves=12
)


def _render_bbcode(node) -> str:
    if node[0] == "text":
        return node[1]
    _, name, children = node
    return f"[{name}]{''.join(_render_bbcode(c) for c in children)}[/{name}]"


def _render_html(node) -> str:
    if node[0] == "text":
        return node[1]
    _, name, children = node
    opening, closing = SIMPLE_TAGS[name]
    return f"{opening}{''.join(_render_html(c) for c in children)}{closing}"


@pytest.mark.unit
@pytest.mark.fuzzing
class TestParserFuzzing:
    """Property-based tests for BBCodeHtmlParser."""

    @given(st.text(max_size=300))
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_arbitrary_text_never_raises(self, parser: BBCodeHtmlParser, text: str) -> None:
        """Property: every string converts to a string."""
        assert isinstance(parser.parse(text), str)

    @given(
        st.lists(
            st.sampled_from(["[", "]", "/", "=", "b", "url", "code", "noparse", "img", "\n", "\r", "* ", "x", '"']),
            max_size=40,
        )
    )
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_bracket_soup_never_raises(self, parser: BBCodeHtmlParser, pieces: list[str]) -> None:
        """Property: dense fragments of tag syntax never break the parser."""
        assert isinstance(parser.parse("".join(pieces)), str)

    @given(st.text(max_size=200).filter(lambda s: not any(c in s for c in "[]<\r\n*")))
    def test_text_without_markup_unchanged(self, text: str) -> None:
        """Property: text without brackets, angle brackets, line breaks or bullets is returned as is."""
        assert parse(text) == text

    @given(markup_trees)
    def test_well_nested_simple_tags(self, tree) -> None:
        """Property: well-nested simple tags become the same nesting of HTML elements."""
        assert parse(_render_bbcode(tree)) == _render_html(tree)

    @given(markup_trees_with_breaks)
    def test_reparse_is_stable(self, tree) -> None:
        """Property: converting the output again changes nothing."""
        html = parse(_render_bbcode(tree))

        assert parse(html) == html

    @given(st.text(max_size=200))
    def test_escaped_text_has_no_script_element(self, text: str) -> None:
        """Property: raw user text cannot inject a script element."""
        assert "<script" not in to_html(f"<script>{text}</script>").lower()

    @given(st.text(max_size=100))
    def test_callback_receives_result(self, text: str) -> None:
        """Property: the callback result equals applying it to the plain result."""
        assert parse(text, callback=lambda html: ("wrapped", html)) == ("wrapped", parse(text))
