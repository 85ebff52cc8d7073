"""Unit tests for the tag dispatch table."""

import pytest

from bb2html.tags import TAG_RULES, clamp_font_size, format_number, get_rule


@pytest.mark.unit
class TestFontSize:
    """Tests for font size clamping."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("10", "3"),
            ("3", "3"),
            ("0.1", "0.7"),
            (".5", "0.7"),
            ("1.5", "1.5"),
            ("2", "2"),
            ("0.70", "0.7"),
            ("1.25", "1.25"),
            ("1.2.3", "1"),
            (".", "1"),
        ],
    )
    def test_clamp(self, value: str, expected: str) -> None:
        """Test values are clamped to [0.7, 3] and unparseable ones become 1."""
        assert clamp_font_size(value) == expected

    def test_format_number(self) -> None:
        """Test whole numbers lose their fractional part."""
        assert format_number(3.0) == "3"
        assert format_number(0.7) == "0.7"


@pytest.mark.unit
class TestTagRules:
    """Tests for TagRule rendering."""

    def test_color_valid_and_default(self) -> None:
        """Test color options are validated and default to inherit."""
        rule = TAG_RULES["color"]

        assert rule.render_opening("red") == '<span style="color: red">'
        assert rule.render_opening("#00ff00") == '<span style="color: #00ff00">'
        assert rule.render_opening("bogus") == '<span style="color: inherit">'
        assert rule.render_opening(None) == '<span style="color: inherit">'
        assert TAG_RULES["colour"] is rule

    def test_size_default_and_clamp(self) -> None:
        """Test size is defaulted and clamped even without an option."""
        rule = TAG_RULES["size"]

        assert rule.render_opening(None) == '<span style="font-size: 1em">'
        assert rule.render_opening("abc") == '<span style="font-size: 1em">'
        assert rule.render_opening("10") == '<span style="font-size: 3em">'

    def test_citation_option(self) -> None:
        """Test quotes only carry a cite attribute for valid URIs."""
        assert TAG_RULES["q"].render_opening("http://a.b/c") == '<q cite="http://a.b/c">'
        assert TAG_RULES["q"].render_opening(None) == "<q>"
        assert TAG_RULES["quote"].render_opening("http://a.b/#x") == "<blockquote>"
        assert TAG_RULES["blockquote"].render_opening("http://a.b") == '<blockquote cite="http://a.b">'

    def test_option_ignored_without_template(self) -> None:
        """Test tags without an option template ignore any option."""
        assert TAG_RULES["b"].render_opening("whatever") == "<strong>"

    def test_line_break_flags(self) -> None:
        """Test which tags switch line feed conversion off and on."""
        assert TAG_RULES["pre"].disables_line_breaks and TAG_RULES["pre"].restores_line_breaks
        assert TAG_RULES["code"].disables_line_breaks and TAG_RULES["code"].restores_line_breaks
        assert TAG_RULES["center"].disables_line_breaks
        assert not TAG_RULES["center"].restores_line_breaks

    @pytest.mark.parametrize("name", ["u", "samp", "li"])
    def test_generic_rule(self, name: str) -> None:
        """Test tags without an entry map to the element of the same name."""
        rule = get_rule(name)

        assert rule.opening == f"<{name}>"
        assert rule.closing == f"</{name}>"

    def test_table_rule_returned(self) -> None:
        """Test table entries take precedence over the generic rule."""
        assert get_rule("list") is TAG_RULES["list"]
        assert get_rule("ulist").closing == "</ul>"
