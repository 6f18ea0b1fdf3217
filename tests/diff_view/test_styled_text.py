"""Tests for styled text helpers."""

import pytest

from diff_view.styled_text import (
    StyleRole,
    StyledSegment,
    display_width,
    expand_tabs,
    from_tokens,
    plain_text,
    text_of,
    wrap_styled_text,
)
from syntax import StyledToken, TokenType


class TestConversions:
    """Test building styled text."""

    def test_plain_text(self):
        """Test plain text, including the empty string."""
        assert plain_text("abc") == (StyledSegment("abc"),)
        assert plain_text("") == ()

    def test_from_tokens(self):
        """Test that tokens with hints become syntax segments."""
        styled = from_tokens([StyledToken("def", TokenType.KEYWORD), StyledToken(" "), StyledToken("")])

        assert styled == (
            StyledSegment("def", StyleRole.SYNTAX, TokenType.KEYWORD),
            StyledSegment(" "),
        )


class TestWidths:
    """Test display widths."""

    def test_wide_characters(self):
        """Test that East Asian wide characters take two columns."""
        assert display_width("abc") == 3
        assert display_width("日本") == 4

    def test_expand_tabs(self):
        """Test that tab stops follow the column across segments."""
        styled = (StyledSegment("ab"), StyledSegment("\tc", StyleRole.ADDED_WORD))

        expanded = expand_tabs(styled, 4)

        assert text_of(expanded) == "ab  c"
        assert expanded[1].role == StyleRole.ADDED_WORD


class TestWrapStyledText:
    """Test wrapping styled text."""

    def test_short_text(self):
        """Test text that fits on one row."""
        assert wrap_styled_text(plain_text("abc"), 10) == [(StyledSegment("abc"),)]

    def test_empty_text(self):
        """Test that empty text gives one empty row."""
        assert wrap_styled_text((), 10) == [()]

    def test_segments_split_at_row_edge(self):
        """Test that a segment crossing the row edge keeps its style on both rows."""
        styled = (StyledSegment("abc"), StyledSegment("defg", StyleRole.REMOVED_WORD))

        rows = wrap_styled_text(styled, 5)

        assert rows == [
            (StyledSegment("abc"), StyledSegment("de", StyleRole.REMOVED_WORD)),
            (StyledSegment("fg", StyleRole.REMOVED_WORD),),
        ]

    def test_wide_characters_not_split(self):
        """Test that a wide character moves to the next row rather than overflowing."""
        rows = wrap_styled_text(plain_text("a日本"), 4)

        assert [text_of(row) for row in rows] == ["a日", "本"]

    def test_character_wider_than_row(self):
        """Test that an over-wide character gets a row to itself."""
        rows = wrap_styled_text(plain_text("日本"), 1)

        assert [text_of(row) for row in rows] == ["日", "本"]

    def test_invalid_width(self):
        """Test that a zero width is rejected."""
        with pytest.raises(ValueError):
            wrap_styled_text(plain_text("a"), 0)
