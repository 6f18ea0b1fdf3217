"""Styled text: the abstract output the diff view hands to a rendering backend."""

import unicodedata
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Sequence, Tuple

from syntax import StyledToken, TokenType


class StyleRole(Enum):
    """What a run of text represents, for the theme layer to colour."""

    PLAIN = auto()
    SYNTAX = auto()
    REMOVED_WORD = auto()
    ADDED_WORD = auto()


@dataclass(frozen=True)
class StyledSegment:
    """A run of text with one style."""

    text: str
    role: StyleRole = StyleRole.PLAIN
    color_hint: TokenType | None = None


StyledText = Tuple[StyledSegment, ...]


def plain_text(text: str) -> StyledText:
    """Styled text for unhighlighted content."""
    return (StyledSegment(text),) if text else ()


def from_tokens(tokens: Iterable[StyledToken]) -> StyledText:
    """Styled text for tokenizer output."""
    return tuple(
        StyledSegment(token.text, StyleRole.SYNTAX if token.color_hint is not None else StyleRole.PLAIN, token.color_hint)
        for token in tokens
        if token.text
    )


def text_of(styled: Sequence[StyledSegment]) -> str:
    """The plain text of some styled text."""
    return "".join(segment.text for segment in styled)


def char_width(ch: str) -> int:
    """Terminal column width of a character: 2 for wide East Asian characters, else 1."""
    return 2 if unicodedata.east_asian_width(ch) in ('W', 'F') else 1


def display_width(text: str) -> int:
    """Terminal column width of a string."""
    return sum(char_width(ch) for ch in text)


def expand_tabs(styled: Sequence[StyledSegment], tab_width: int) -> StyledText:
    """Replace tabs with spaces, keeping tab stops relative to the start of the line."""
    result: List[StyledSegment] = []
    column = 0
    for segment in styled:
        expanded: List[str] = []
        for ch in segment.text:
            if ch == '\t':
                spaces = tab_width - (column % tab_width)
                expanded.append(' ' * spaces)
                column += spaces
                continue

            expanded.append(ch)
            column += char_width(ch)

        result.append(StyledSegment("".join(expanded), segment.role, segment.color_hint))

    return tuple(result)


def wrap_styled_text(styled: Sequence[StyledSegment], width: int) -> List[StyledText]:
    """
    Break styled text into visual rows no wider than `width` columns.

    Breaks happen at character boundaries.  A character wider than `width`
    gets a row to itself.  Empty text gives a single empty row.

    Raises:
        ValueError: If width is less than 1
    """
    if width < 1:
        raise ValueError(f"Wrap width must be at least 1, got {width}")

    rows: List[StyledText] = []
    row: List[StyledSegment] = []
    row_width = 0

    for segment in styled:
        chunk: List[str] = []
        for ch in segment.text:
            ch_width = char_width(ch)
            if row_width + ch_width > width and (row_width > 0 or chunk):
                if chunk:
                    row.append(StyledSegment("".join(chunk), segment.role, segment.color_hint))
                    chunk = []

                rows.append(tuple(row))
                row = []
                row_width = 0

            chunk.append(ch)
            row_width += ch_width

        if chunk:
            row.append(StyledSegment("".join(chunk), segment.role, segment.color_hint))

    if row or not rows:
        rows.append(tuple(row))

    return rows
