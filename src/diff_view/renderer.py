"""Rendering backends for laid-out diffs."""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from diff import DiffLineKind
from diff_view.diff_view_types import SplitVisualRow, UnifiedVisualRow
from diff_view.styled_text import StyledText, display_width, text_of


class Renderer(ABC):
    """Abstract rendering backend."""

    @abstractmethod
    def render_unified(self, rows: Sequence[UnifiedVisualRow]) -> List[str]:
        """
        Render wrapped unified rows.

        Args:
            rows: Visual rows from `LayoutBuilder.wrap_unified_rows`

        Returns:
            One output line per visual row
        """

    @abstractmethod
    def render_split(self, rows: Sequence[SplitVisualRow], column_width: int) -> List[str]:
        """
        Render wrapped split rows.

        Args:
            rows: Visual rows from `LayoutBuilder.wrap_split_rows`
            column_width: Text width each column was wrapped to

        Returns:
            One output line per visual row
        """


_MARKERS: Dict[DiffLineKind | None, str] = {
    DiffLineKind.CONTEXT: ' ',
    DiffLineKind.REMOVE: '-',
    DiffLineKind.ADD: '+',
    None: ' ',
}


class PlainTextRenderer(Renderer):
    """
    Renders rows as plain text, without colour.

    Each line is `<number> <marker> <text>`; split rows join the two columns
    with a separator.  Continuation rows leave the marker blank.
    """

    def __init__(self, separator: str = " | ") -> None:
        self._separator = separator

    @staticmethod
    def _marker(kind: DiffLineKind | None, continuation: bool) -> str:
        return ' ' if continuation else _MARKERS[kind]

    @staticmethod
    def _pad(content: StyledText, width: int) -> str:
        text = text_of(content)
        return text + " " * max(0, width - display_width(text))

    def render_unified(self, rows: Sequence[UnifiedVisualRow]) -> List[str]:
        return [
            f"{row.line_number} {self._marker(row.kind, row.continuation)} {text_of(row.content)}".rstrip()
            for row in rows
        ]

    def render_split(self, rows: Sequence[SplitVisualRow], column_width: int) -> List[str]:
        output: List[str] = []
        for row in rows:
            left = (
                f"{row.left_number} {self._marker(row.left_kind, row.continuation)} "
                f"{self._pad(row.left, column_width)}"
            )
            right = f"{row.right_number} {self._marker(row.right_kind, row.continuation)} {text_of(row.right)}"
            output.append(f"{left}{self._separator}{right}".rstrip())

        return output
