"""Unified and split layouts of rendered hunk lines."""

from typing import List, Sequence, Set, Tuple

from diff import DiffLineKind
from diff_view.diff_view_types import (
    EMPTY_PLACEHOLDER, EmptyPlaceholder, RenderedLine, SplitLayout, SplitRow, SplitSide,
    SplitVisualRow, UnifiedLayout, UnifiedRow, UnifiedVisualRow
)
from diff_view.styled_text import StyledText, expand_tabs, wrap_styled_text


def number_width(value: int) -> int:
    """Number of digits needed to show a line number."""
    return len(str(max(value, 0)))


class LayoutBuilder:
    """
    Lays out rendered lines as unified or split rows.

    Line-number widths are computed from the hunk unless given, so that all the
    hunks of a file can share one gutter width.
    """

    def __init__(self, tab_width: int = 4) -> None:
        self._tab_width = tab_width

    @staticmethod
    def unified_number_width(lines: Sequence[RenderedLine]) -> int:
        """
        Gutter width for a unified layout: enough for the largest old or new number.

        Only numbers a line actually has count, so an added line's old counter
        and a removed line's new counter are ignored.
        """
        return max(LayoutBuilder.split_number_widths(lines))

    @staticmethod
    def split_number_widths(lines: Sequence[RenderedLine]) -> Tuple[int, int]:
        """Gutter widths for a split layout: old numbers on the left, new numbers on the right."""
        largest_old = 0
        largest_new = 0
        for line in lines:
            if line.kind != DiffLineKind.ADD:
                largest_old = max(largest_old, line.old_line_number)

            if line.kind != DiffLineKind.REMOVE:
                largest_new = max(largest_new, line.new_line_number)

        return number_width(largest_old), number_width(largest_new)

    def build_unified(self, lines: Sequence[RenderedLine], line_number_width: int | None = None) -> UnifiedLayout:
        """
        Lay out lines in one column.

        Each row shows the new-file line number; removed lines have a blank gutter.

        Args:
            lines: Rendered lines in hunk order
            line_number_width: Gutter width, or None to size it from `lines`

        Returns:
            The unified layout
        """
        width = line_number_width if line_number_width is not None else self.unified_number_width(lines)

        rows: List[UnifiedRow] = []
        for line in lines:
            if line.kind == DiffLineKind.REMOVE:
                number = " " * width

            else:
                number = str(line.new_line_number).rjust(width)

            rows.append(UnifiedRow(line, number))

        return UnifiedLayout(rows, width)

    def build_split(
        self,
        lines: Sequence[RenderedLine],
        left_width: int | None = None,
        right_width: int | None = None
    ) -> SplitLayout:
        """
        Lay out lines in two columns, old file on the left and new file on the right.

        A paired removal shares its row with the addition that replaced it.
        Orphan lines sit opposite an empty placeholder.

        Args:
            lines: Rendered lines in hunk order
            left_width: Left gutter width, or None to size it from `lines`
            right_width: Right gutter width, or None to size it from `lines`

        Returns:
            The split layout
        """
        computed_left, computed_right = self.split_number_widths(lines)
        by_index = {line.index: line for line in lines}
        processed: Set[int] = set()

        rows: List[SplitRow] = []
        for line in lines:
            if line.index in processed:
                continue

            processed.add(line.index)

            if line.kind == DiffLineKind.CONTEXT:
                rows.append(SplitRow(line, line))
                continue

            if line.kind == DiffLineKind.REMOVE:
                partner = by_index.get(line.paired_with) if line.paired_with is not None else None
                if partner is not None:
                    processed.add(partner.index)
                    rows.append(SplitRow(line, partner))
                    continue

                rows.append(SplitRow(line, EMPTY_PLACEHOLDER))
                continue

            rows.append(SplitRow(EMPTY_PLACEHOLDER, line))

        return SplitLayout(
            rows,
            left_width if left_width is not None else computed_left,
            right_width if right_width is not None else computed_right
        )

    def wrap_unified_rows(self, layout: UnifiedLayout, text_width: int) -> List[UnifiedVisualRow]:
        """
        Wrap a unified layout to a text width.

        Only the first visual row of each logical row carries the line number.
        """
        visual_rows: List[UnifiedVisualRow] = []
        blank = " " * layout.line_number_width
        for row_index, row in enumerate(layout.rows):
            pieces = wrap_styled_text(expand_tabs(row.line.content, self._tab_width), text_width)
            for piece_index, piece in enumerate(pieces):
                visual_rows.append(UnifiedVisualRow(
                    row_index=row_index,
                    line_number=row.line_number if piece_index == 0 else blank,
                    kind=row.line.kind,
                    content=piece,
                    continuation=piece_index > 0
                ))

        return visual_rows

    def wrap_split_rows(self, layout: SplitLayout, text_width: int) -> List[SplitVisualRow]:
        """
        Wrap a split layout to a per-column text width.

        The side that wraps to fewer visual rows is padded with blank
        continuation rows, so both columns of a logical row always take the
        same number of screen rows.

        Args:
            layout: The split layout
            text_width: Text width of each column, excluding the gutter

        Returns:
            Visual rows in display order
        """
        visual_rows: List[SplitVisualRow] = []
        for row_index, row in enumerate(layout.rows):
            left_pieces = self._wrap_side(row.left, text_width)
            right_pieces = self._wrap_side(row.right, text_width)
            height = max(len(left_pieces), len(right_pieces))
            left_pieces.extend([()] * (height - len(left_pieces)))
            right_pieces.extend([()] * (height - len(right_pieces)))

            for piece_index in range(height):
                first = piece_index == 0
                visual_rows.append(SplitVisualRow(
                    row_index=row_index,
                    left_number=self._side_number(row.left, layout.left_width, True) if first
                    else " " * layout.left_width,
                    left_kind=self._side_kind(row.left),
                    left=left_pieces[piece_index],
                    right_number=self._side_number(row.right, layout.right_width, False) if first
                    else " " * layout.right_width,
                    right_kind=self._side_kind(row.right),
                    right=right_pieces[piece_index],
                    continuation=not first
                ))

        return visual_rows

    def _wrap_side(self, side: SplitSide, text_width: int) -> List[StyledText]:
        if isinstance(side, EmptyPlaceholder):
            return [()]

        return wrap_styled_text(expand_tabs(side.content, self._tab_width), text_width)

    @staticmethod
    def _side_number(side: SplitSide, width: int, old: bool) -> str:
        if isinstance(side, EmptyPlaceholder):
            return " " * width

        return str(side.old_line_number if old else side.new_line_number).rjust(width)

    @staticmethod
    def _side_kind(side: SplitSide) -> DiffLineKind | None:
        if isinstance(side, EmptyPlaceholder):
            return None

        return side.kind
