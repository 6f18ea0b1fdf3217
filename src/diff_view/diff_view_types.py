"""Row and layout types produced by the diff view."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from diff import DiffHunk, DiffLineKind
from diff_view.styled_text import StyledText


class ViewMode(Enum):
    """How a hunk is laid out."""

    UNIFIED = "unified"
    SPLIT = "split"


@dataclass(frozen=True)
class RenderedLine:
    """
    A hunk line with its line numbers and display content.

    Both counters are recorded for every line; which one is shown depends on
    the layout and the column.
    """

    kind: DiffLineKind
    old_line_number: int
    new_line_number: int
    content: StyledText
    index: int
    paired_with: int | None = None


@dataclass(frozen=True)
class EmptyPlaceholder:
    """Blank counterpart shown opposite an orphan line in split view."""


EMPTY_PLACEHOLDER = EmptyPlaceholder()

SplitSide = Union[RenderedLine, EmptyPlaceholder]


@dataclass(frozen=True)
class SplitRow:
    """One logical row of a split view."""

    left: SplitSide
    right: SplitSide


@dataclass(frozen=True)
class UnifiedRow:
    """One logical row of a unified view."""

    line: RenderedLine
    line_number: str  # Padded, blank for removed lines


@dataclass
class UnifiedLayout:
    """A hunk laid out in one column."""

    rows: List[UnifiedRow] = field(default_factory=list)
    line_number_width: int = 1


@dataclass
class SplitLayout:
    """A hunk laid out in two columns."""

    rows: List[SplitRow] = field(default_factory=list)
    left_width: int = 1
    right_width: int = 1


@dataclass(frozen=True)
class UnifiedVisualRow:
    """One screen row of a wrapped unified view."""

    row_index: int
    line_number: str
    kind: DiffLineKind
    content: StyledText
    continuation: bool


@dataclass(frozen=True)
class SplitVisualRow:
    """
    One screen row of a wrapped split view.

    `left_kind` / `right_kind` are None where that side is an empty placeholder.
    """

    row_index: int
    left_number: str
    left_kind: DiffLineKind | None
    left: StyledText
    right_number: str
    right_kind: DiffLineKind | None
    right: StyledText
    continuation: bool


@dataclass
class HunkView:
    """A hunk with its rendered lines and its layout in the chosen mode."""

    hunk: DiffHunk
    lines: List[RenderedLine]
    unified: UnifiedLayout | None = None
    split: SplitLayout | None = None


@dataclass
class FileView:
    """All the displayable hunks of one file, sharing line-number widths."""

    filename: str
    mode: ViewMode
    hunks: List[HunkView] = field(default_factory=list)
    dropped_hunks: int = 0
    additions: int = 0
    deletions: int = 0
