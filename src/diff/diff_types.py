"""Shared dataclasses for diff operations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class DiffLineKind(Enum):
    """Kind of a hunk line, keyed by its prefix character."""

    CONTEXT = ' '
    REMOVE = '-'
    ADD = '+'


@dataclass(frozen=True)
class DiffLine:
    """A classified hunk line."""

    kind: DiffLineKind
    content: str  # The line content without the prefix character
    index: int  # Position of the line in the hunk's `lines`

    @property
    def prefixed(self) -> str:
        """The line as it appears in the hunk."""
        return self.kind.value + self.content


@dataclass
class DiffHunk:
    """Represents a single hunk from a unified diff."""

    old_start: int  # Starting line number in original file (1-indexed)
    old_count: int  # Number of lines in original file
    new_start: int  # Starting line number in new file (1-indexed)
    new_count: int  # Number of lines in new file
    lines: List[str]  # Raw hunk lines, each starting with ' ', '-' or '+'


@dataclass
class IndexedHunk(DiffHunk):
    """A hunk with a review-wide identifier and the file it belongs to."""

    id: int = 0
    filename: str = ""
    hunk_index: int = 0  # Which hunk in the file (0-based)
    raw_diff: str = ""


@dataclass
class DiffFile:
    """All hunks parsed for a single file."""

    old_filename: str | None
    new_filename: str | None
    hunks: List[DiffHunk] = field(default_factory=list)

    @property
    def filename(self) -> str:
        """The file's display name, ignoring /dev/null for added or deleted files."""
        if self.new_filename and self.new_filename != "/dev/null":
            return self.new_filename

        if self.old_filename and self.old_filename != "/dev/null":
            return self.old_filename

        return "unknown"


@dataclass(frozen=True)
class LinePair:
    """A removed line and the added line that replaced it."""

    remove_index: int
    add_index: int
