"""Extraction of a contiguous part of a hunk as a hunk of its own."""

import dataclasses
from typing import Sequence, Tuple, TypeVar

from diff.diff_classifier import classify_lines, count_line_kinds
from diff.diff_exceptions import InvalidRangeError
from diff.diff_patch import build_patch
from diff.diff_types import DiffHunk, IndexedHunk


HunkT = TypeVar("HunkT", bound=DiffHunk)


def calculate_line_offsets(lines: Sequence[str], up_to_index: int) -> Tuple[int, int]:
    """
    Count the old-file and new-file lines consumed by `lines[:up_to_index]`.

    Returns:
        Tuple of (old offset, new offset)
    """
    return count_line_kinds(lines[:max(up_to_index, 0)])


def extract_sub_hunk(hunk: HunkT, start_line: int, end_line: int) -> HunkT:
    """
    Extract lines `start_line` to `end_line` (0-based, inclusive) of a hunk.

    The result is a self-consistent hunk: its start lines are moved past
    whatever precedes the slice and its counts describe the slice only.  An
    IndexedHunk keeps its id, filename and index, and gets a fresh raw patch.

    Args:
        hunk: The hunk to slice
        start_line: First line to keep, 0-based
        end_line: Last line to keep, 0-based and inclusive

    Returns:
        A new hunk of the same type as `hunk`

    Raises:
        InvalidRangeError: If the range is reversed, out of bounds or empty
        MalformedLineError: If the hunk contains a malformed line
    """
    total = len(hunk.lines)
    details = {"start_line": start_line, "end_line": end_line, "total_lines": total}
    if start_line > end_line:
        raise InvalidRangeError(f"Invalid line range: start {start_line} > end {end_line}", details)

    if start_line < 0 or end_line >= total:
        raise InvalidRangeError(
            f"Line range {start_line}-{end_line} is outside the hunk (0-{total - 1})", details
        )

    classify_lines(hunk.lines)
    old_offset, new_offset = calculate_line_offsets(hunk.lines, start_line)

    sub_lines = list(hunk.lines[start_line:end_line + 1])
    if not sub_lines:
        raise InvalidRangeError("Line range selects no lines", details)

    old_count, new_count = count_line_kinds(sub_lines)
    old_start = hunk.old_start + old_offset
    new_start = hunk.new_start + new_offset

    changes = {
        "old_start": old_start,
        "old_count": old_count,
        "new_start": new_start,
        "new_count": new_count,
        "lines": sub_lines
    }
    if isinstance(hunk, IndexedHunk):
        changes["raw_diff"] = build_patch(hunk.filename, old_start, new_start, sub_lines)

    return dataclasses.replace(hunk, **changes)
