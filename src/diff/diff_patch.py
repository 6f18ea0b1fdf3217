"""Building unified patch text and hunks from raw lines."""

from typing import Iterable, List, Tuple

from diff.diff_classifier import count_line_kinds
from diff.diff_types import DiffHunk, IndexedHunk


def format_hunk_header(old_start: int, old_count: int, new_start: int, new_count: int) -> str:
    """Format a `@@ -a,b +c,d @@` hunk header."""
    return f"@@ -{old_start},{old_count} +{new_start},{new_count} @@"


def build_patch(filename: str, old_start: int, new_start: int, lines: List[str]) -> str:
    """
    Build a unified diff patch for a single hunk.

    Line counts in the header are recomputed from `lines`, so this works for
    partial hunks as well as whole ones.

    Args:
        filename: File path, without any a/ or b/ prefix
        old_start: Starting line number in the old file
        new_start: Starting line number in the new file
        lines: Hunk lines, each with its ' ', '-' or '+' prefix

    Returns:
        The patch text
    """
    old_count, new_count = count_line_kinds(lines)
    header = [
        f"--- a/{filename}",
        f"+++ b/{filename}",
        format_hunk_header(old_start, old_count, new_start, new_count)
    ]
    return "\n".join(header + lines)


def create_hunk(
    hunk_id: int,
    filename: str,
    hunk_index: int,
    old_start: int,
    new_start: int,
    lines: List[str]
) -> IndexedHunk:
    """
    Create an IndexedHunk from its lines, computing counts and the raw patch.
    """
    old_count, new_count = count_line_kinds(lines)
    return IndexedHunk(
        old_start=old_start,
        old_count=old_count,
        new_start=new_start,
        new_count=new_count,
        lines=list(lines),
        id=hunk_id,
        filename=filename,
        hunk_index=hunk_index,
        raw_diff=build_patch(filename, old_start, new_start, list(lines))
    )


def count_changes(hunks: Iterable[DiffHunk]) -> Tuple[int, int]:
    """
    Count added and removed lines across hunks.

    Returns:
        Tuple of (additions, deletions)
    """
    additions = 0
    deletions = 0
    for hunk in hunks:
        for line in hunk.lines:
            if line.startswith('+'):
                additions += 1

            elif line.startswith('-'):
                deletions += 1

    return additions, deletions
