"""Classification of raw hunk lines."""

from typing import List, Sequence

from diff.diff_exceptions import MalformedLineError
from diff.diff_types import DiffHunk, DiffLine, DiffLineKind


_PREFIX_TO_KIND = {kind.value: kind for kind in DiffLineKind}


def classify_lines(lines: Sequence[str]) -> List[DiffLine]:
    """
    Classify raw hunk lines by their prefix character.

    Args:
        lines: Raw hunk lines, each starting with ' ', '-' or '+'

    Returns:
        One DiffLine per input line, in order

    Raises:
        MalformedLineError: If a line is empty or has an unknown prefix
    """
    classified: List[DiffLine] = []
    for index, line in enumerate(lines):
        kind = _PREFIX_TO_KIND.get(line[:1])
        if kind is None:
            raise MalformedLineError(
                f"Hunk line {index} has no valid prefix: {line!r}",
                {"index": index, "line": line}
            )

        classified.append(DiffLine(kind, line[1:], index))

    return classified


def classify_hunk(hunk: DiffHunk) -> List[DiffLine]:
    """
    Classify all the lines of a hunk.

    Raises:
        MalformedLineError: If any line is malformed
    """
    return classify_lines(hunk.lines)


def count_line_kinds(lines: Sequence[str]) -> tuple[int, int]:
    """
    Count how many old-file and new-file lines a run of hunk lines covers.

    Context lines count for both files, removals for the old file only and
    additions for the new file only.  Lines without a valid prefix are ignored.

    Returns:
        Tuple of (old line count, new line count)
    """
    old_count = 0
    new_count = 0
    for line in lines:
        prefix = line[:1]
        if prefix == ' ':
            old_count += 1
            new_count += 1

        elif prefix == '-':
            old_count += 1

        elif prefix == '+':
            new_count += 1

    return old_count, new_count
