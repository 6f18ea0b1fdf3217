"""
Resolution of review groups onto hunks.

Review data refers to hunks by id, optionally narrowed to a line range.  Line
ranges are 1-based and inclusive (the numbering `hunks_to_context_xml` shows),
so they are converted to 0-based before a sub-hunk is extracted.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from diff.diff_exceptions import InvalidRangeError
from diff.diff_sub_hunk import extract_sub_hunk
from diff.diff_types import IndexedHunk


logger = logging.getLogger("DiffReview")


@dataclass
class ReviewGroup:
    """
    A group of related hunks with a description.

    Either `hunk_ids` lists whole hunks, or `hunk_id` names a single hunk that
    `line_range` may narrow down.
    """

    markdown_description: str = ""
    hunk_ids: List[int] = field(default_factory=list)
    hunk_id: int | None = None
    line_range: Tuple[int, int] | None = None  # 1-based, inclusive


def create_hunk_map(hunks: Iterable[IndexedHunk]) -> Dict[int, IndexedHunk]:
    """Map hunk ids to hunks."""
    return {hunk.id: hunk for hunk in hunks}


def resolve_group_hunks(group: ReviewGroup, hunk_map: Dict[int, IndexedHunk]) -> List[IndexedHunk]:
    """
    Resolve the hunks a review group refers to.

    Unknown hunk ids are ignored.  If a line range can't be extracted the full
    hunk is used instead.

    Args:
        group: The review group
        hunk_map: Hunks by id

    Returns:
        The hunks (or sub-hunks) to display for the group
    """
    result: List[IndexedHunk] = []

    for hunk_id in group.hunk_ids:
        hunk = hunk_map.get(hunk_id)
        if hunk is None:
            logger.warning("Review group refers to unknown hunk %d", hunk_id)
            continue

        result.append(hunk)

    if group.hunk_id is None:
        return result

    hunk = hunk_map.get(group.hunk_id)
    if hunk is None:
        logger.warning("Review group refers to unknown hunk %d", group.hunk_id)
        return result

    if group.line_range is None:
        result.append(hunk)
        return result

    start_line = group.line_range[0] - 1
    end_line = group.line_range[1] - 1
    try:
        result.append(extract_sub_hunk(hunk, start_line, end_line))

    except InvalidRangeError as e:
        logger.warning("Using the whole of hunk %d: %s", hunk.id, e)
        result.append(hunk)

    return result


def hunks_to_context_xml(hunks: Iterable[IndexedHunk]) -> str:
    """
    Format hunks as XML context for a review prompt.

    Lines are numbered like `cat -n`: right-aligned, starting at 1, followed by a
    tab and the raw hunk line.
    """
    output: List[str] = []
    for hunk in hunks:
        output.append(f'<hunk id="{hunk.id}" file="{hunk.filename}" totalLines="{len(hunk.lines)}">')
        width = len(str(len(hunk.lines)))
        for number, line in enumerate(hunk.lines, 1):
            output.append(f"{number:>{width}}\t{line}")

        output.append("</hunk>")
        output.append("")

    return "\n".join(output)
