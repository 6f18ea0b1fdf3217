"""Tracking of which hunk lines a review has explained."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from diff.diff_review import ReviewGroup
from diff.diff_types import IndexedHunk


LineRange = Tuple[int, int]


@dataclass
class HunkCoverage:
    """Covered 0-based inclusive line ranges for one hunk."""

    hunk_id: int
    total_lines: int
    covered_ranges: List[LineRange] = field(default_factory=list)


@dataclass
class UncoveredPortion:
    """Lines of a hunk that no review group explains."""

    hunk_id: int
    filename: str
    uncovered_ranges: List[LineRange]
    total_uncovered_lines: int


@dataclass
class ReviewCoverage:
    """Coverage state across all hunks of a review."""

    hunks: Dict[int, HunkCoverage] = field(default_factory=dict)
    total_hunks: int = 0
    fully_explained_hunks: int = 0
    partially_explained_hunks: int = 0
    unexplained_hunks: int = 0


def merge_ranges(ranges: Iterable[LineRange]) -> List[LineRange]:
    """Merge overlapping or adjacent ranges, returning them sorted."""
    merged: List[LineRange] = []
    for start, end in sorted(ranges):
        if merged and start <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
            continue

        merged.append((start, end))

    return merged


def _count_lines(ranges: Iterable[LineRange]) -> int:
    return sum(end - start + 1 for start, end in ranges)


def initialize_coverage(hunks: Iterable[IndexedHunk]) -> ReviewCoverage:
    """Start tracking coverage with nothing explained."""
    coverage = ReviewCoverage()
    for hunk in hunks:
        coverage.hunks[hunk.id] = HunkCoverage(hunk.id, len(hunk.lines))

    coverage.total_hunks = len(coverage.hunks)
    coverage.unexplained_hunks = coverage.total_hunks
    return coverage


def _update_stats(coverage: ReviewCoverage) -> None:
    fully = 0
    partially = 0
    unexplained = 0
    for hunk_coverage in coverage.hunks.values():
        covered = _count_lines(hunk_coverage.covered_ranges)
        if covered == 0:
            unexplained += 1

        elif covered >= hunk_coverage.total_lines:
            fully += 1

        else:
            partially += 1

    coverage.fully_explained_hunks = fully
    coverage.partially_explained_hunks = partially
    coverage.unexplained_hunks = unexplained


def mark_covered(coverage: ReviewCoverage, hunk_id: int, start_line: int, end_line: int) -> None:
    """
    Mark 0-based lines `start_line` to `end_line` of a hunk as explained.

    The range is clipped to the hunk.  Unknown hunks and empty ranges are ignored.
    """
    hunk_coverage = coverage.hunks.get(hunk_id)
    if hunk_coverage is None:
        return

    start_line = max(start_line, 0)
    end_line = min(end_line, hunk_coverage.total_lines - 1)
    if start_line > end_line:
        return

    hunk_coverage.covered_ranges = merge_ranges(hunk_coverage.covered_ranges + [(start_line, end_line)])
    _update_stats(coverage)


def mark_hunk_fully_covered(coverage: ReviewCoverage, hunk_id: int) -> None:
    """Mark every line of a hunk as explained."""
    hunk_coverage = coverage.hunks.get(hunk_id)
    if hunk_coverage is None:
        return

    mark_covered(coverage, hunk_id, 0, hunk_coverage.total_lines - 1)


def update_coverage_from_group(coverage: ReviewCoverage, group: ReviewGroup) -> None:
    """Mark everything a review group refers to as explained.  Group line ranges are 1-based."""
    for hunk_id in group.hunk_ids:
        mark_hunk_fully_covered(coverage, hunk_id)

    if group.hunk_id is None:
        return

    if group.line_range is None:
        mark_hunk_fully_covered(coverage, group.hunk_id)
        return

    mark_covered(coverage, group.hunk_id, group.line_range[0] - 1, group.line_range[1] - 1)


def _uncovered_ranges(covered: List[LineRange], total_lines: int) -> List[LineRange]:
    uncovered: List[LineRange] = []
    current = 0
    for start, end in merge_ranges(covered):
        if current < start:
            uncovered.append((current, start - 1))

        current = end + 1

    if current < total_lines:
        uncovered.append((current, total_lines - 1))

    return uncovered


def get_uncovered_portions(coverage: ReviewCoverage, hunks: Iterable[IndexedHunk]) -> List[UncoveredPortion]:
    """List the parts of each hunk that are still unexplained."""
    portions: List[UncoveredPortion] = []
    for hunk in hunks:
        hunk_coverage = coverage.hunks.get(hunk.id)
        if hunk_coverage is None:
            continue

        ranges = _uncovered_ranges(hunk_coverage.covered_ranges, hunk_coverage.total_lines)
        if ranges:
            portions.append(UncoveredPortion(hunk.id, hunk.filename, ranges, _count_lines(ranges)))

    return portions


def format_uncovered_message(uncovered: List[UncoveredPortion]) -> str:
    """Describe unexplained portions for a follow-up review prompt."""
    if not uncovered:
        return "All hunks have been fully explained."

    lines = ["The following portions were not explained:"]
    for portion in uncovered:
        ranges = ", ".join(
            f"line {start}" if start == end else f"lines {start}-{end}"
            for start, end in portion.uncovered_ranges
        )
        lines.append(f"  - Hunk #{portion.hunk_id} ({portion.filename}): {ranges}")

    return "\n".join(lines)
