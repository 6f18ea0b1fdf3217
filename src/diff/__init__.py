"""
Unified diff hunks: parsing, classification, pairing and slicing.

This package holds the line-level model of a hunk.  Turning hunks into
highlighted, laid-out rows is the job of `diff_view`.
"""

from diff.diff_classifier import classify_hunk, classify_lines, count_line_kinds
from diff.diff_coverage import (
    HunkCoverage,
    ReviewCoverage,
    UncoveredPortion,
    format_uncovered_message,
    get_uncovered_portions,
    initialize_coverage,
    mark_covered,
    mark_hunk_fully_covered,
    update_coverage_from_group,
)
from diff.diff_exceptions import (
    DiffError,
    DiffParseError,
    InvalidRangeError,
    MalformedLineError,
)
from diff.diff_pairer import LinePairing, pair_lines
from diff.diff_parser import DiffParser, should_skip_file
from diff.diff_patch import build_patch, count_changes, create_hunk
from diff.diff_review import ReviewGroup, create_hunk_map, hunks_to_context_xml, resolve_group_hunks
from diff.diff_similarity import levenshtein, similarity
from diff.diff_sub_hunk import calculate_line_offsets, extract_sub_hunk
from diff.diff_types import (
    DiffFile,
    DiffHunk,
    DiffLine,
    DiffLineKind,
    IndexedHunk,
    LinePair,
)

__all__ = [
    # Exceptions
    'DiffError',
    'DiffParseError',
    'InvalidRangeError',
    'MalformedLineError',
    # Types
    'DiffFile',
    'DiffHunk',
    'DiffLine',
    'DiffLineKind',
    'IndexedHunk',
    'LinePair',
    'LinePairing',
    'ReviewGroup',
    'HunkCoverage',
    'ReviewCoverage',
    'UncoveredPortion',
    # Parsing and building
    'DiffParser',
    'build_patch',
    'count_changes',
    'create_hunk',
    'should_skip_file',
    # Line model
    'classify_hunk',
    'classify_lines',
    'count_line_kinds',
    'levenshtein',
    'similarity',
    'pair_lines',
    'calculate_line_offsets',
    'extract_sub_hunk',
    # Review support
    'create_hunk_map',
    'hunks_to_context_xml',
    'resolve_group_hunks',
    'initialize_coverage',
    'mark_covered',
    'mark_hunk_fully_covered',
    'update_coverage_from_group',
    'get_uncovered_portions',
    'format_uncovered_message',
]
