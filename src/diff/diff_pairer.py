"""Pairing of removed lines with the added lines that replace them."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Sequence, Tuple

from diff.diff_types import DiffLine, DiffLineKind, LinePair


@dataclass(frozen=True)
class LinePairing:
    """
    Result of pairing a hunk's lines.

    Attributes:
        pairs: Remove/add pairs in hunk order
        unpaired_removes: Indices of removed lines with no partner
        unpaired_adds: Indices of added lines with no partner
    """
    pairs: Tuple[LinePair, ...]
    unpaired_removes: FrozenSet[int]
    unpaired_adds: FrozenSet[int]

    def partner_map(self) -> Dict[int, int]:
        """Map from each paired index to the index of its partner, in both directions."""
        partners: Dict[int, int] = {}
        for pair in self.pairs:
            partners[pair.remove_index] = pair.add_index
            partners[pair.add_index] = pair.remove_index

        return partners


def _collect_run(lines: Sequence[DiffLine], start: int, kind: DiffLineKind) -> List[int]:
    """Indices of the maximal run of `kind` lines beginning at `start`."""
    run: List[int] = []
    position = start
    while position < len(lines) and lines[position].kind == kind:
        run.append(lines[position].index)
        position += 1

    return run


def pair_lines(lines: Sequence[DiffLine]) -> LinePairing:
    """
    Pair each run of removed lines with the run of added lines that follows it.

    Runs are zipped positionally; whatever is left over in the longer run stays
    unpaired.  If the hunk only adds or only removes lines then nothing is paired.

    Args:
        lines: Classified hunk lines, in hunk order

    Returns:
        The pairing
    """
    removes = frozenset(line.index for line in lines if line.kind == DiffLineKind.REMOVE)
    adds = frozenset(line.index for line in lines if line.kind == DiffLineKind.ADD)
    if not removes or not adds:
        return LinePairing((), removes, adds)

    pairs: List[LinePair] = []
    position = 0
    while position < len(lines):
        if lines[position].kind != DiffLineKind.REMOVE:
            position += 1
            continue

        run_removes = _collect_run(lines, position, DiffLineKind.REMOVE)
        position += len(run_removes)
        run_adds = _collect_run(lines, position, DiffLineKind.ADD)
        position += len(run_adds)

        pairs.extend(LinePair(r, a) for r, a in zip(run_removes, run_adds))

    paired_removes = {pair.remove_index for pair in pairs}
    paired_adds = {pair.add_index for pair in pairs}
    return LinePairing(tuple(pairs), removes - paired_removes, adds - paired_adds)
