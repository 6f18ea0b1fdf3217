"""Tests for pairing removed lines with added lines."""

from diff.diff_classifier import classify_lines
from diff.diff_pairer import pair_lines
from diff.diff_types import LinePair


class TestPairLines:
    """Test run-based pairing."""

    def test_single_pair(self, replacement_lines):
        """Test a single replaced line."""
        pairing = pair_lines(classify_lines(replacement_lines))

        assert pairing.pairs == (LinePair(1, 2),)
        assert pairing.unpaired_removes == frozenset()
        assert pairing.unpaired_adds == frozenset()

    def test_unequal_runs(self, mixed_hunk):
        """Test that the longer run's leftovers stay unpaired."""
        pairing = pair_lines(classify_lines(mixed_hunk.lines))

        assert pairing.pairs == (LinePair(1, 4), LinePair(2, 5), LinePair(7, 8))
        assert pairing.unpaired_removes == frozenset({3})
        assert pairing.unpaired_adds == frozenset({9})

    def test_cardinality(self):
        """Test min(m, n) pairs and |m - n| orphans for a single run."""
        lines = classify_lines(["-a", "-b", "-c", "-d", "+w", "+x"])
        pairing = pair_lines(lines)

        assert len(pairing.pairs) == 2
        assert len(pairing.unpaired_removes) + len(pairing.unpaired_adds) == 2

    def test_context_breaks_runs(self):
        """Test that a remove run followed by context is not paired across it."""
        pairing = pair_lines(classify_lines(["-a", " ctx", "+b"]))

        assert pairing.pairs == ()
        assert pairing.unpaired_removes == frozenset({0})
        assert pairing.unpaired_adds == frozenset({2})

    def test_add_before_remove_not_paired(self):
        """Test that an add run preceding a remove run is not paired with it."""
        pairing = pair_lines(classify_lines(["+a", "-b"]))

        assert pairing.pairs == ()

    def test_pure_addition(self):
        """Test that an addition-only hunk has only orphans."""
        pairing = pair_lines(classify_lines(["+a", "+b", "+c"]))

        assert pairing.pairs == ()
        assert pairing.unpaired_adds == frozenset({0, 1, 2})

    def test_pure_deletion(self):
        """Test that a deletion-only hunk has only orphans."""
        pairing = pair_lines(classify_lines([" x", "-a", "-b"]))

        assert pairing.pairs == ()
        assert pairing.unpaired_removes == frozenset({1, 2})

    def test_deterministic(self, mixed_hunk):
        """Test that pairing the same lines twice gives the same result."""
        lines = classify_lines(mixed_hunk.lines)

        assert pair_lines(lines) == pair_lines(lines)

    def test_each_index_used_once(self, mixed_hunk):
        """Test that no line appears in more than one pair."""
        pairing = pair_lines(classify_lines(mixed_hunk.lines))
        used = [pair.remove_index for pair in pairing.pairs] + [pair.add_index for pair in pairing.pairs]

        assert len(used) == len(set(used))

    def test_partner_map(self, replacement_lines):
        """Test that the partner map goes both ways."""
        pairing = pair_lines(classify_lines(replacement_lines))

        assert pairing.partner_map() == {1: 2, 2: 1}
