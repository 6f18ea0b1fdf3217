"""Edit-distance similarity between two lines."""

from typing import List


def levenshtein(a: str, b: str) -> int:
    """
    Classic Levenshtein edit distance, counted in code points.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character insertions, deletions and substitutions
    """
    if len(a) < len(b):
        a, b = b, a

    if not b:
        return len(a)

    previous: List[int] = list(range(len(b) + 1))
    for i, ch_a in enumerate(a, 1):
        current = [i]
        for j, ch_b in enumerate(b, 1):
            cost = 0 if ch_a == ch_b else 1
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost
            ))

        previous = current

    return previous[-1]


def similarity(a: str, b: str) -> float:
    """
    Similarity of two strings in the range [0, 1].

    1.0 means identical, 0.0 means nothing in common.  Two empty strings are
    considered identical.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0

    return (longest - levenshtein(a, b)) / longest
