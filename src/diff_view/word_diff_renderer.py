"""Word-level diff of a replaced line pair."""

import difflib
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Tuple

from diff import similarity
from diff_view.diff_view_settings import DiffViewSettings, WordDiffPolicy
from diff_view.styled_text import StyleRole, StyledSegment, StyledText


# Words, whitespace runs, or single punctuation characters.  Joining the tokens
# always gives back the original string.
_WORD_TOKEN = re.compile(r'\w+|\s+|[^\w\s]')


class WordChange(Enum):
    """How a word diff part relates the two lines."""

    EQUAL = auto()
    REMOVED = auto()
    ADDED = auto()


@dataclass(frozen=True)
class WordDiffPart:
    """A run of text that is common, removed or added."""

    text: str
    change: WordChange


@dataclass(frozen=True)
class WordDiff:
    """
    Word-level diff between a removed and an added line.

    Parts are in line order; where text was replaced the removed part comes
    before the added part.
    """
    parts: Tuple[WordDiffPart, ...]

    @property
    def removed_length(self) -> int:
        """Total length of removed text."""
        return sum(len(part.text) for part in self.parts if part.change == WordChange.REMOVED)

    @property
    def added_length(self) -> int:
        """Total length of added text."""
        return sum(len(part.text) for part in self.parts if part.change == WordChange.ADDED)

    def old_text(self) -> str:
        """The removed line, rebuilt from the parts."""
        return "".join(part.text for part in self.parts if part.change != WordChange.ADDED)

    def new_text(self) -> str:
        """The added line, rebuilt from the parts."""
        return "".join(part.text for part in self.parts if part.change != WordChange.REMOVED)


def tokenize_words(text: str) -> List[str]:
    """Split a line into word, whitespace and punctuation tokens."""
    return _WORD_TOKEN.findall(text)


def compute_word_diff(old: str, new: str) -> WordDiff:
    """
    Compute a word-level diff between two lines.

    Args:
        old: The removed line
        new: The added line

    Returns:
        The diff, with adjacent parts of the same kind merged
    """
    old_tokens = tokenize_words(old)
    new_tokens = tokenize_words(new)
    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)

    parts: List[WordDiffPart] = []

    def add_part(text: str, change: WordChange) -> None:
        if not text:
            return

        if parts and parts[-1].change == change:
            parts[-1] = WordDiffPart(parts[-1].text + text, change)
            return

        parts.append(WordDiffPart(text, change))

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            add_part("".join(old_tokens[i1:i2]), WordChange.EQUAL)
            continue

        add_part("".join(old_tokens[i1:i2]), WordChange.REMOVED)
        add_part("".join(new_tokens[j1:j2]), WordChange.ADDED)

    return WordDiff(tuple(parts))


@dataclass(frozen=True)
class WordDiffResult:
    """Display content for both lines of a word-diffed pair."""

    removed: StyledText
    added: StyledText


class WordDiffRenderer:
    """
    Renders replaced line pairs with their changed words marked.

    Pairs that are too different are left for ordinary syntax highlighting,
    because marking nearly every word of an unrelated replacement is just noise.
    """

    def __init__(self, settings: DiffViewSettings | None = None) -> None:
        self._settings = settings or DiffViewSettings.create_default()

    def should_skip(self, old: str, new: str, word_diff: WordDiff | None = None) -> bool:
        """
        Check whether a pair is too different for word diff.

        Args:
            old: The removed line
            new: The added line
            word_diff: The pair's word diff, if already computed

        Returns:
            True if the pair should be shown with syntax highlighting only
        """
        if self._settings.word_diff_policy == WordDiffPolicy.SIMILARITY:
            return similarity(old, new) < self._settings.similarity_threshold

        if word_diff is None:
            word_diff = compute_word_diff(old, new)

        limit = self._settings.max_changed_span
        return word_diff.removed_length > limit or word_diff.added_length > limit

    def render_pair(self, old: str, new: str) -> WordDiffResult | None:
        """
        Render a removed/added line pair with word-level highlighting.

        Args:
            old: The removed line, without its prefix
            new: The added line, without its prefix

        Returns:
            Styled content for both lines, or None if the pair should fall back
            to syntax highlighting
        """
        if self._settings.word_diff_policy == WordDiffPolicy.SIMILARITY and self.should_skip(old, new):
            return None

        word_diff = compute_word_diff(old, new)
        if self._settings.word_diff_policy == WordDiffPolicy.SPAN_LENGTH and self.should_skip(old, new, word_diff):
            return None

        removed: List[StyledSegment] = []
        added: List[StyledSegment] = []
        for part in word_diff.parts:
            if part.change == WordChange.EQUAL:
                removed.append(StyledSegment(part.text))
                added.append(StyledSegment(part.text))

            elif part.change == WordChange.REMOVED:
                removed.append(StyledSegment(part.text, StyleRole.REMOVED_WORD))

            else:
                added.append(StyledSegment(part.text, StyleRole.ADDED_WORD))

        return WordDiffResult(tuple(removed), tuple(added))
