"""
Syntax highlighting of a hunk's before and after sequences.

A hunk interleaves two files.  The removed and context lines, in order, are a
slice of the old file; the added and context lines are a slice of the new
file.  Tokenizer continuation state only makes sense within one of those
slices, so each is highlighted as its own fold, carrying its own state.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from diff import DiffLine, DiffLineKind
from syntax import ProgrammingLanguage, StyledToken, Tokenizer


LineTokens = Tuple[StyledToken, ...] | None


@dataclass(frozen=True)
class HighlightedSequences:
    """
    Tokens for each line of a hunk, by line index.

    Attributes:
        before: Tokens for removed and context lines, highlighted as the old file
        after: Tokens for added and context lines, highlighted as the new file
    """
    before: Dict[int, LineTokens]
    after: Dict[int, LineTokens]

    def tokens_for(self, line: DiffLine) -> LineTokens:
        """
        Get the tokens to display for a line.

        Context lines use their old-file tokens, falling back to the new-file
        tokens if the old-file tokenization failed.
        """
        if line.kind == DiffLineKind.REMOVE:
            return self.before.get(line.index)

        if line.kind == DiffLineKind.ADD:
            return self.after.get(line.index)

        tokens = self.before.get(line.index)
        if tokens:
            return tokens

        return self.after.get(line.index)


class SequenceHighlighter:
    """Highlights the before and after sequences of a hunk with a tokenizer."""

    def __init__(self, tokenizer: Tokenizer, language: ProgrammingLanguage) -> None:
        self._tokenizer = tokenizer
        self._language = language
        self._logger = logging.getLogger("SequenceHighlighter")

    def highlight(self, lines: Sequence[DiffLine]) -> HighlightedSequences:
        """
        Highlight both sequences, one after the other.

        Args:
            lines: Classified hunk lines in hunk order

        Returns:
            Tokens for every line of each sequence
        """
        return HighlightedSequences(
            before=self.highlight_before(lines),
            after=self.highlight_after(lines)
        )

    async def highlight_async(self, lines: Sequence[DiffLine]) -> HighlightedSequences:
        """
        Highlight both sequences concurrently.

        Each sequence still runs strictly in line order; only the two
        sequences overlap, each in its own executor thread.
        """
        loop = asyncio.get_event_loop()
        before, after = await asyncio.gather(
            loop.run_in_executor(None, self.highlight_before, lines),
            loop.run_in_executor(None, self.highlight_after, lines)
        )
        return HighlightedSequences(before=before, after=after)

    def highlight_before(self, lines: Sequence[DiffLine]) -> Dict[int, LineTokens]:
        """Highlight the removed and context lines as the old file."""
        return self._fold(lines, DiffLineKind.ADD)

    def highlight_after(self, lines: Sequence[DiffLine]) -> Dict[int, LineTokens]:
        """Highlight the added and context lines as the new file."""
        return self._fold(lines, DiffLineKind.REMOVE)

    def _fold(self, lines: Sequence[DiffLine], excluded_kind: DiffLineKind) -> Dict[int, LineTokens]:
        """Tokenize every line not of `excluded_kind`, in order, threading the tokenizer state."""
        tokens_by_index: Dict[int, LineTokens] = {}
        state: Any | None = None
        for line in lines:
            if line.kind == excluded_kind:
                continue

            tokens, state = self._tokenize_line(line, state)
            tokens_by_index[line.index] = tokens

        return tokens_by_index

    def _tokenize_line(self, line: DiffLine, state: Any | None) -> Tuple[LineTokens, Any | None]:
        """
        Tokenize one line.

        A tokenizer failure leaves the line without tokens and restarts the
        sequence's state; it never stops the rest of the hunk from highlighting.
        """
        try:
            tokens, next_state = self._tokenizer.tokenize(line.content, self._language, state)

        except Exception as e:  # pylint: disable=broad-exception-caught
            self._logger.debug("Tokenizer failed on hunk line %d: %s", line.index, str(e))
            return None, None

        return tuple(tokens), next_state


async def highlight_sequences_async(
    lines: Sequence[DiffLine],
    tokenizer: Tokenizer,
    language: ProgrammingLanguage
) -> HighlightedSequences:
    """
    Highlight a hunk's before and after sequences concurrently.

    Args:
        lines: Classified hunk lines in hunk order
        tokenizer: Tokenizer to use for both sequences
        language: Language to highlight as

    Returns:
        Tokens for every line of each sequence
    """
    return await SequenceHighlighter(tokenizer, language).highlight_async(lines)
