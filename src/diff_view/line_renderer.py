"""Resolution of each hunk line's line numbers and display content."""

import logging
from typing import Dict, List, Sequence

from diff import DiffLine, DiffLineKind, LinePairing, pair_lines
from diff_view.diff_view_settings import DiffViewSettings
from diff_view.diff_view_types import RenderedLine
from diff_view.sequence_highlighter import HighlightedSequences
from diff_view.styled_text import StyledText, from_tokens, plain_text
from diff_view.word_diff_renderer import WordDiffRenderer


class LineRenderer:
    """
    Turns classified hunk lines into rendered lines.

    Each line's content comes from one of three places: the word diff of its
    pair, its syntax highlighting, or its plain text if it has no tokens.
    """

    def __init__(self, settings: DiffViewSettings | None = None) -> None:
        self._settings = settings or DiffViewSettings.create_default()
        self._word_diff_renderer = WordDiffRenderer(self._settings)
        self._logger = logging.getLogger("LineRenderer")

    def render(
        self,
        lines: Sequence[DiffLine],
        old_start: int,
        new_start: int,
        highlighted: HighlightedSequences | None = None,
        pairing: LinePairing | None = None
    ) -> List[RenderedLine]:
        """
        Render a hunk's lines.

        Args:
            lines: Classified hunk lines in hunk order
            old_start: First old-file line number of the hunk
            new_start: First new-file line number of the hunk
            highlighted: Syntax tokens for the lines, or None to render without highlighting
            pairing: Line pairing, computed from `lines` if not given

        Returns:
            One rendered line per input line, in order
        """
        if pairing is None:
            pairing = pair_lines(lines)

        partners = pairing.partner_map()
        content = self._resolve_content(lines, highlighted, partners)

        rendered: List[RenderedLine] = []
        old_number = old_start
        new_number = new_start
        for line in lines:
            rendered.append(RenderedLine(
                kind=line.kind,
                old_line_number=old_number,
                new_line_number=new_number,
                content=content[line.index],
                index=line.index,
                paired_with=partners.get(line.index)
            ))

            if line.kind != DiffLineKind.ADD:
                old_number += 1

            if line.kind != DiffLineKind.REMOVE:
                new_number += 1

        return rendered

    def _resolve_content(
        self,
        lines: Sequence[DiffLine],
        highlighted: HighlightedSequences | None,
        partners: Dict[int, int]
    ) -> Dict[int, StyledText]:
        by_index = {line.index: line for line in lines}
        content: Dict[int, StyledText] = {}

        for line in lines:
            if line.index in content:
                continue

            if line.kind == DiffLineKind.REMOVE and line.index in partners:
                added = by_index[partners[line.index]]
                result = self._word_diff_renderer.render_pair(line.content, added.content)
                if result is not None:
                    content[line.index] = result.removed
                    content[added.index] = result.added
                    continue

                self._logger.debug("Pair %d/%d too different for word diff", line.index, added.index)

            content[line.index] = self._highlighted_content(line, highlighted)

        return content

    @staticmethod
    def _highlighted_content(line: DiffLine, highlighted: HighlightedSequences | None) -> StyledText:
        if highlighted is None:
            return plain_text(line.content)

        tokens = highlighted.tokens_for(line)
        if tokens is None:
            return plain_text(line.content)

        return from_tokens(tokens)
