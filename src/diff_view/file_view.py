"""
Hunk and file views: the diff view's top-level entry points.

`DiffView` ties the pieces together.  For each hunk it classifies the lines,
pairs them, highlights the before and after sequences, resolves each line's
content and lays the result out in the chosen view mode.
"""

import logging
from typing import List, Sequence, Tuple

from diff import DiffHunk, MalformedLineError, classify_hunk, count_changes, pair_lines
from diff_view.diff_view_settings import DiffViewSettings
from diff_view.diff_view_types import FileView, HunkView, RenderedLine, ViewMode
from diff_view.layout_builder import LayoutBuilder
from diff_view.line_renderer import LineRenderer
from diff_view.renderer import PlainTextRenderer, Renderer
from diff_view.sequence_highlighter import HighlightedSequences, SequenceHighlighter
from diff_view.view_mode_selector import RenderTarget, ViewModeSelector
from syntax import ProgrammingLanguage, Tokenizer


# Room taken by the marker and the spaces around it, after the line number.
_GUTTER_PADDING = 3

# Width of the separator between split columns.
_SEPARATOR_WIDTH = 3


def describe_file_edit(path: str, hunks: Sequence[DiffHunk]) -> str:
    """
    Summarise an edit to a file.

    Args:
        path: The file's path
        hunks: The edit's hunks

    Returns:
        A title such as "Updated foo.py with 2 additions and 1 removal"
    """
    additions, deletions = count_changes(hunks)
    if additions > 0 and deletions == 0:
        action = "Created"

    elif deletions > 0 and additions == 0:
        action = "Deleted"

    else:
        action = "Updated"

    changes: List[str] = []
    if additions > 0:
        changes.append(f"{additions} {'additions' if additions > 1 else 'addition'}")

    if deletions > 0:
        changes.append(f"{deletions} {'removals' if deletions > 1 else 'removal'}")

    if not changes:
        return f"{action} {path}"

    return f"{action} {path} with {' and '.join(changes)}"


class DiffView:
    """Builds rendered, laid-out views of hunks and files."""

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        settings: DiffViewSettings | None = None,
        target: RenderTarget = RenderTarget.TERMINAL
    ) -> None:
        """
        Initialize the view.

        Args:
            tokenizer: Tokenizer for syntax highlighting, or None for plain text
            settings: View settings, or None for the defaults
            target: Where the view will be shown, which sets the split threshold
        """
        self._tokenizer = tokenizer
        self._settings = settings or DiffViewSettings.create_default()
        self._line_renderer = LineRenderer(self._settings)
        self._layout_builder = LayoutBuilder(self._settings.tab_width)
        self._mode_selector = ViewModeSelector(self._settings, target)
        self._logger = logging.getLogger("DiffView")

    @property
    def layout_builder(self) -> LayoutBuilder:
        """The layout builder, for callers that wrap or lay out rows themselves."""
        return self._layout_builder

    def render_lines(
        self,
        hunk: DiffHunk,
        language: ProgrammingLanguage = ProgrammingLanguage.TEXT,
        highlighted: HighlightedSequences | None = None
    ) -> List[RenderedLine]:
        """
        Render a hunk's lines with their numbers and content.

        Args:
            hunk: The hunk
            language: Language to highlight as
            highlighted: Precomputed highlighting, or None to highlight now

        Returns:
            Rendered lines in hunk order

        Raises:
            MalformedLineError: If a hunk line has no valid prefix
        """
        lines = classify_hunk(hunk)
        if highlighted is None and self._tokenizer is not None:
            highlighted = SequenceHighlighter(self._tokenizer, language).highlight(lines)

        return self._line_renderer.render(lines, hunk.old_start, hunk.new_start, highlighted, pair_lines(lines))

    async def render_lines_async(
        self,
        hunk: DiffHunk,
        language: ProgrammingLanguage = ProgrammingLanguage.TEXT
    ) -> List[RenderedLine]:
        """
        Render a hunk's lines, highlighting the before and after sequences concurrently.

        Raises:
            MalformedLineError: If a hunk line has no valid prefix
        """
        lines = classify_hunk(hunk)
        highlighted = None
        if self._tokenizer is not None:
            highlighted = await SequenceHighlighter(self._tokenizer, language).highlight_async(lines)

        return self._line_renderer.render(lines, hunk.old_start, hunk.new_start, highlighted, pair_lines(lines))

    def select_mode(self, hunks: Sequence[DiffHunk], width: int) -> ViewMode:
        """Pick the view mode for a set of hunks at a given width."""
        additions, deletions = count_changes(hunks)
        return self._mode_selector.select(additions, deletions, width)

    def build_hunk_view(
        self,
        hunk: DiffHunk,
        mode: ViewMode,
        language: ProgrammingLanguage = ProgrammingLanguage.TEXT,
        lines: List[RenderedLine] | None = None
    ) -> HunkView:
        """
        Build the view of a single hunk.

        Raises:
            MalformedLineError: If a hunk line has no valid prefix
        """
        if lines is None:
            lines = self.render_lines(hunk, language)

        if mode == ViewMode.SPLIT:
            return HunkView(hunk, lines, split=self._layout_builder.build_split(lines))

        return HunkView(hunk, lines, unified=self._layout_builder.build_unified(lines))

    def build_file_view(
        self,
        hunks: Sequence[DiffHunk],
        width: int,
        language: ProgrammingLanguage = ProgrammingLanguage.TEXT,
        filename: str = ""
    ) -> FileView:
        """
        Build the view of all of a file's hunks.

        The view mode is chosen once for the whole file.  Line-number gutters
        are sized to the largest number in any hunk so the hunks line up.
        Hunks with malformed lines are dropped and the rest are still shown.

        Args:
            hunks: The file's hunks
            width: Available width in columns
            language: Language to highlight as
            filename: The file's name

        Returns:
            The file view
        """
        additions, deletions = count_changes(hunks)
        mode = self._mode_selector.select(additions, deletions, width)

        rendered: List[Tuple[DiffHunk, List[RenderedLine]]] = []
        dropped = 0
        for hunk in hunks:
            try:
                rendered.append((hunk, self.render_lines(hunk, language)))

            except MalformedLineError as e:
                self._logger.warning("Dropping malformed hunk in '%s': %s", filename, e)
                dropped += 1

        all_lines = [line for _, lines in rendered for line in lines]
        file_view = FileView(filename, mode, dropped_hunks=dropped, additions=additions, deletions=deletions)

        if mode == ViewMode.SPLIT:
            left_width, right_width = self._layout_builder.split_number_widths(all_lines)
            for hunk, lines in rendered:
                layout = self._layout_builder.build_split(lines, left_width, right_width)
                file_view.hunks.append(HunkView(hunk, lines, split=layout))

            return file_view

        number_width = self._layout_builder.unified_number_width(all_lines)
        for hunk, lines in rendered:
            layout = self._layout_builder.build_unified(lines, number_width)
            file_view.hunks.append(HunkView(hunk, lines, unified=layout))

        return file_view

    def render_text(self, file_view: FileView, width: int, renderer: Renderer | None = None) -> List[str]:
        """
        Wrap a file view to a width and render it.

        Args:
            file_view: The view to render
            width: Total output width in columns
            renderer: Backend to render with, or None for plain text

        Returns:
            Output lines, hunk after hunk
        """
        if renderer is None:
            renderer = PlainTextRenderer()

        output: List[str] = []
        for hunk_view in file_view.hunks:
            if hunk_view.split is not None:
                layout = hunk_view.split
                gutters = layout.left_width + layout.right_width + 2 * _GUTTER_PADDING + _SEPARATOR_WIDTH
                column_width = max(1, (width - gutters) // 2)
                rows = self._layout_builder.wrap_split_rows(layout, column_width)
                output.extend(renderer.render_split(rows, column_width))
                continue

            if hunk_view.unified is not None:
                layout = hunk_view.unified
                text_width = max(1, width - layout.line_number_width - _GUTTER_PADDING)
                output.extend(renderer.render_unified(self._layout_builder.wrap_unified_rows(layout, text_width)))

        return output
