"""
Diff view: turns hunks into highlighted, line-numbered unified or split rows.

The package produces abstract styled rows; painting them is left to a
`Renderer` backend.
"""

from diff_view.diff_view_settings import DiffViewSettings, WordDiffPolicy
from diff_view.diff_view_types import (
    EMPTY_PLACEHOLDER,
    EmptyPlaceholder,
    FileView,
    HunkView,
    RenderedLine,
    SplitLayout,
    SplitRow,
    SplitVisualRow,
    UnifiedLayout,
    UnifiedRow,
    UnifiedVisualRow,
    ViewMode,
)
from diff_view.file_view import DiffView, describe_file_edit
from diff_view.highlight_scheduler import HighlightScheduler
from diff_view.layout_builder import LayoutBuilder
from diff_view.line_renderer import LineRenderer
from diff_view.renderer import PlainTextRenderer, Renderer
from diff_view.sequence_highlighter import HighlightedSequences, SequenceHighlighter, highlight_sequences_async
from diff_view.styled_text import (
    StyledSegment,
    StyledText,
    StyleRole,
    display_width,
    expand_tabs,
    plain_text,
    text_of,
    wrap_styled_text,
)
from diff_view.view_mode_selector import RenderTarget, ViewModeSelector, select_view_mode
from diff_view.word_diff_renderer import (
    WordChange,
    WordDiff,
    WordDiffPart,
    WordDiffRenderer,
    WordDiffResult,
    compute_word_diff,
    tokenize_words,
)

__all__ = [
    # Settings
    'DiffViewSettings',
    'WordDiffPolicy',
    # Types
    'EMPTY_PLACEHOLDER',
    'EmptyPlaceholder',
    'FileView',
    'HunkView',
    'RenderedLine',
    'SplitLayout',
    'SplitRow',
    'SplitVisualRow',
    'UnifiedLayout',
    'UnifiedRow',
    'UnifiedVisualRow',
    'ViewMode',
    'StyledSegment',
    'StyledText',
    'StyleRole',
    # Components
    'DiffView',
    'HighlightScheduler',
    'HighlightedSequences',
    'LayoutBuilder',
    'LineRenderer',
    'PlainTextRenderer',
    'Renderer',
    'RenderTarget',
    'SequenceHighlighter',
    'ViewModeSelector',
    'WordChange',
    'WordDiff',
    'WordDiffPart',
    'WordDiffRenderer',
    'WordDiffResult',
    # Functions
    'compute_word_diff',
    'describe_file_edit',
    'display_width',
    'expand_tabs',
    'highlight_sequences_async',
    'plain_text',
    'select_view_mode',
    'text_of',
    'tokenize_words',
    'wrap_styled_text',
]
