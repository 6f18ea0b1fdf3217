"""Choice between unified and split view."""

from enum import Enum

from diff_view.diff_view_settings import DiffViewSettings
from diff_view.diff_view_types import ViewMode


class RenderTarget(Enum):
    """Where the diff will be shown."""

    TERMINAL = "terminal"
    WEB = "web"


def select_view_mode(additions: int, deletions: int, width: int, split_threshold: int = 100) -> ViewMode:
    """
    Pick the view mode for a diff.

    Split view only helps when there is something to compare side by side, so
    pure additions and pure deletions are always unified.

    Args:
        additions: Number of added lines
        deletions: Number of removed lines
        width: Available width in columns
        split_threshold: Minimum width for split view

    Returns:
        The view mode
    """
    if additions == 0 or deletions == 0:
        return ViewMode.UNIFIED

    return ViewMode.SPLIT if width >= split_threshold else ViewMode.UNIFIED


class ViewModeSelector:
    """Selects view modes using the thresholds from the view settings."""

    def __init__(self, settings: DiffViewSettings | None = None, target: RenderTarget = RenderTarget.TERMINAL) -> None:
        self._settings = settings or DiffViewSettings.create_default()
        self._target = target

    @property
    def threshold(self) -> int:
        """The split threshold for this selector's render target."""
        if self._target == RenderTarget.WEB:
            return self._settings.web_split_threshold

        return self._settings.split_threshold

    def select(self, additions: int, deletions: int, width: int) -> ViewMode:
        """
        Choose the view mode for a file using this selector's threshold.

        Args:
            additions: Number of added lines in the file
            deletions: Number of removed lines in the file
            width: Available width in columns

        Returns:
            SPLIT or UNIFIED
        """
        return select_view_mode(additions, deletions, width, self.threshold)
