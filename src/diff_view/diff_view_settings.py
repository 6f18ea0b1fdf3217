"""Settings for the diff view."""

from dataclasses import asdict, dataclass
from enum import Enum
import json


class WordDiffPolicy(Enum):
    """Rule used to decide a replaced line pair is too different for word diff."""

    SIMILARITY = "similarity"  # Skip when the lines' similarity is below a threshold
    SPAN_LENGTH = "span_length"  # Skip when a changed span is longer than a limit


@dataclass
class DiffViewSettings:
    """
    Diff view settings.

    Attributes:
        split_threshold: Minimum terminal width for split view
        web_split_threshold: Minimum width for split view in static web output
        word_diff_policy: How to decide whether a line pair gets word diff
        similarity_threshold: Pairs less similar than this skip word diff (SIMILARITY policy)
        max_changed_span: Longest removed or added span allowed (SPAN_LENGTH policy)
        tab_width: Tab stop width used when wrapping
    """
    split_threshold: int = 100
    web_split_threshold: int = 150
    word_diff_policy: WordDiffPolicy = WordDiffPolicy.SIMILARITY
    similarity_threshold: float = 0.5
    max_changed_span: int = 80
    tab_width: int = 4

    def __post_init__(self) -> None:
        if self.split_threshold < 1 or self.web_split_threshold < 1:
            raise ValueError("Split thresholds must be positive")

        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError(f"Similarity threshold must be between 0 and 1, got {self.similarity_threshold}")

        if self.max_changed_span < 0:
            raise ValueError(f"Maximum changed span can't be negative, got {self.max_changed_span}")

        if self.tab_width < 1:
            raise ValueError(f"Tab width must be at least 1, got {self.tab_width}")

    @classmethod
    def create_default(cls) -> "DiffViewSettings":
        """Create settings with default values."""
        return cls()

    @classmethod
    def load(cls, path: str) -> "DiffViewSettings":
        """
        Load settings from a JSON file.

        Keys that are missing take their default values; unknown keys are ignored.

        Args:
            path: Path to the settings file

        Returns:
            DiffViewSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            ValueError: If a setting has an invalid value
        """
        defaults = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return cls(
            split_threshold=int(data.get("split_threshold", defaults.split_threshold)),
            web_split_threshold=int(data.get("web_split_threshold", defaults.web_split_threshold)),
            word_diff_policy=WordDiffPolicy(data.get("word_diff_policy", defaults.word_diff_policy.value)),
            similarity_threshold=float(data.get("similarity_threshold", defaults.similarity_threshold)),
            max_changed_span=int(data.get("max_changed_span", defaults.max_changed_span)),
            tab_width=int(data.get("tab_width", defaults.tab_width))
        )

    def save(self, path: str) -> None:
        """
        Save settings to a JSON file.

        Args:
            path: Path to save the settings file
        """
        data = asdict(self)
        data["word_diff_policy"] = self.word_diff_policy.value

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
