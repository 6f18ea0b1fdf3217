"""Tests for view mode selection and view settings."""

import json

import pytest

from diff_view import DiffViewSettings, RenderTarget, ViewMode, ViewModeSelector, WordDiffPolicy, select_view_mode


class TestSelectViewMode:
    """Test choosing between unified and split view."""

    @pytest.mark.parametrize("additions,deletions,width,expected", [
        (3, 0, 500, ViewMode.UNIFIED),
        (0, 3, 500, ViewMode.UNIFIED),
        (0, 0, 500, ViewMode.UNIFIED),
        (1, 1, 99, ViewMode.UNIFIED),
        (1, 1, 100, ViewMode.SPLIT),
        (5, 2, 240, ViewMode.SPLIT),
    ])
    def test_terminal_threshold(self, additions, deletions, width, expected):
        """Test the default terminal threshold."""
        assert select_view_mode(additions, deletions, width) == expected

    def test_web_threshold(self):
        """Test that static web output needs a wider view."""
        selector = ViewModeSelector(target=RenderTarget.WEB)

        assert selector.threshold == 150
        assert selector.select(1, 1, 120) == ViewMode.UNIFIED
        assert selector.select(1, 1, 150) == ViewMode.SPLIT

    def test_custom_threshold(self):
        """Test a threshold from settings."""
        selector = ViewModeSelector(DiffViewSettings(split_threshold=60))

        assert selector.select(1, 1, 60) == ViewMode.SPLIT


class TestDiffViewSettings:
    """Test view settings."""

    def test_defaults(self):
        """Test default values."""
        settings = DiffViewSettings.create_default()

        assert settings.split_threshold == 100
        assert settings.web_split_threshold == 150
        assert settings.word_diff_policy == WordDiffPolicy.SIMILARITY
        assert settings.similarity_threshold == 0.5
        assert settings.max_changed_span == 80
        assert settings.tab_width == 4

    def test_save_and_load(self, tmp_path):
        """Test that saved settings load back unchanged."""
        path = tmp_path / "settings.json"
        settings = DiffViewSettings(split_threshold=120, word_diff_policy=WordDiffPolicy.SPAN_LENGTH, tab_width=8)

        settings.save(str(path))

        assert json.loads(path.read_text(encoding="utf-8"))["word_diff_policy"] == "span_length"
        assert DiffViewSettings.load(str(path)) == settings

    def test_load_partial(self, tmp_path):
        """Test that missing keys take defaults and unknown keys are ignored."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"tab_width": 2, "theme": "dark"}), encoding="utf-8")

        settings = DiffViewSettings.load(str(path))

        assert settings.tab_width == 2
        assert settings.split_threshold == 100

    def test_load_invalid_json(self, tmp_path):
        """Test that a corrupt file is reported."""
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            DiffViewSettings.load(str(path))

    @pytest.mark.parametrize("data", [
        {"similarity_threshold": 1.5},
        {"tab_width": 0},
        {"split_threshold": 0},
        {"max_changed_span": -1},
        {"word_diff_policy": "sometimes"},
    ])
    def test_load_invalid_values(self, tmp_path, data):
        """Test that out-of-range values are rejected."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(ValueError):
            DiffViewSettings.load(str(path))
