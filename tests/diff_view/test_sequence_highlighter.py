"""Tests for before/after sequence highlighting."""

import asyncio
import logging
from unittest.mock import MagicMock

from diff import classify_lines
from diff_view.sequence_highlighter import SequenceHighlighter, highlight_sequences_async
from syntax import ProgrammingLanguage, StyledToken, Tokenizer, TokenType


class TestSequenceMembership:
    """Test which lines each sequence covers."""

    def test_before_and_after(self, tokenizer, replacement_lines):
        """Test that context lines appear in both sequences."""
        result = SequenceHighlighter(tokenizer, ProgrammingLanguage.TEXT).highlight(classify_lines(replacement_lines))

        assert set(result.before) == {0, 1, 3}
        assert set(result.after) == {0, 2, 3}

    def test_pure_addition(self, tokenizer):
        """Test that the before sequence of an addition is empty."""
        result = SequenceHighlighter(tokenizer, ProgrammingLanguage.TEXT).highlight(classify_lines(["+a", "+b"]))

        assert result.before == {}
        assert set(result.after) == {0, 1}


class TestStateThreading:
    """Test that each sequence carries its own tokenizer state."""

    def test_sequences_have_separate_state(self, tokenizer):
        """Test that a string opened by a removed line only affects the old file."""
        lines = classify_lines([
            " a = 1",
            '-s = """',
            "+s = 2",
            " print(x)",
        ])

        result = SequenceHighlighter(tokenizer, ProgrammingLanguage.PYTHON).highlight(lines)

        assert [t.color_hint for t in result.before[3]] == [TokenType.STRING]
        assert StyledToken("print", TokenType.FUNCTION_OR_METHOD) in result.after[3]

    def test_context_prefers_old_file(self, tokenizer):
        """Test that a context line displays its old-file tokens."""
        lines = classify_lines([' x = """', "-inside", "+inside", ' """'])

        result = SequenceHighlighter(tokenizer, ProgrammingLanguage.PYTHON).highlight(lines)

        assert result.tokens_for(lines[1]) == (StyledToken("inside", TokenType.STRING),)
        assert result.tokens_for(lines[2]) == (StyledToken("inside", TokenType.STRING),)
        assert result.tokens_for(lines[3]) == result.before[3]

    def test_calls_in_line_order(self):
        """Test that each sequence is tokenized in order, threading state."""
        calls = []

        def fake_tokenize(text, language, state):
            calls.append((text, state))
            return [StyledToken(text)], text

        tokenizer = MagicMock(spec=Tokenizer)
        tokenizer.tokenize.side_effect = fake_tokenize

        SequenceHighlighter(tokenizer, ProgrammingLanguage.TEXT).highlight_before(
            classify_lines([" one", "+skip", "-two", " three"])
        )

        assert calls == [("one", None), ("two", "one"), ("three", "two")]


class TestTokenizerFailures:
    """Test that tokenizer errors don't stop highlighting."""

    def test_failure_resets_state(self, caplog):
        """Test that a failing line has no tokens and the next line starts fresh."""
        calls = []

        def fake_tokenize(text, language, state):
            calls.append((text, state))
            if text == "bad":
                raise RuntimeError("tokenizer exploded")

            return [StyledToken(text)], "state-after-" + text

        tokenizer = MagicMock(spec=Tokenizer)
        tokenizer.tokenize.side_effect = fake_tokenize

        with caplog.at_level(logging.DEBUG, logger="SequenceHighlighter"):
            result = SequenceHighlighter(tokenizer, ProgrammingLanguage.TEXT).highlight(
                classify_lines(["-first", "-bad", "-after"])
            )

        assert result.before[0] == (StyledToken("first"),)
        assert result.before[1] is None
        assert result.before[2] == (StyledToken("after"),)
        assert ("after", None) in calls
        assert "tokenizer exploded" in caplog.text


class TestAsyncHighlighting:
    """Test concurrent highlighting."""

    def test_async_matches_sync(self, tokenizer, mixed_lines):
        """Test that concurrent folds give the same result as sequential ones."""
        lines = classify_lines(mixed_lines)
        highlighter = SequenceHighlighter(tokenizer, ProgrammingLanguage.PYTHON)

        result = asyncio.run(highlighter.highlight_async(lines))

        assert result == highlighter.highlight(lines)

    def test_module_function(self, tokenizer, replacement_lines):
        """Test the module-level helper."""
        lines = classify_lines(replacement_lines)

        result = asyncio.run(highlight_sequences_async(lines, tokenizer, ProgrammingLanguage.TEXT))

        assert result.after[2] == (StyledToken("  return 'hello world';", TokenType.TEXT),)
