"""Shared fixtures for diff view tests."""

import pytest

from diff_view import DiffViewSettings
from syntax import ParserTokenizer


@pytest.fixture
def tokenizer():
    """Provide the parser-backed tokenizer."""
    return ParserTokenizer()


@pytest.fixture
def settings():
    """Provide default view settings."""
    return DiffViewSettings.create_default()


@pytest.fixture
def replacement_lines():
    """A context line, one replaced line and another context line."""
    return [
        " function hello() {",
        "-  return 'hello';",
        "+  return 'hello world';",
        " }",
    ]


@pytest.fixture
def mixed_lines():
    """Unequal remove and add runs separated by context."""
    return [
        " def main():",
        "-    a = 1",
        "-    b = 2",
        "-    c = 3",
        "+    a = 10",
        "+    b = 20",
        "     print(a)",
        "-    return a",
        "+    return a + b",
        "+    # done",
    ]
