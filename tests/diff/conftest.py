"""Shared fixtures and utilities for diff tests."""

import pytest
from typing import List

from diff.diff_patch import create_hunk
from diff.diff_types import DiffHunk, IndexedHunk


class DiffTestHelpers:
    """Helper utilities for diff tests."""

    @staticmethod
    def make_hunk(lines: List[str], old_start: int = 1, new_start: int = 1) -> DiffHunk:
        """Create a hunk whose counts match its lines."""
        old_count = sum(1 for line in lines if line[:1] in (' ', '-'))
        new_count = sum(1 for line in lines if line[:1] in (' ', '+'))
        return DiffHunk(old_start, old_count, new_start, new_count, list(lines))

    @staticmethod
    def make_indexed_hunk(
        hunk_id: int,
        lines: List[str],
        filename: str = "src/app.py",
        old_start: int = 1,
        new_start: int = 1
    ) -> IndexedHunk:
        """Create an indexed hunk whose counts match its lines."""
        return create_hunk(hunk_id, filename, 0, old_start, new_start, lines)


@pytest.fixture
def helpers():
    """Provide helper utilities."""
    return DiffTestHelpers()


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
def mixed_hunk(helpers):
    """A hunk with unequal remove and add runs separated by context."""
    return helpers.make_hunk([
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
    ], old_start=10, new_start=12)


@pytest.fixture
def multi_file_diff():
    """A git diff touching a source file, a lock file and a new file."""
    return """diff --git a/src/app.py b/src/app.py
index 1111111..2222222 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,3 +1,3 @@
 import os
-x = 1
+x = 2
 print(x)
@@ -20,2 +20,3 @@
 def f():
+    pass
     return None
diff --git a/package-lock.json b/package-lock.json
index 3333333..4444444 100644
--- a/package-lock.json
+++ b/package-lock.json
@@ -1,1 +1,1 @@
-{"v": 1}
+{"v": 2}
diff --git a/docs/new.md b/docs/new.md
new file mode 100644
index 0000000..5555555
--- /dev/null
+++ b/docs/new.md
@@ -0,0 +1,2 @@
+# Title
+Body
"""
