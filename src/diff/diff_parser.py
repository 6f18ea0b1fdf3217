"""Unified diff parsing."""

import logging
import re
from typing import List, Tuple

from diff.diff_exceptions import DiffParseError
from diff.diff_patch import build_patch
from diff.diff_types import DiffFile, DiffHunk, IndexedHunk


# Lock files never get reviewed.
IGNORED_FILES = [
    "pnpm-lock.yaml",
    "package-lock.json",
    "yarn.lock",
    "bun.lockb",
    "Cargo.lock",
    "poetry.lock",
    "Gemfile.lock",
    "composer.lock",
    "uv.lock",
]

# Generated files that add noise to a review without adding insight.
AUTO_GENERATED_PATTERNS = [
    re.compile(r'\.generated\.(ts|js|tsx|jsx)$'),
    re.compile(r'\.g\.(ts|js)$'),
    re.compile(r'\.min\.(js|css)$'),
    re.compile(r'\.bundle\.(js|css)$'),
    re.compile(r'\.map$'),
    re.compile(r'\.d\.ts$'),
    re.compile(r'migrations/\d{10,}.*\.(sql|ts|js)$'),
    re.compile(r'__snapshots__/'),
    re.compile(r'\.snap$'),
]

_HUNK_HEADER = re.compile(r'^@@\s+-(\d+)(?:,(\d+))?\s+\+(\d+)(?:,(\d+))?\s+@@')


def should_skip_file(filename: str) -> bool:
    """
    Check if a file should be left out of a review.

    Returns:
        True for lock files and auto-generated files
    """
    base_name = filename.split("/")[-1]
    if base_name in IGNORED_FILES or base_name.endswith(".lock"):
        return True

    return any(pattern.search(filename) for pattern in AUTO_GENERATED_PATTERNS)


class DiffParser:
    """Parser for unified diff format."""

    def __init__(self) -> None:
        self._logger = logging.getLogger("DiffParser")

    def parse(self, diff_text: str) -> List[DiffHunk]:
        """
        Parse unified diff text into structured hunks.

        Args:
            diff_text: Unified diff format text

        Returns:
            List of parsed hunks, across all files

        Raises:
            DiffParseError: If parsing fails
        """
        if not diff_text or not diff_text.strip():
            raise DiffParseError("Empty diff provided")

        hunks = [hunk for diff_file in self.parse_files(diff_text) for hunk in diff_file.hunks]
        if not hunks:
            raise DiffParseError("No valid hunks found in diff")

        return hunks

    def parse_files(self, diff_text: str) -> List[DiffFile]:
        """
        Parse unified diff text into per-file hunk lists.

        Handles plain `---`/`+++` headers as well as git's `diff --git` headers,
        including renames.  Files with no hunks (pure renames, mode changes) are
        returned with an empty hunk list.

        Args:
            diff_text: Unified diff format text

        Returns:
            Parsed files in diff order

        Raises:
            DiffParseError: If a hunk header is malformed
        """
        lines = diff_text.splitlines()
        files: List[DiffFile] = []
        current: DiffFile | None = None

        i = 0
        while i < len(lines):
            line = lines[i]

            if line.startswith('diff --git '):
                old_name, new_name = self._parse_git_header(line)
                current = DiffFile(old_name, new_name)
                files.append(current)
                i += 1
                continue

            if line.startswith('--- ') and i + 1 < len(lines) and lines[i + 1].startswith('+++ '):
                old_name = self._strip_file_name(line[4:], 'a/')
                new_name = self._strip_file_name(lines[i + 1][4:], 'b/')
                if current is None or current.hunks:
                    current = DiffFile(old_name, new_name)
                    files.append(current)

                else:
                    current.old_filename = old_name
                    current.new_filename = new_name

                i += 2
                continue

            if current is not None and not current.hunks:
                if line.startswith('rename from '):
                    current.old_filename = line[len('rename from '):]

                elif line.startswith('rename to '):
                    current.new_filename = line[len('rename to '):]

            if line.startswith('@@'):
                if current is None:
                    current = DiffFile(None, None)
                    files.append(current)

                hunk, i = self._parse_hunk(lines, i)
                current.hunks.append(hunk)
                continue

            i += 1

        return files

    def parse_hunks_with_ids(self, diff_text: str) -> List[IndexedHunk]:
        """
        Parse a diff into hunks numbered from 1 across all files.

        Lock files and generated files are skipped.

        Args:
            diff_text: Unified diff format text

        Returns:
            Indexed hunks in diff order
        """
        indexed: List[IndexedHunk] = []
        next_id = 1
        for diff_file in self.parse_files(diff_text):
            filename = diff_file.filename
            if should_skip_file(filename):
                self._logger.debug("Skipping generated or lock file: %s", filename)
                continue

            for hunk_index, hunk in enumerate(diff_file.hunks):
                indexed.append(IndexedHunk(
                    old_start=hunk.old_start,
                    old_count=hunk.old_count,
                    new_start=hunk.new_start,
                    new_count=hunk.new_count,
                    lines=hunk.lines,
                    id=next_id,
                    filename=filename,
                    hunk_index=hunk_index,
                    raw_diff=build_patch(filename, hunk.old_start, hunk.new_start, hunk.lines)
                ))
                next_id += 1

        return indexed

    @staticmethod
    def _strip_file_name(name: str, prefix: str) -> str:
        """Remove any timestamp and the a/ or b/ prefix from a header file name."""
        name = name.split('\t')[0].strip()
        if name != '/dev/null' and name.startswith(prefix):
            return name[len(prefix):]

        return name

    @staticmethod
    def _parse_git_header(line: str) -> Tuple[str, str]:
        """Extract the old and new file names from a `diff --git` line."""
        rest = line[len('diff --git '):]
        if rest.startswith('a/') and ' b/' in rest:
            old_name, new_name = rest[2:].split(' b/', 1)
            return old_name, new_name

        old_name, _, new_name = rest.partition(' ')
        return old_name, new_name or old_name

    def _parse_hunk(self, lines: List[str], start_idx: int) -> Tuple[DiffHunk, int]:
        """
        Parse a single hunk starting at the given index.

        Args:
            lines: All lines from the diff
            start_idx: Index of the @@ line

        Returns:
            Tuple of (parsed hunk, index of the first line after the hunk)

        Raises:
            DiffParseError: If hunk parsing fails
        """
        header = lines[start_idx]

        match = _HUNK_HEADER.match(header)
        if not match:
            raise DiffParseError(f"Invalid hunk header format: {header}", {"line": start_idx})

        old_start = int(match.group(1))
        old_count = int(match.group(2)) if match.group(2) is not None else 1
        new_start = int(match.group(3))
        new_count = int(match.group(4)) if match.group(4) is not None else 1

        old_remaining = old_count
        new_remaining = new_count
        hunk_lines: List[str] = []
        i = start_idx + 1

        while i < len(lines) and (old_remaining > 0 or new_remaining > 0):
            line = lines[i]

            if line.startswith('@@') or line.startswith('diff --git '):
                break

            if line.startswith('\\'):
                # "\ No newline at end of file"
                i += 1
                continue

            if line.startswith('-'):
                old_remaining -= 1

            elif line.startswith('+'):
                new_remaining -= 1

            else:
                # Context line; some tools strip the space from empty context lines
                if not line.startswith(' '):
                    line = ' ' + line

                old_remaining -= 1
                new_remaining -= 1

            hunk_lines.append(line)
            i += 1

        while i < len(lines) and lines[i].startswith('\\'):
            i += 1

        if old_remaining > 0 or new_remaining > 0:
            self._logger.debug(
                "Hunk at line %d is shorter than its header says (%d old, %d new missing)",
                start_idx, max(old_remaining, 0), max(new_remaining, 0)
            )

        return DiffHunk(old_start, old_count, new_start, new_count, hunk_lines), i
