"""
Background highlighting of hunks.

Highlighting a long hunk can take a while, and a hunk may be re-highlighted
(for example when its language or content changes) before the previous pass
has finished.  The scheduler keeps one pass in flight per hunk and only ever
publishes the result of the latest one.
"""

import asyncio
import logging
from typing import Callable, Dict, Hashable, Sequence

from diff import DiffLine
from diff_view.sequence_highlighter import HighlightedSequences, SequenceHighlighter
from syntax import ProgrammingLanguage, Tokenizer


class HighlightScheduler:
    """Runs highlighting passes per hunk key, discarding stale results."""

    def __init__(
        self,
        tokenizer: Tokenizer,
        on_result: Callable[[Hashable, HighlightedSequences], None] | None = None
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            tokenizer: Tokenizer used for every pass
            on_result: Called with (key, result) whenever a pass's result is published
        """
        self._tokenizer = tokenizer
        self._on_result = on_result
        self._generations: Dict[Hashable, int] = {}
        self._tasks: Dict[Hashable, asyncio.Task] = {}
        self._results: Dict[Hashable, HighlightedSequences] = {}
        self._logger = logging.getLogger("HighlightScheduler")

    def schedule(self, key: Hashable, lines: Sequence[DiffLine], language: ProgrammingLanguage) -> asyncio.Task:
        """
        Start a highlighting pass for a hunk, cancelling any pass already running for it.

        Must be called with an event loop running.

        Args:
            key: Identifies the hunk
            lines: Classified hunk lines
            language: Language to highlight as

        Returns:
            The task running the pass.  It resolves to the result, or None if
            the pass was superseded.
        """
        generation = self._generations.get(key, 0) + 1
        self._generations[key] = generation

        previous = self._tasks.get(key)
        if previous is not None and not previous.done():
            self._logger.debug("Cancelling highlight pass for %s", key)
            previous.cancel()

        task = asyncio.get_event_loop().create_task(self._run(key, generation, list(lines), language))
        self._tasks[key] = task
        return task

    async def _run(
        self,
        key: Hashable,
        generation: int,
        lines: Sequence[DiffLine],
        language: ProgrammingLanguage
    ) -> HighlightedSequences | None:
        highlighter = SequenceHighlighter(self._tokenizer, language)
        try:
            result = await highlighter.highlight_async(lines)

        except asyncio.CancelledError:
            self._logger.debug("Highlight pass %d for %s cancelled", generation, key)
            raise

        finally:
            if self._tasks.get(key) is asyncio.current_task():
                del self._tasks[key]

        if self._generations.get(key) != generation:
            self._logger.debug("Discarding stale highlight pass %d for %s", generation, key)
            return None

        self._results[key] = result
        if self._on_result is not None:
            self._on_result(key, result)

        return result

    def result(self, key: Hashable) -> HighlightedSequences | None:
        """The latest published result for a hunk, if any."""
        return self._results.get(key)

    def generation(self, key: Hashable) -> int:
        """How many passes have been started for a hunk."""
        return self._generations.get(key, 0)

    def pending(self, key: Hashable) -> bool:
        """Whether a pass is still in flight for a hunk."""
        return key in self._tasks

    def forget(self, key: Hashable) -> None:
        """
        Drop everything held for a hunk that is no longer displayed.

        Any pass in flight for it is cancelled.

        Args:
            key: Identifies the hunk
        """
        task = self._tasks.pop(key, None)
        if task is not None and not task.done():
            self._logger.debug("Cancelling highlight pass for forgotten %s", key)
            task.cancel()

        self._generations.pop(key, None)
        self._results.pop(key, None)

    def cancel_all(self) -> None:
        """Cancel every pass in flight."""
        for task in self._tasks.values():
            if not task.done():
                task.cancel()

        self._tasks.clear()
