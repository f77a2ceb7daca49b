from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor

from contact_dedupe.interfaces import ContactCleaner, ContactMatcher
from contact_dedupe.models import ContactRecord, MatchRecord
from contact_dedupe.steps.matching import count_accuracy_levels, pair_count

logger = logging.getLogger(__name__)


class ParallelMatchPipeline:
    """Scores row ranges concurrently and reassembles them in enumeration order.

    Each pair's score is independent, so splitting the outer loop into
    contiguous row ranges and concatenating the partial results in range order
    yields exactly the sequential output. Threads are the default; pass
    ``use_processes=True`` to sidestep the GIL on large inputs.
    """

    def __init__(
        self,
        matcher: ContactMatcher,
        cleaner: ContactCleaner | None = None,
        max_workers: int | None = None,
        use_processes: bool = False,
        min_contacts: int = 200,
        chunks_per_worker: int = 4,
    ) -> None:
        self._matcher = matcher
        self._cleaner = cleaner
        self._max_workers = max_workers or os.cpu_count() or 1
        self._use_processes = use_processes
        self._min_contacts = min_contacts
        self._chunks_per_worker = chunks_per_worker

    def run(self, contacts: Sequence[ContactRecord]) -> list[MatchRecord]:
        if self._cleaner is not None:
            contacts = self._cleaner.clean(contacts)
        if len(contacts) < self._min_contacts or self._max_workers < 2:
            return self._matcher.match(contacts)

        snapshot = tuple(contacts)
        ranges = partition_rows(len(snapshot), self._max_workers * self._chunks_per_worker)
        logger.debug(
            "Scoring %d pairs in %d row ranges with %d %s",
            pair_count(len(snapshot)),
            len(ranges),
            self._max_workers,
            "processes" if self._use_processes else "threads",
        )

        with self._executor() as executor:
            futures = [
                executor.submit(_match_row_range, self._matcher, snapshot, start, stop)
                for start, stop in ranges
            ]
            matches: list[MatchRecord] = []
            for future in futures:
                matches.extend(future.result())

        logger.info("Found %d possible matches: %s", len(matches), count_accuracy_levels(matches))
        return matches

    def _executor(self) -> Executor:
        if self._use_processes:
            return ProcessPoolExecutor(max_workers=self._max_workers)
        return ThreadPoolExecutor(max_workers=self._max_workers)


def partition_rows(contact_count: int, parts: int) -> list[tuple[int, int]]:
    """Split source rows into contiguous ranges holding roughly equal pair counts.

    Row ``i`` owns ``contact_count - 1 - i`` pairs, so early ranges are short.
    The last row owns no pairs and is never emitted on its own.
    """
    total = pair_count(contact_count)
    if total == 0:
        return []
    parts = max(1, parts)
    target = -(-total // parts)

    ranges: list[tuple[int, int]] = []
    start = 0
    owned = 0
    for row in range(contact_count - 1):
        owned += contact_count - 1 - row
        if owned >= target:
            ranges.append((start, row + 1))
            start = row + 1
            owned = 0
    if start < contact_count - 1:
        ranges.append((start, contact_count))
    return ranges


def _match_row_range(
    matcher: ContactMatcher,
    contacts: Sequence[ContactRecord],
    start: int,
    stop: int,
) -> list[MatchRecord]:
    return matcher.match_rows(contacts, start, stop)
