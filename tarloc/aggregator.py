"""Folds archive entries into per-language summaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from .archive import ArchiveEntry, EntryReadError
from .languages import LanguageClassifier, LineCounter
from .logging import get_logger
from .models import LanguageKey, SummaryEntry

ON_ENTRY_ERROR_ABORT = "abort"
ON_ENTRY_ERROR_SKIP = "skip"
ENTRY_ERROR_POLICIES = (ON_ENTRY_ERROR_ABORT, ON_ENTRY_ERROR_SKIP)


@dataclass
class AggregationStats:
    """Counters describing one aggregation pass."""

    entries: int = 0
    files: int = 0
    non_files: int = 0
    unrecognized: int = 0
    skipped: int = 0


class Aggregator:
    """Accumulates blank/code/comment totals keyed by language.

    ``process`` must be called once per archive entry, in archive order. By
    default any entry failure propagates and aborts the pass; with the
    ``skip`` policy entry-scoped failures are logged and the entry is dropped.
    """

    def __init__(
        self,
        classifier: LanguageClassifier,
        counter: LineCounter,
        *,
        on_entry_error: str = ON_ENTRY_ERROR_ABORT,
    ) -> None:
        if on_entry_error not in ENTRY_ERROR_POLICIES:
            raise ValueError(f"Unknown entry error policy: {on_entry_error}")
        self.classifier = classifier
        self.counter = counter
        self.on_entry_error = on_entry_error
        self.stats = AggregationStats()
        self._summaries: Dict[LanguageKey, SummaryEntry] = {}
        self.logger = get_logger("aggregator")

    def process(self, entry: ArchiveEntry) -> None:
        self.stats.entries += 1
        if not entry.is_file():
            self.stats.non_files += 1
            self.logger.debug("Skipping %s entry #%d", entry.entry_type().value, entry.ordinal)
            return

        try:
            self._process_file(entry)
        except EntryReadError as exc:
            if self.on_entry_error != ON_ENTRY_ERROR_SKIP:
                raise
            self.stats.skipped += 1
            self.logger.warning("Skipping unreadable entry #%d: %s", entry.ordinal, exc)

    def process_all(self, entries: Iterable[ArchiveEntry]) -> None:
        for entry in entries:
            self.process(entry)

    def summaries(self) -> List[SummaryEntry]:
        """Return summaries ordered by language key."""
        return [self._summaries[key] for key in sorted(self._summaries)]

    def _process_file(self, entry: ArchiveEntry) -> None:
        path = entry.path()
        key = self.classifier.classify(path)

        if key is None:
            size = entry.declared_size()
            self._summary(LanguageKey.NONE).add_file(path, size)
            self.stats.files += 1
            self.stats.unrecognized += 1
            self.logger.debug("%s: unrecognized (%d bytes declared)", path, size)
            return

        content = entry.read_to_end()
        counts = self.counter.count(key, content)
        summary = self._summary(key)
        summary.add_counts(counts)
        summary.add_file(path, len(content))
        self.stats.files += 1
        self.logger.debug(
            "%s: %s blanks=%d code=%d comments=%d",
            path,
            key,
            counts.blanks,
            counts.code,
            counts.comments,
        )

    def _summary(self, key: LanguageKey) -> SummaryEntry:
        summary = self._summaries.get(key)
        if summary is None:
            summary = SummaryEntry.for_key(key)
            self._summaries[key] = summary
        return summary


__all__ = [
    "AggregationStats",
    "Aggregator",
    "ENTRY_ERROR_POLICIES",
    "ON_ENTRY_ERROR_ABORT",
    "ON_ENTRY_ERROR_SKIP",
]
