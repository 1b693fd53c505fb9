"""Pipeline wiring: input stream -> archive -> aggregation -> report."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Sequence, TextIO

from .aggregator import AggregationStats, Aggregator, ON_ENTRY_ERROR_ABORT
from .archive import ArchiveReader, StreamOpenError
from .config import ConfigError, TarlocConfig
from .languages import LanguageClassifier, LanguageDefinition, LineCounter, discover_languages
from .logging import get_logger
from .models import SummaryEntry
from .report import Reporter


@dataclass
class RunResult:
    """Outcome of a completed pass."""

    summaries: List[SummaryEntry]
    stats: AggregationStats
    lines_written: int


@contextmanager
def open_input(path: str | Path | None) -> Iterator[BinaryIO]:
    """Yield a binary stream for ``path``, or standard input when it is None."""
    if path is None:
        yield sys.stdin.buffer
        return
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise StreamOpenError(f"Cannot open {path}: {exc.strerror or exc}") from exc
    with handle:
        yield handle


class Pipeline:
    """Runs a single counting pass over one archive."""

    def __init__(
        self,
        classifier: LanguageClassifier,
        counter: LineCounter,
        reporter: Reporter | None = None,
        *,
        on_entry_error: str = ON_ENTRY_ERROR_ABORT,
    ) -> None:
        self.classifier = classifier
        self.counter = counter
        self.reporter = reporter or Reporter()
        self.on_entry_error = on_entry_error
        self.logger = get_logger("pipeline")

    @classmethod
    def from_config(
        cls,
        config: TarlocConfig | None = None,
        *,
        languages: Optional[Sequence[LanguageDefinition]] = None,
        on_entry_error: str | None = None,
        treat_doc_strings_as_comments: bool | None = None,
    ) -> "Pipeline":
        """Build a pipeline from configuration; keyword arguments override it."""
        config = config or TarlocConfig()
        definitions = list(languages) if languages is not None else discover_languages()
        try:
            classifier = LanguageClassifier(
                definitions,
                extra_extensions=config.languages.extensions,
                extra_filenames=config.languages.filenames,
            )
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

        treat = config.counting.treat_doc_strings_as_comments
        if treat_doc_strings_as_comments is not None:
            treat = treat_doc_strings_as_comments
        counter = LineCounter(definitions, treat_doc_strings_as_comments=treat)
        return cls(
            classifier,
            counter,
            on_entry_error=on_entry_error or config.on_entry_error,
        )

    def run(self, stream: BinaryIO, out: TextIO) -> RunResult:
        """Scan every entry in ``stream`` and write the report to ``out``."""
        aggregator = Aggregator(self.classifier, self.counter, on_entry_error=self.on_entry_error)
        aggregator.process_all(ArchiveReader(stream).entries())

        stats = aggregator.stats
        self.logger.info(
            "Scanned %d entries: %d files (%d unrecognized), %d non-file entries skipped",
            stats.entries,
            stats.files,
            stats.unrecognized,
            stats.non_files,
        )
        if stats.skipped:
            self.logger.warning("Skipped %d unreadable entries", stats.skipped)

        summaries = aggregator.summaries()
        lines = self.reporter.report(summaries, out)
        self.logger.debug("Wrote %d summary lines", lines)
        return RunResult(summaries=summaries, stats=stats, lines_written=lines)

    def run_path(self, path: str | Path | None, out: TextIO) -> RunResult:
        """Open ``path`` (or stdin) and run a pass over it."""
        source = str(path) if path is not None else "<stdin>"
        self.logger.info("Reading archive from %s", source)
        with open_input(path) as stream:
            return self.run(stream, out)


__all__ = ["Pipeline", "RunResult", "open_input"]
