"""Tests for tarloc.aggregator."""

from __future__ import annotations

import io

import pytest

from tarloc.aggregator import Aggregator, ON_ENTRY_ERROR_SKIP
from tarloc.archive import ArchiveReader, DecodeError, EntryKind, ReadError
from tarloc.languages import LanguageClassifier, LineCounter
from tarloc.models import LanguageKey, SummaryEntry
from tests._fixtures.tar_builder import TarBuilder


class FakeEntry:
    """In-memory stand-in for an archive entry that records reads."""

    def __init__(
        self,
        path: str,
        content: bytes = b"",
        *,
        kind: EntryKind = EntryKind.FILE,
        declared: int | None = None,
        path_error: Exception | None = None,
        read_error: Exception | None = None,
        ordinal: int = 1,
    ) -> None:
        self._path = path
        self._content = content
        self._kind = kind
        self._declared = len(content) if declared is None else declared
        self._path_error = path_error
        self._read_error = read_error
        self.ordinal = ordinal
        self.reads = 0

    def entry_type(self) -> EntryKind:
        return self._kind

    def is_file(self) -> bool:
        return self._kind is EntryKind.FILE

    def path(self) -> str:
        if self._path_error is not None:
            raise self._path_error
        return self._path

    def declared_size(self) -> int:
        return self._declared

    def read_to_end(self) -> bytes:
        self.reads += 1
        if self._read_error is not None:
            raise self._read_error
        return self._content


@pytest.fixture
def aggregator(classifier: LanguageClassifier, counter: LineCounter) -> Aggregator:
    return Aggregator(classifier, counter)


def _by_language(aggregator: Aggregator) -> dict[str | None, SummaryEntry]:
    return {summary.language: summary for summary in aggregator.summaries()}


def test_recognized_files_accumulate_counts_in_archive_order(aggregator: Aggregator) -> None:
    a = b"# c\n\n\n" + b"x = 1\n" * 10
    b = b"y = 2\n" * 5

    aggregator.process(FakeEntry("a.py", a))
    aggregator.process(FakeEntry("b.py", b, ordinal=2))

    python = _by_language(aggregator)["Python"]
    assert (python.blanks, python.code, python.comments) == (2, 15, 1)
    assert python.files == ["a.py", "b.py"]
    assert python.bytes == len(a) + len(b)


def test_unrecognized_files_use_declared_size_without_reading(aggregator: Aggregator) -> None:
    readme = FakeEntry("README", b"ignored", declared=37)

    aggregator.process(readme)

    assert readme.reads == 0
    none = _by_language(aggregator)[None]
    assert none == SummaryEntry(language=None, files=["README"], bytes=37)
    assert aggregator.stats.unrecognized == 1


def test_recognized_files_use_read_length_not_declared_size(aggregator: Aggregator) -> None:
    aggregator.process(FakeEntry("main.go", b"package main\n", declared=999))

    assert _by_language(aggregator)["Go"].bytes == len(b"package main\n")


def test_non_file_entries_are_ignored(aggregator: Aggregator) -> None:
    for kind in (EntryKind.DIRECTORY, EntryKind.SYMLINK, EntryKind.HARDLINK, EntryKind.OTHER):
        entry = FakeEntry("src/app.py", b"x = 1\n", kind=kind)
        aggregator.process(entry)
        assert entry.reads == 0

    assert aggregator.summaries() == []
    assert aggregator.stats.non_files == 4
    assert aggregator.stats.files == 0


def test_summaries_are_sorted_by_language_key(aggregator: Aggregator) -> None:
    for ordinal, path in enumerate(["lib.rs", "main.c", "LICENSE", "app.py"], start=1):
        aggregator.process(FakeEntry(path, b"x\n", ordinal=ordinal))

    assert [summary.language for summary in aggregator.summaries()] == [None, "C", "Python", "Rust"]


def test_entry_failures_abort_by_default(aggregator: Aggregator) -> None:
    with pytest.raises(DecodeError):
        aggregator.process(FakeEntry("bad.py", path_error=DecodeError("undecodable")))

    with pytest.raises(ReadError):
        aggregator.process(FakeEntry("gone.py", read_error=ReadError("truncated")))

    assert aggregator.summaries() == []


def test_skip_policy_drops_failing_entries(classifier: LanguageClassifier, counter: LineCounter) -> None:
    aggregator = Aggregator(classifier, counter, on_entry_error=ON_ENTRY_ERROR_SKIP)

    aggregator.process(FakeEntry("gone.py", read_error=ReadError("truncated")))
    aggregator.process(FakeEntry("ok.py", b"x = 1\n", ordinal=2))

    assert aggregator.stats.skipped == 1
    python = _by_language(aggregator)["Python"]
    assert python.files == ["ok.py"]
    assert python.code == 1


def test_unknown_policy_is_rejected(classifier: LanguageClassifier, counter: LineCounter) -> None:
    with pytest.raises(ValueError):
        Aggregator(classifier, counter, on_entry_error="retry")


def test_every_regular_file_lands_in_exactly_one_summary(
    aggregator: Aggregator, tar_builder: TarBuilder
) -> None:
    tar_builder.directory("pkg")
    tar_builder.files(
        {
            "pkg/__init__.py": "",
            "pkg/core.py": "def run():\n    return 1\n",
            "pkg/data.bin": b"\x00\x01\x02",
            "pkg/README": "read me\n",
            "web/index.ts": "export const x = 1;\n",
        }
    )
    tar_builder.symlink("pkg/alias.py", "core.py")

    aggregator.process_all(ArchiveReader(io.BytesIO(tar_builder.build())).entries())

    all_files = [path for summary in aggregator.summaries() for path in summary.files]
    assert sorted(all_files) == sorted(
        ["pkg/__init__.py", "pkg/core.py", "pkg/data.bin", "pkg/README", "web/index.ts"]
    )
    assert len(all_files) == len(set(all_files))
    assert "pkg/alias.py" not in all_files
    assert aggregator.stats.entries == 7


def test_language_key_ordering() -> None:
    keys = [LanguageKey.of("Rust"), LanguageKey.NONE, LanguageKey.of("CHeader"), LanguageKey.of("Cpp")]

    assert sorted(keys) == [
        LanguageKey.NONE,
        LanguageKey.of("CHeader"),
        LanguageKey.of("Cpp"),
        LanguageKey.of("Rust"),
    ]
    assert LanguageKey.NONE == LanguageKey()
    assert not LanguageKey.NONE.recognized
