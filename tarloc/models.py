"""Core data models shared across tarloc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, ClassVar, Dict, List, Optional


@total_ordering
@dataclass(frozen=True)
class LanguageKey:
    """Grouping key: a recognized language or the unrecognized group.

    ``LanguageKey.NONE`` sorts before every recognized language; recognized
    keys sort by name.
    """

    language: Optional[str] = None

    NONE: ClassVar["LanguageKey"]

    @classmethod
    def of(cls, language: str) -> "LanguageKey":
        if not language:
            raise ValueError("Recognized language keys require a name")
        return cls(language=language)

    @property
    def recognized(self) -> bool:
        return self.language is not None

    def sort_key(self) -> tuple[int, str]:
        return (1, self.language) if self.language is not None else (0, "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LanguageKey):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.language if self.language is not None else "<none>"


LanguageKey.NONE = LanguageKey()


@dataclass(frozen=True)
class LineCounts:
    """Blank/code/comment line totals for a single file."""

    blanks: int = 0
    code: int = 0
    comments: int = 0

    @property
    def lines(self) -> int:
        return self.blanks + self.code + self.comments


@dataclass
class SummaryEntry:
    """Running totals for every file sharing one language key."""

    language: Optional[str]
    blanks: int = 0
    code: int = 0
    comments: int = 0
    files: List[str] = field(default_factory=list)
    bytes: int = 0

    @classmethod
    def for_key(cls, key: LanguageKey) -> "SummaryEntry":
        return cls(language=key.language)

    def add_counts(self, counts: LineCounts) -> None:
        self.blanks += counts.blanks
        self.code += counts.code
        self.comments += counts.comments

    def add_file(self, path: str, size: int) -> None:
        self.files.append(path)
        self.bytes += size

    def as_record(self) -> Dict[str, Any]:
        """Return the report record with keys in wire order."""
        return {
            "language": self.language,
            "blanks": self.blanks,
            "code": self.code,
            "comments": self.comments,
            "files": list(self.files),
            "bytes": self.bytes,
        }
