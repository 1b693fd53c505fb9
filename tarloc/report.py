"""JSON Lines rendering of language summaries."""

from __future__ import annotations

import json
from typing import Iterable, List, TextIO

from .archive import TarlocError
from .models import SummaryEntry

_U64_MAX = 2**64 - 1
_COUNTER_FIELDS = ("blanks", "code", "comments", "bytes")


class SerializationError(TarlocError):
    """Raised when a summary cannot be encoded as a report line."""


class Reporter:
    """Writes one compact JSON object per summary, in the order given.

    The whole report is rendered before anything is written so a failure
    never leaves a partial report on the output stream.
    """

    def render(self, summaries: Iterable[SummaryEntry]) -> str:
        lines: List[str] = []
        for summary in summaries:
            record = summary.as_record()
            _check_counters(record)
            try:
                lines.append(json.dumps(record, ensure_ascii=False, separators=(",", ":")))
            except (TypeError, ValueError) as exc:
                raise SerializationError(
                    f"Failed to encode summary for {record.get('language')}: {exc}"
                ) from exc
        return "".join(f"{line}\n" for line in lines)

    def report(self, summaries: Iterable[SummaryEntry], out: TextIO) -> int:
        """Write the report to ``out`` and return the number of lines written."""
        rendered = self.render(summaries)
        out.write(rendered)
        out.flush()
        return rendered.count("\n")


def _check_counters(record: dict) -> None:
    for name in _COUNTER_FIELDS:
        value = record[name]
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= _U64_MAX:
            raise SerializationError(
                f"Field '{name}' for {record.get('language')} is not an unsigned 64-bit integer: "
                f"{value!r}"
            )


__all__ = ["Reporter", "SerializationError"]
