"""Language definitions consumed by the classifier and the line counter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LanguageDefinition:
    """Path rules and comment grammar for one language."""

    name: str
    extensions: Tuple[str, ...] = ()
    filenames: Tuple[str, ...] = ()
    line_comments: Tuple[str, ...] = ()
    # Words such as Batch `rem`: case-insensitive, and only as a whole word.
    comment_keywords: Tuple[str, ...] = ()
    block_comments: Tuple[Tuple[str, str], ...] = ()
    nested: bool = False
    quotes: Tuple[Tuple[str, str], ...] = ()
    doc_quotes: Tuple[Tuple[str, str], ...] = ()
    literate: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Language definitions require a name")
        for extension in self.extensions:
            if extension.startswith(".") or extension != extension.lower():
                raise ValueError(
                    f"Extension '{extension}' for {self.name} must be lower-case without a dot"
                )

    @property
    def has_grammar(self) -> bool:
        return bool(
            self.line_comments
            or self.comment_keywords
            or self.block_comments
            or self.quotes
            or self.doc_quotes
        )


__all__ = ["LanguageDefinition"]
