"""Blank/code/comment line counting driven by language definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .base import LanguageDefinition
from ..models import LanguageKey, LineCounts

_BOM = "\ufeff"


@dataclass
class _ScanState:
    """Multi-line constructs still open at the end of the previous line."""

    comments: List[str] = field(default_factory=list)
    string_end: Optional[str] = None


@dataclass(frozen=True)
class _Grammar:
    line_comments: Tuple[str, ...]
    comment_keywords: Tuple[str, ...]
    block_comments: Tuple[Tuple[str, str], ...]
    nested: bool
    quotes: Tuple[Tuple[str, str], ...]
    doc_quotes: Tuple[Tuple[str, str], ...]

    @classmethod
    def from_definition(cls, definition: LanguageDefinition) -> "_Grammar":
        return cls(
            line_comments=_longest_first(definition.line_comments),
            comment_keywords=_longest_first(
                tuple(keyword.lower() for keyword in definition.comment_keywords)
            ),
            block_comments=_longest_pairs_first(definition.block_comments),
            nested=definition.nested,
            quotes=_longest_pairs_first(definition.quotes),
            doc_quotes=_longest_pairs_first(definition.doc_quotes),
        )


class LineCounter:
    """Counts blank, code, and comment lines for recognized languages.

    Decoding is permissive: invalid UTF-8 is replaced rather than rejected so a
    single odd file never fails the run.
    """

    def __init__(
        self,
        definitions: Iterable[LanguageDefinition],
        *,
        treat_doc_strings_as_comments: bool = False,
    ) -> None:
        self._definitions: Dict[str, LanguageDefinition] = {
            definition.name: definition for definition in definitions
        }
        self._grammars: Dict[str, _Grammar] = {}
        self.treat_doc_strings_as_comments = treat_doc_strings_as_comments

    def count(self, key: LanguageKey, data: bytes) -> LineCounts:
        definition = self._definitions.get(key.language) if key.language else None
        if definition is None:
            raise KeyError(f"No language definition for {key}")

        lines = _split_lines(data)
        if definition.literate or not definition.has_grammar:
            return _count_without_grammar(lines, as_comments=definition.literate)

        grammar = self._grammar(definition)
        state = _ScanState()
        blanks = code = comments = 0
        for line in lines:
            if not line.strip():
                blanks += 1
                continue
            if self._scan_line(line, grammar, state):
                code += 1
            else:
                comments += 1
        return LineCounts(blanks=blanks, code=code, comments=comments)

    def _grammar(self, definition: LanguageDefinition) -> _Grammar:
        grammar = self._grammars.get(definition.name)
        if grammar is None:
            grammar = _Grammar.from_definition(definition)
            self._grammars[definition.name] = grammar
        return grammar

    def _scan_line(self, line: str, grammar: _Grammar, state: _ScanState) -> bool:
        """Advance ``state`` across one line; return True when it holds code."""
        has_code = state.string_end is not None
        index = 0
        length = len(line)

        while index < length:
            if state.string_end is not None:
                if line[index] == "\\":
                    index += 2
                    continue
                if line.startswith(state.string_end, index):
                    index += len(state.string_end)
                    state.string_end = None
                    continue
                index += 1
                continue

            if state.comments:
                closing = state.comments[-1]
                if line.startswith(closing, index):
                    state.comments.pop()
                    index += len(closing)
                    continue
                if grammar.nested:
                    opener = _match_pair(line, index, grammar.block_comments)
                    if opener is not None:
                        state.comments.append(opener[1])
                        index += len(opener[0])
                        continue
                index += 1
                continue

            if line[index].isspace():
                index += 1
                continue

            opener = _match_pair(line, index, grammar.block_comments)
            if opener is not None:
                state.comments.append(opener[1])
                index += len(opener[0])
                continue

            if _match_prefix(line, index, grammar.line_comments):
                break
            if _match_keyword(line, index, grammar.comment_keywords):
                break

            doc = _match_pair(line, index, grammar.doc_quotes)
            if doc is not None:
                if self.treat_doc_strings_as_comments and not has_code:
                    state.comments.append(doc[1])
                else:
                    state.string_end = doc[1]
                    has_code = True
                index += len(doc[0])
                continue

            quote = _match_pair(line, index, grammar.quotes)
            if quote is not None:
                state.string_end = quote[1]
                has_code = True
                index += len(quote[0])
                continue

            has_code = True
            index += 1

        return has_code


def _split_lines(data: bytes) -> List[str]:
    text = data.decode("utf-8", errors="replace")
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _count_without_grammar(lines: Sequence[str], *, as_comments: bool) -> LineCounts:
    blanks = sum(1 for line in lines if not line.strip())
    filled = len(lines) - blanks
    if as_comments:
        return LineCounts(blanks=blanks, code=0, comments=filled)
    return LineCounts(blanks=blanks, code=filled, comments=0)


def _match_prefix(line: str, index: int, prefixes: Sequence[str]) -> bool:
    return any(line.startswith(prefix, index) for prefix in prefixes)


def _match_keyword(line: str, index: int, keywords: Sequence[str]) -> bool:
    if index > 0 and (line[index - 1].isalnum() or line[index - 1] == "_"):
        return False
    for keyword in keywords:
        end = index + len(keyword)
        if line[index:end].lower() == keyword and (end == len(line) or line[end].isspace()):
            return True
    return False


def _match_pair(
    line: str, index: int, pairs: Sequence[Tuple[str, str]]
) -> Optional[Tuple[str, str]]:
    for pair in pairs:
        if line.startswith(pair[0], index):
            return pair
    return None


def _longest_first(values: Sequence[str]) -> Tuple[str, ...]:
    return tuple(sorted(values, key=len, reverse=True))


def _longest_pairs_first(pairs: Sequence[Tuple[str, str]]) -> Tuple[Tuple[str, str], ...]:
    return tuple(sorted(pairs, key=lambda pair: len(pair[0]), reverse=True))


__all__ = ["LineCounter"]
