"""Language registry and plugin discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Dict, Iterable, List, Sequence, Set

from .base import LanguageDefinition
from .builtin import BUILTIN_LANGUAGES
from .classifier import LanguageClassifier
from .counter import LineCounter

_ENTRY_POINT_GROUP = "tarloc.languages"


def discover_languages(enabled: Sequence[str] | None = None) -> List[LanguageDefinition]:
    """Return built-in and plugin language definitions, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = set(enabled)

    languages: List[LanguageDefinition] = []
    seen: Dict[str, str] = {}

    def _add(definition: LanguageDefinition, origin: str) -> None:
        if enabled_set is not None and definition.name not in enabled_set:
            return
        if definition.name in seen:
            raise ValueError(
                f"Language '{definition.name}' from {origin} is already registered "
                f"by {seen[definition.name]}"
            )
        languages.append(definition)
        seen[definition.name] = origin

    for definition in BUILTIN_LANGUAGES:
        _add(definition, "tarloc")

    for entry in _iter_entry_points():
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - defensive guard
            raise RuntimeError(f"Failed to load language entry point '{entry.name}': {exc}") from exc
        for definition in _coerce_definitions(loaded):
            _add(definition, f"entry point '{entry.name}'")

    if enabled_set is not None:
        missing = enabled_set.difference(seen)
        if missing:
            raise ValueError(f"Unknown languages requested: {', '.join(sorted(missing))}")

    return languages


def _coerce_definitions(obj: object) -> List[LanguageDefinition]:
    if callable(obj) and not isinstance(obj, LanguageDefinition):
        obj = obj()
    if isinstance(obj, LanguageDefinition):
        return [obj]
    if isinstance(obj, Iterable) and not isinstance(obj, (str, bytes)):
        items = list(obj)
        if all(isinstance(item, LanguageDefinition) for item in items):
            return items
    raise TypeError(
        "Language entry point must provide a LanguageDefinition, an iterable of them, or a factory"
    )


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    try:
        entry_points = metadata.entry_points()
    except Exception:  # pragma: no cover - defensive guard
        return []

    if hasattr(entry_points, "select"):
        return entry_points.select(group=_ENTRY_POINT_GROUP)  # type: ignore[return-value]

    return entry_points.get(_ENTRY_POINT_GROUP, [])  # type: ignore[return-value]


__all__ = [
    "discover_languages",
    "LanguageClassifier",
    "LanguageDefinition",
    "LineCounter",
]
