"""Path-based language classification."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Dict, Iterable, Mapping, Optional

from .base import LanguageDefinition
from ..models import LanguageKey


class LanguageClassifier:
    """Maps archive paths to language keys using file-name and extension rules."""

    def __init__(
        self,
        definitions: Iterable[LanguageDefinition],
        *,
        extra_extensions: Mapping[str, str] | None = None,
        extra_filenames: Mapping[str, str] | None = None,
    ) -> None:
        self._definitions: Dict[str, LanguageDefinition] = {}
        self._by_extension: Dict[str, str] = {}
        self._by_filename: Dict[str, str] = {}

        for definition in definitions:
            self._definitions[definition.name] = definition
            for extension in definition.extensions:
                self._by_extension.setdefault(extension, definition.name)
            for filename in definition.filenames:
                self._by_filename.setdefault(filename.lower(), definition.name)

        for extension, language in (extra_extensions or {}).items():
            self._by_extension[_normalise_extension(extension)] = self._require(language)
        for filename, language in (extra_filenames or {}).items():
            self._by_filename[filename.lower()] = self._require(language)

    @property
    def languages(self) -> list[str]:
        return sorted(self._definitions)

    def definition(self, key: LanguageKey) -> Optional[LanguageDefinition]:
        if key.language is None:
            return None
        return self._definitions.get(key.language)

    def classify(self, path: str) -> Optional[LanguageKey]:
        """Return the language key for ``path`` or None when no rule matches."""
        name = PurePosixPath(path).name
        if not name:
            return None

        language = self._by_filename.get(name.lower())
        if language is None:
            suffix = PurePosixPath(name).suffix
            if suffix:
                language = self._by_extension.get(suffix[1:].lower())
        if language is None:
            return None
        return LanguageKey.of(language)

    def _require(self, language: str) -> str:
        if language not in self._definitions:
            raise ValueError(f"Unknown language '{language}' in classification override")
        return language


def _normalise_extension(extension: str) -> str:
    return extension.strip().lstrip(".").lower()


__all__ = ["LanguageClassifier"]
