"""Configuration loading for tarloc (.tarloc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".tarloc.yml"

_ENTRY_ERROR_POLICIES = ("abort", "skip")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class CountingConfig:
    """Line counting options."""

    treat_doc_strings_as_comments: bool = False


@dataclass
class LanguageOverrides:
    """Extra classification rules mapping to known language names."""

    extensions: Dict[str, str] = field(default_factory=dict)
    filenames: Dict[str, str] = field(default_factory=dict)


@dataclass
class TarlocConfig:
    """Represents the settings defined in .tarloc.yml."""

    source: Optional[Path] = None
    counting: CountingConfig = field(default_factory=CountingConfig)
    languages: LanguageOverrides = field(default_factory=LanguageOverrides)
    on_entry_error: str = "abort"


def load_config(config_path: Path | None = None) -> TarlocConfig:
    """Load configuration from disk.

    ``config_path`` may point at the file itself or at the directory holding
    it; ``None`` looks in the current directory. A missing file yields the
    defaults.
    """
    config_file = _resolve_config_path(config_path if config_path is not None else Path.cwd())

    if not config_file.exists():
        return TarlocConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    counting = CountingConfig()
    counting_data = _as_dict(data.get("counting"))
    if counting_data:
        treat = _as_bool(counting_data.get("treat_doc_strings_as_comments"))
        counting.treat_doc_strings_as_comments = bool(treat)

    languages = LanguageOverrides()
    languages_data = _as_dict(data.get("languages"))
    if languages_data:
        languages.extensions = _as_str_mapping(languages_data.get("extensions"), "languages.extensions")
        languages.filenames = _as_str_mapping(languages_data.get("filenames"), "languages.filenames")

    on_entry_error = "abort"
    errors_data = _as_dict(data.get("errors"))
    if errors_data and errors_data.get("on_entry_error") is not None:
        on_entry_error = str(errors_data.get("on_entry_error")).strip().lower()
        if on_entry_error not in _ENTRY_ERROR_POLICIES:
            raise ConfigError(
                f"errors.on_entry_error must be one of {', '.join(_ENTRY_ERROR_POLICIES)}"
            )

    return TarlocConfig(
        source=config_file,
        counting=counting,
        languages=languages,
        on_entry_error=on_entry_error,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_mapping(value: Any, label: str) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{label} must be a mapping of pattern to language name")
    result: Dict[str, str] = {}
    for key, language in value.items():
        if not isinstance(key, str) or not isinstance(language, str):
            raise ConfigError(f"{label} entries must map strings to language names")
        result[key] = language
    return result


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "CountingConfig",
    "LanguageOverrides",
    "TarlocConfig",
    "load_config",
]
