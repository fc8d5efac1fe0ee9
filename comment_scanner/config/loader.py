"""
Configuration Loading

Settings and language profiles come from the built-in table, optionally
extended or replaced by a TOML file. Everything is validated here, so a
bad configuration stops the run before any file is scanned.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from comment_scanner.config.languages import DEFAULT_LANGUAGES
from comment_scanner.core.errors import ConfigFileError
from comment_scanner.core.patterns import (
    DEFAULT_BLOCK_DELIMITER,
    PatternProfile,
    build_profiles,
)

LOGGER_NAME = "comment_scanner.config"
logger = logging.getLogger(LOGGER_NAME)

CONFIG_FILE_NAME = "comment-scanner.toml"

SETTING_KEYS = {
    "exclude_dirs",
    "extensions",
    "workers",
    "block_delimiter",
    "replace_languages",
}


# =============================================================================
# Settings
# =============================================================================

@dataclass
class ScannerSettings:
    exclude_dirs: List[str] = field(default_factory=list)
    extensions: List[str] = field(default_factory=list)
    workers: int = 1
    block_delimiter: str = DEFAULT_BLOCK_DELIMITER
    replace_languages: bool = False

    def validate(self) -> List[str]:
        errors: List[str] = []

        if not isinstance(self.workers, int) or isinstance(self.workers, bool) or self.workers < 1:
            errors.append("workers must be a positive integer")

        if not isinstance(self.block_delimiter, str) or not self.block_delimiter:
            errors.append("block_delimiter must be a non-empty string")

        if not isinstance(self.replace_languages, bool):
            errors.append("replace_languages must be boolean")

        if not _is_string_list(self.exclude_dirs):
            errors.append("exclude_dirs must be a list of strings")

        if not _is_string_list(self.extensions):
            errors.append("extensions must be a list of strings")
        elif any(not ext.startswith(".") for ext in self.extensions):
            errors.append("extensions must start with '.'")

        return errors


@dataclass
class LoadedConfig:
    settings: ScannerSettings
    profiles: Dict[str, PatternProfile]
    source: Optional[Path] = None

    def selected_profiles(self) -> Dict[str, PatternProfile]:
        """
        Profiles restricted to the configured extensions, if any.
        """
        if not self.settings.extensions:
            return dict(self.profiles)

        wanted = {ext.lower() for ext in self.settings.extensions}
        missing = wanted - set(self.profiles)
        if missing:
            raise ConfigFileError(
                f"no comment patterns configured for {', '.join(sorted(missing))}"
            )
        return {ext: p for ext, p in self.profiles.items() if ext in wanted}


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


# =============================================================================
# File parsing
# =============================================================================

def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Parse a TOML configuration file.

    Raises:
        ConfigFileError if the file cannot be read or is not valid TOML
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigFileError(f"Failed to read config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(f"Invalid TOML in {path}: {exc}") from exc


def settings_from_mapping(data: Mapping[str, Any]) -> ScannerSettings:
    if not isinstance(data, Mapping):
        raise ConfigFileError("[scanner] must be a table")

    unknown = set(data) - SETTING_KEYS
    if unknown:
        raise ConfigFileError(f"unknown [scanner] settings: {sorted(unknown)}")

    defaults = ScannerSettings()
    return ScannerSettings(
        exclude_dirs=data.get("exclude_dirs", defaults.exclude_dirs),
        extensions=data.get("extensions", defaults.extensions),
        workers=data.get("workers", defaults.workers),
        block_delimiter=data.get("block_delimiter", defaults.block_delimiter),
        replace_languages=data.get("replace_languages", defaults.replace_languages),
    )


def merge_language_tables(
    base: Mapping[str, Mapping[str, Any]],
    overrides: Mapping[str, Mapping[str, Any]],
    *,
    replace: bool = False,
) -> Dict[str, Mapping[str, Any]]:
    """
    Overlay per-extension pattern definitions on the base table.
    """
    merged: Dict[str, Mapping[str, Any]] = {} if replace else dict(base)
    for extension, patterns in overrides.items():
        merged[extension.lower()] = patterns
    return merged


# =============================================================================
# Entry points
# =============================================================================

def find_config_file(root: Path) -> Optional[Path]:
    candidate = root / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


def load_config(
    path: Optional[Path] = None,
    *,
    overrides: Optional[Mapping[str, Any]] = None,
) -> LoadedConfig:
    """
    Build settings and profiles from defaults, an optional TOML file and
    command-line overrides (in increasing priority).

    Raises:
        ConfigFileError for invalid files or settings
        PatternConfigError for malformed language patterns
    """
    data: Dict[str, Any] = {}
    if path is not None:
        data = read_config_file(path)
        logger.info("Loaded configuration from %s", path)

    unknown = set(data) - {"scanner", "languages"}
    if unknown:
        raise ConfigFileError(f"unknown configuration sections: {sorted(unknown)}")

    settings = settings_from_mapping(data.get("scanner", {}))
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key == "exclude_dirs" and _is_string_list(settings.exclude_dirs):
            value = settings.exclude_dirs + list(value)
        setattr(settings, key, value)

    errors = settings.validate()
    if errors:
        raise ConfigFileError("; ".join(errors))

    languages = data.get("languages", {})
    if not isinstance(languages, Mapping):
        raise ConfigFileError("[languages] must be a table keyed by extension")

    table = merge_language_tables(
        DEFAULT_LANGUAGES,
        languages,
        replace=settings.replace_languages,
    )
    profiles = build_profiles(table, delimiter=settings.block_delimiter)

    return LoadedConfig(settings=settings, profiles=profiles, source=path)


def describe_profiles(profiles: Mapping[str, PatternProfile]) -> List[Dict[str, Any]]:
    return [profiles[ext].describe() for ext in sorted(profiles)]


def split_overrides(args: Any) -> Tuple[Optional[Path], Dict[str, Any]]:
    """
    Pull the config path and setting overrides out of parsed CLI arguments.
    """
    config = getattr(args, "config", None)
    overrides = {
        "exclude_dirs": getattr(args, "exclude", None),
        "extensions": getattr(args, "ext", None),
        "workers": getattr(args, "workers", None),
    }
    return (Path(config) if config else None), overrides
