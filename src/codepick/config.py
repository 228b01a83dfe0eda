"""Per-project settings (.codepick/config.json) with environment overrides.

Resolution order, lowest to highest precedence: built-in defaults, the
project config file, then ``CODEPICK_*`` environment variables.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from codepick.languages import FALLBACK_LANGUAGE, LANGUAGES
from codepick.output.formatter import DEFAULT_FORMAT, FORMATS
from codepick.workspace import DEFAULT_MAX_FILE_BYTES, find_project_root

log = logging.getLogger(__name__)

CONFIG_DIR = ".codepick"
CONFIG_NAME = "config.json"

ENV_FORMAT = "CODEPICK_FORMAT"
ENV_LANGUAGE = "CODEPICK_LANGUAGE"
ENV_MAX_FILE_BYTES = "CODEPICK_MAX_FILE_BYTES"


@dataclass(frozen=True)
class Settings:
    default_format: str = DEFAULT_FORMAT
    default_language: str = FALLBACK_LANGUAGE
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES


def get_config_path(project_root: Path | None = None) -> Path:
    if project_root is None:
        project_root = find_project_root()
    return Path(project_root) / CONFIG_DIR / CONFIG_NAME


def _load_project_config(project_root: Path | None = None) -> dict:
    """Read the project config file; missing or unreadable files give {}."""
    path = get_config_path(project_root)
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a JSON object", path)
        return {}
    return data


def write_project_config(updates: dict, project_root: Path | None = None) -> Path:
    """Merge *updates* into the project config file and return its path."""
    path = get_config_path(project_root)
    path.parent.mkdir(parents=True, exist_ok=True)
    current = _load_project_config(project_root)
    current.update(updates)
    path.write_text(json.dumps(current, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def _choice(value, allowed: tuple[str, ...], key: str, default: str) -> str:
    if value is None:
        return default
    if value not in allowed:
        log.warning("Ignoring %s=%r (expected one of %s)", key, value, ", ".join(allowed))
        return default
    return value


def _positive_int(value, key: str, default: int) -> int:
    if value is None:
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        log.warning("Ignoring %s=%r (expected an integer)", key, value)
        return default
    if number <= 0:
        log.warning("Ignoring %s=%r (must be positive)", key, value)
        return default
    return number


def load_settings(project_root: Path | None = None) -> Settings:
    """Resolve settings for *project_root* (file first, env vars win)."""
    data = _load_project_config(project_root)
    env = os.environ

    fmt = env.get(ENV_FORMAT) or data.get("default_format")
    language = env.get(ENV_LANGUAGE) or data.get("default_language")
    max_bytes = env.get(ENV_MAX_FILE_BYTES) or data.get("max_file_bytes")

    return Settings(
        default_format=_choice(fmt, FORMATS, "default_format", DEFAULT_FORMAT),
        default_language=_choice(language, LANGUAGES, "default_language", FALLBACK_LANGUAGE),
        max_file_bytes=_positive_int(max_bytes, "max_file_bytes", DEFAULT_MAX_FILE_BYTES),
    )
