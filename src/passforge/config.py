from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from .models import DEFAULT_OPTIONS, GenerationOptions


class SettingsError(Exception):
    pass


def workspace_root() -> Path:
    override = os.environ.get("PASSFORGE_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".passforge"


def settings_path() -> Path:
    return workspace_root() / "config" / "settings.json"


def default_settings() -> dict[str, Any]:
    return {
        "generator": DEFAULT_OPTIONS.to_dict(),
        "logging": {
            "level": "WARNING",
        },
    }


def ensure_workspace_files() -> Path:
    path = settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        save_json(path, default_settings())
    return path


def load_json(path: Path, fallback: Any) -> Any:
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except (OSError, json.JSONDecodeError):
        return fallback


def save_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
        handle.write("\n")


def load_settings(path: Path | None = None) -> dict[str, Any]:
    settings = default_settings()
    stored = load_json(path or settings_path(), {})
    if not isinstance(stored, dict):
        return settings
    for section, values in stored.items():
        default = settings.get(section)
        if default is None:
            settings[section] = values
        elif isinstance(default, dict) and isinstance(values, dict):
            default.update(values)
        # sections whose stored type differs from the default keep the default
    return settings


def options_from_settings(settings: dict[str, Any]) -> GenerationOptions:
    payload = {**DEFAULT_OPTIONS.to_dict(), **(settings.get("generator") or {})}
    try:
        return GenerationOptions.from_dict(payload)
    except ValueError as exc:
        raise SettingsError(f"Invalid generator settings in {settings_path()}: {exc}") from exc
