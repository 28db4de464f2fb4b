"""JSON helpers for reading and writing settings files."""

from __future__ import annotations

import json
from pathlib import Path

from zedsettings.errors import SettingsParseError, ZedSettingsError


def load_json(path: Path) -> dict:
    """Load a JSON object from path, returning empty dict if the file is missing.

    Raises SettingsParseError if the file can't be read or isn't a JSON object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SettingsParseError(f"Could not parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SettingsParseError(
            f"Could not parse {path}: expected a JSON object, got {type(data).__name__}"
        )
    return data


def save_json(path: Path, data: dict) -> None:
    """Save dict as pretty-printed JSON, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ZedSettingsError(f"Could not write {path}: {exc}") from exc
