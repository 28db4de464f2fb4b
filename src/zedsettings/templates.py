"""Settings templates: built-in and user-supplied."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from zedsettings.errors import TemplateError, TemplateNotFoundError
from zedsettings.merge import is_config_node

logger = logging.getLogger(__name__)

BUILTIN_TEMPLATES_DIR = Path(__file__).parent / "builtin_templates"
TEMPLATES_DIR_ENV = "ZEDSETTINGS_TEMPLATES_DIR"
TEMPLATE_SUFFIXES = (".json", ".yaml", ".yml")

_METADATA_KEYS = {"name", "description", "settings"}


@dataclass
class TemplateInfo:
    name: str
    description: str
    settings: dict
    file_path: Path
    builtin: bool = False


def _parse_file(path: Path) -> object:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_template_file(path: Path, builtin: bool = False) -> TemplateInfo:
    """Load a template from a JSON or YAML file.

    The file is either the settings object itself, or a document with
    ``name``, ``description`` and ``settings`` keys.
    """
    try:
        data = _parse_file(path)
    except FileNotFoundError as exc:
        raise TemplateError(f"Template file not found: {path}") from exc
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise TemplateError(f"Error reading template file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise TemplateError(f"Template {path} must contain an object at the top level")
    # YAML can yield dates, sets and non-string keys
    if not is_config_node(data):
        raise TemplateError(f"Template {path} contains values JSON cannot represent")

    if isinstance(data.get("settings"), dict) and set(data) <= _METADATA_KEYS:
        return TemplateInfo(
            name=str(data.get("name", path.stem)),
            description=str(data.get("description", "")),
            settings=data["settings"],
            file_path=path,
            builtin=builtin,
        )
    return TemplateInfo(name=path.stem, description="", settings=data, file_path=path, builtin=builtin)


def resolve_templates_dir(templates_dir: Path | None = None) -> Path | None:
    """Return the user templates directory, falling back to the environment."""
    if templates_dir is not None:
        return templates_dir
    env_dir = os.environ.get(TEMPLATES_DIR_ENV)
    return Path(env_dir) if env_dir else None


def _scan_dir(search_dir: Path, builtin: bool) -> dict[str, TemplateInfo]:
    found: dict[str, TemplateInfo] = {}
    if not search_dir.is_dir():
        return found
    for f in sorted(search_dir.iterdir()):
        if f.suffix not in TEMPLATE_SUFFIXES or not f.is_file():
            continue
        try:
            info = load_template_file(f, builtin=builtin)
        except TemplateError as exc:
            logger.warning("Skipping template: %s", exc)
            continue
        found.setdefault(info.name, info)
    return found


def list_templates(templates_dir: Path | None = None) -> list[TemplateInfo]:
    """List available templates, user templates shadowing built-ins."""
    templates = _scan_dir(BUILTIN_TEMPLATES_DIR, builtin=True)
    user_dir = resolve_templates_dir(templates_dir)
    if user_dir is not None:
        if not user_dir.is_dir():
            logger.warning("Templates directory not found: %s", user_dir)
        templates.update(_scan_dir(user_dir, builtin=False))
    return [templates[name] for name in sorted(templates)]


def load_builtin_template(name: str) -> TemplateInfo:
    """Get a built-in template by name, ignoring any user templates."""
    templates = _scan_dir(BUILTIN_TEMPLATES_DIR, builtin=True)
    if name not in templates:
        raise TemplateNotFoundError(name, sorted(templates))
    return templates[name]


def available_template_names(templates_dir: Path | None = None) -> list[str]:
    return [t.name for t in list_templates(templates_dir)]


def load_template(name: str, templates_dir: Path | None = None) -> TemplateInfo:
    """Get a template by name.

    Raises TemplateNotFoundError listing the available names if missing.
    """
    templates = list_templates(templates_dir)
    for template in templates:
        if template.name == name:
            return template
    raise TemplateNotFoundError(name, [t.name for t in templates])
