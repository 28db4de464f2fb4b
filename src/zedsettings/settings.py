"""Apply templates to a project's .zed/settings.json."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from zedsettings.errors import SettingsParseError
from zedsettings.merge import merge_all
from zedsettings.templates import TemplateInfo
from zedsettings.utils import load_json, save_json

logger = logging.getLogger(__name__)

SETTINGS_DIR = ".zed"
SETTINGS_FILE = "settings.json"


@dataclass
class ApplyResult:
    settings_path: Path
    template_name: str
    settings: dict = field(default_factory=dict)
    created_dir: bool = False
    merged_existing: bool = False
    recovered: bool = False
    written: bool = False


def settings_path(project_dir: Path) -> Path:
    """Path of the project settings file: <project>/.zed/settings.json."""
    return project_dir / SETTINGS_DIR / SETTINGS_FILE


def read_settings(project_dir: Path) -> dict:
    """Read current project settings; empty dict if there are none."""
    return load_json(settings_path(project_dir))


def apply_template(project_dir: Path, template: TemplateInfo, dry_run: bool = False) -> ApplyResult:
    """Deep-merge one template over the project's settings and write them."""
    return apply_templates(project_dir, [template], dry_run=dry_run)


def apply_templates(
    project_dir: Path,
    templates: list[TemplateInfo],
    dry_run: bool = False,
) -> ApplyResult:
    """Merge several templates in order over the project's settings.

    An existing settings file that can't be parsed is replaced. Later
    templates win over earlier ones. Nothing is written on dry run.
    """
    path = settings_path(project_dir)
    result = ApplyResult(
        settings_path=path,
        template_name=", ".join(t.name for t in templates),
    )

    if not path.parent.exists() and not dry_run:
        path.parent.mkdir(parents=True, exist_ok=True)
        result.created_dir = True
        logger.info("Created directory: %s", path.parent)

    existing: dict = {}
    if path.exists():
        try:
            existing = load_json(path)
            result.merged_existing = True
        except SettingsParseError as exc:
            logger.info("%s Creating new settings file.", exc)
            result.recovered = True

    result.settings = merge_all(existing, *(t.settings for t in templates))

    if not dry_run:
        save_json(path, result.settings)
        result.written = True
        logger.info("Wrote %s settings to %s", result.template_name, path)
    return result
