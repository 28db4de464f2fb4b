"""Exception hierarchy."""

from __future__ import annotations


class ZedSettingsError(Exception):
    """Base class for zedsettings errors."""


class SettingsParseError(ZedSettingsError):
    """An existing settings file could not be read or is not a JSON object."""


class TemplateError(ZedSettingsError):
    """A template file is missing, unreadable, or malformed."""


class TemplateNotFoundError(TemplateError):
    """No template with the requested name exists."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Template not found: {name}")
