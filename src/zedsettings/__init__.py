"""zedsettings - write and merge Zed editor project settings."""

__version__ = "0.1.0"
