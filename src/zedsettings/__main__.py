"""Allow `python -m zedsettings`."""

from zedsettings.cli import app

if __name__ == "__main__":
    app()
