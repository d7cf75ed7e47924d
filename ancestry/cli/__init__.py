# ancestry/cli/__init__.py
from ancestry.cli.cli import app

__all__ = ["app"]
