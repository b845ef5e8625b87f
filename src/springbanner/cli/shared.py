"""
Shared utilities and constants for CLI commands.
"""

from pathlib import Path

from rich.console import Console

# Shared console instance
console = Console()

DEFAULT_PYPROJECT = Path("pyproject.toml")
