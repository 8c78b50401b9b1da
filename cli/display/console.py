"""Shared Rich console instance for terminal output."""

from rich.console import Console

# Used by every renderer and command
console = Console()
