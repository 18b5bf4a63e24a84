"""Shared terminal output helpers for reqtrack.

All user-facing messages go through the module-level Rich ``console`` so that
styling stays consistent and tests can capture output in one place.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

console = Console(highlight=False)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(Text(message, style="bold green"))


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(Text(message, style="bold red"))


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(Text(message, style="bold yellow"))


def print_info(label: str, value: str) -> None:
    """Print ``label`` followed by *value* emphasised in red.

    Used for the working-context lines, e.g. ``On Branch main``.
    """
    text = Text(f"{label} ")
    text.append(value, style="bold red")
    console.print(text)
