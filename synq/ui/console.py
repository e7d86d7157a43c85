"""Rich console instances and helper functions.

Rendered results go to ``console`` (stdout). Errors, hints and the
progress indicator go to ``err_console`` (stderr) so that ``--json``
output on stdout stays machine-readable.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

from synq.ui.theme import get_theme

# emoji=False keeps ":name:" text in API messages literal
console = Console(theme=get_theme().to_rich_theme(), highlight=False, emoji=False)
err_console = Console(theme=get_theme().to_rich_theme(), highlight=False, emoji=False, stderr=True)


def print_success(message: str) -> None:
    """Print a success line: ✓ message."""
    console.print(f"[success]✓[/success] {escape(message)}")


def print_error(message: str) -> None:
    """Print a single error line on stderr: ✗ message."""
    err_console.print(f"[error]✗[/error] {escape(message)}", soft_wrap=True)


def print_hint(message: str) -> None:
    """Print a remediation hint on stderr (markup allowed)."""
    err_console.print(message, soft_wrap=True)


def print_json(data: Any) -> None:
    """Print ``data`` as indented JSON on stdout."""
    console.print_json(data=data, indent=2, highlight=console.is_terminal)
