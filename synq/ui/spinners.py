"""Progress indicator shown while a request is pending."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from synq.ui.console import err_console

# Spinner styles by purpose
SPINNER_STYLES = {
    "default": "dots",
    "loading": "dots12",
    "processing": "arc",
}


@contextmanager
def create_spinner(message: str, style: str = "default") -> Generator[None, None, None]:
    """Show a transient spinner on stderr for the duration of the block.

    The spinner is always stopped before control leaves the block, whether
    the wrapped call succeeded or raised.
    """
    spinner_type = SPINNER_STYLES.get(style, "dots")

    with err_console.status(
        f"[primary]{message}[/primary]",
        spinner=spinner_type,
        spinner_style="spinner",
    ):
        yield
