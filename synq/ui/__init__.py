"""UI components for the SYNQ CLI."""

from synq.ui.console import (
    console,
    err_console,
    print_error,
    print_hint,
    print_json,
    print_success,
)
from synq.ui.panels import create_details_text, create_video_list_text
from synq.ui.spinners import create_spinner
from synq.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "err_console",
    "print_error",
    "print_hint",
    "print_json",
    "print_success",
    # Panels
    "create_details_text",
    "create_video_list_text",
    # Spinners
    "create_spinner",
]
