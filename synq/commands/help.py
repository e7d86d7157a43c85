"""Help command - display CLI help and usage."""

from __future__ import annotations

import argparse

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from synq import __app_name__, __version__
from synq.commands.base import BaseCommand
from synq.ui.console import console, print_error

COMMANDS = [
    {
        "name": "config set",
        "description": "Store the API key and/or base URL",
        "usage": "synq config set [--api-key KEY] [--base-url URL]",
    },
    {
        "name": "config show",
        "description": "Show current configuration (API key masked)",
        "usage": "synq config show [--json]",
    },
    {
        "name": "config clear",
        "description": "Reset configuration to defaults",
        "usage": "synq config clear [--force]",
    },
    {
        "name": "video create",
        "description": "Create a new video",
        "usage": "synq video create [--title TITLE] [--description DESC] [--json]",
    },
    {
        "name": "video details",
        "description": "Get video details",
        "usage": "synq video details <video-id> [--json]",
    },
    {
        "name": "video upload",
        "description": "Get upload parameters for a video",
        "usage": "synq video upload <video-id> [--json]",
    },
    {
        "name": "video update",
        "description": "Update video title and/or description",
        "usage": "synq video update <video-id> [--title TITLE] [--description DESC] [--json]",
    },
    {
        "name": "video query",
        "description": "Query videos with a JSON filter",
        "usage": "synq video query [--filter JSON] [--json]",
    },
    {
        "name": "stream",
        "description": "Create a live stream",
        "usage": "synq stream [--title TITLE] [--json]",
    },
    {
        "name": "uploader",
        "description": "Get uploader widget URL",
        "usage": "synq uploader <video-id> [--json]",
    },
    {
        "name": "help",
        "description": "Show this help message",
        "usage": "synq help [command]",
    },
]


class HelpCommand(BaseCommand):
    """Display help information."""

    name = "help"
    description = "Show help information"
    usage = "synq help [command]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("topic", nargs="*", help="Command to describe, e.g. 'video update'")

    def execute(self, args: argparse.Namespace) -> bool:
        """Display help."""
        topic = " ".join(getattr(args, "topic", None) or [])
        if topic:
            return self._show_command_help(topic.lower())
        return self._show_general_help()

    def _show_general_help(self) -> bool:
        """Show general help with all commands."""
        console.print(f"\n[primary.bold]{__app_name__}[/primary.bold] [muted]v{__version__}[/muted]")
        console.print("[muted]Video upload and playback from your terminal[/muted]\n")

        table = Table(
            show_header=True,
            header_style="primary",
            border_style="muted",
            padding=(0, 2),
        )
        table.add_column("Command", style="command", no_wrap=True)
        table.add_column("Description", style="text")

        for cmd in COMMANDS:
            table.add_row(cmd["name"], cmd["description"])

        console.print(Panel(
            table,
            title="[primary]Available Commands[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        tips = Text()
        tips.append("Tips:\n", style="primary")
        tips.append("  • ", style="muted")
        tips.append("Start with ", style="text")
        tips.append("synq config set --api-key YOUR_API_KEY", style="command")
        tips.append("\n  • ", style="muted")
        tips.append("Add ", style="text")
        tips.append("--json", style="command")
        tips.append(" to any API command for raw output", style="text")
        tips.append("\n  • ", style="muted")
        tips.append("Use ", style="text")
        tips.append("synq help <command>", style="command")
        tips.append(" for detailed command help", style="text")
        console.print(tips)

        return True

    def _show_command_help(self, cmd_name: str) -> bool:
        """Show detailed help for a specific command."""
        matches = [c for c in COMMANDS if c["name"] == cmd_name or c["name"].startswith(cmd_name + " ")]

        if not matches:
            print_error(f"Unknown command: {cmd_name}")
            return False

        for cmd in matches:
            text = Text()
            text.append(f"{cmd['name']}\n\n", style="primary.bold")
            text.append(f"{cmd['description']}\n\n", style="text")
            text.append("Usage:\n", style="muted")
            text.append(f"  {cmd['usage']}", style="command")

            console.print(Panel(
                text,
                title=f"[primary]{cmd['name']}[/primary]",
                border_style="primary",
                padding=(1, 2),
            ))

        return True
