"""Config commands - store, show and clear the API key and base URL."""

from __future__ import annotations

import argparse
import sys

from prompt_toolkit import prompt
from rich.prompt import Confirm

from synq.commands.base import BaseCommand
from synq.core.config import DEFAULT_BASE_URL
from synq.ui.console import console, err_console, print_error, print_json, print_success
from synq.ui.panels import create_details_text


def mask_api_key(api_key: str) -> str:
    """Show only the first 8 characters of a key; shorter keys are fully masked."""
    if len(api_key) > 8:
        return api_key[:8] + "..."
    return "*" * len(api_key)


class ConfigSetCommand(BaseCommand):
    """Persist the API key and/or base URL."""

    name = "config set"
    description = "Set configuration values"
    usage = "synq config set [--api-key KEY] [--base-url URL]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--api-key", help="SYNQ API key")
        parser.add_argument("--base-url", help="API base URL")

    def execute(self, args: argparse.Namespace) -> bool:
        api_key = args.api_key
        base_url = args.base_url

        if not api_key and not base_url and sys.stdin.isatty():
            try:
                api_key = prompt("SYNQ API key: ", is_password=True).strip()
            except EOFError:
                api_key = ""

        if not api_key and not base_url:
            print_error("No options provided. Use --api-key or --base-url")
            return False

        if api_key:
            self.store.set("apiKey", api_key)
            print_success("API key set")
        if base_url:
            self.store.set("baseUrl", base_url)
            print_success("Base URL set")
        return True


class ConfigShowCommand(BaseCommand):
    """Show the stored configuration with the API key masked."""

    name = "config show"
    description = "Show current configuration"
    usage = "synq config show [--json]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        cls.add_json_flag(parser)

    def execute(self, args: argparse.Namespace) -> bool:
        config = self.store.get_all()
        api_key = config["apiKey"]
        base_url = config["baseUrl"] or DEFAULT_BASE_URL

        if args.json:
            print_json({"apiKey": mask_api_key(api_key) if api_key else None, "baseUrl": base_url})
            return True

        console.print(create_details_text("SYNQ Video CLI Configuration", [
            ("API Key", mask_api_key(api_key) if api_key else "not set",
             "secret" if api_key else "error"),
            ("Base URL", base_url, "url"),
        ]))
        return True


class ConfigClearCommand(BaseCommand):
    """Reset the configuration to its defaults."""

    name = "config clear"
    description = "Remove the stored API key and base URL"
    usage = "synq config clear [--force]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--force", "-f", action="store_true", help="Do not ask for confirmation")

    def execute(self, args: argparse.Namespace) -> bool:
        if not args.force and sys.stdin.isatty():
            if not Confirm.ask("[warning]Remove the stored configuration?[/warning]",
                               console=err_console, default=False):
                err_console.print("[muted]Cancelled.[/muted]")
                return True

        self.store.clear()
        print_success("Configuration cleared")
        return True
