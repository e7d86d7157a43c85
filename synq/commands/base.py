"""Base command class for CLI commands."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from synq.core.api_client import APIClient, APIResponse
from synq.core.config import ConfigStore
from synq.ui.console import print_error, print_hint, print_json
from synq.ui.spinners import create_spinner


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    name: str = "base"
    description: str = "Base command"
    usage: str = ""

    def __init__(self, store: ConfigStore, api: APIClient):
        self.store = store
        self.api = api

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Declare the command's flags and positionals."""

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> bool:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments

        Returns:
            True if successful, False otherwise
        """
        pass

    def require_auth(self) -> bool:
        """Check that an API key is stored, printing how to set one if not."""
        if self.store.is_configured():
            return True

        print_error("API key not configured.")
        print_hint("\nRun the following to configure:")
        print_hint("[command]  synq config set --api-key YOUR_API_KEY[/command]")
        print_hint("\nGet your API key at: https://www.synq.fm/")
        return False

    def call_api(self, message: str, fn: Callable[[], APIResponse]) -> APIResponse:
        """Run ``fn`` behind a spinner, printing the error if it failed."""
        with create_spinner(message, style="loading"):
            response = fn()

        if not response.success:
            print_error(response.error.message if response.error else "Request failed")

        return response

    def output(self, args: argparse.Namespace, data: Any, render: Callable[[Any], None]) -> bool:
        """Print ``data`` as raw JSON when --json was given, else via ``render``."""
        if getattr(args, "json", False):
            print_json(data)
        else:
            render(data if isinstance(data, dict) else {})
        return True

    @staticmethod
    def add_json_flag(parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--json", action="store_true", help="Output as JSON")
