"""Main CLI entry point - argparse command tree for SYNQ."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Optional, Union

import httpx
from rich.logging import RichHandler

from synq import __app_name__, __version__
from synq.commands.base import BaseCommand
from synq.commands.config import ConfigClearCommand, ConfigSetCommand, ConfigShowCommand
from synq.commands.help import HelpCommand
from synq.commands.stream import StreamCommand
from synq.commands.uploader import UploaderCommand
from synq.commands.video import (
    VideoCreateCommand,
    VideoDetailsCommand,
    VideoQueryCommand,
    VideoUpdateCommand,
    VideoUploadCommand,
)
from synq.core.api_client import APIClient
from synq.core.config import ConfigStore
from synq.core.errors import SynqError
from synq.ui.console import err_console, print_error

CommandGroup = tuple[str, dict[str, type[BaseCommand]]]

# Top-level commands; a tuple is a group of subcommands
COMMAND_TREE: dict[str, Union[type[BaseCommand], CommandGroup]] = {
    "config": ("Manage CLI configuration", {
        "set": ConfigSetCommand,
        "show": ConfigShowCommand,
        "clear": ConfigClearCommand,
    }),
    "video": ("Manage videos", {
        "create": VideoCreateCommand,
        "details": VideoDetailsCommand,
        "upload": VideoUploadCommand,
        "update": VideoUpdateCommand,
        "query": VideoQueryCommand,
    }),
    "stream": StreamCommand,
    "uploader": UploaderCommand,
    "help": HelpCommand,
}


def _add_command(subparsers, name: str, command_cls: type[BaseCommand]) -> None:
    parser = subparsers.add_parser(name, help=command_cls.description, description=command_cls.description)
    command_cls.add_arguments(parser)
    parser.set_defaults(command_cls=command_cls)


def build_parser() -> argparse.ArgumentParser:
    """Build the full command tree."""
    parser = argparse.ArgumentParser(
        prog="synq",
        description=f"{__app_name__} - Video upload and playback from your terminal",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{__app_name__} {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log requests to stderr",
    )
    parser.set_defaults(command_cls=None)

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    for name, entry in COMMAND_TREE.items():
        if isinstance(entry, tuple):
            description, children = entry
            group = subparsers.add_parser(name, help=description, description=description)
            group_subparsers = group.add_subparsers(dest="subcommand", metavar="<subcommand>")
            group_subparsers.required = True
            for child_name, command_cls in children.items():
                _add_command(group_subparsers, child_name, command_cls)
        else:
            _add_command(subparsers, name, entry)

    return parser


def setup_logging(verbose: bool = False) -> None:
    """Send ``synq.*`` log records to stderr through rich."""
    logger = logging.getLogger("synq")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False, show_time=False))


class SynqCLI:
    """Wires the config store and API client into the command tree."""

    def __init__(
        self,
        store: Optional[ConfigStore] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.store = store or ConfigStore.from_env()
        self.api = APIClient(self.store, transport=transport)
        self.parser = build_parser()

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Run one command and return the process exit code."""
        argv = sys.argv[1:] if argv is None else list(argv)

        try:
            args = self.parser.parse_args(argv)
        except SystemExit as e:
            # --help and --version exit 0; usage errors report failure like any other
            return 0 if e.code in (None, 0) else 1

        setup_logging(args.verbose)

        command_cls = args.command_cls or HelpCommand
        command = command_cls(self.store, self.api)

        try:
            success = command.execute(args)
        except SynqError as e:
            print_error(e.message)
            success = False
        except KeyboardInterrupt:
            err_console.print("\n[warning]Interrupted[/warning]")
            success = False
        finally:
            self.api.close()

        return 0 if success else 1


def main():
    """Main entry point."""
    sys.exit(SynqCLI().run())


if __name__ == "__main__":
    main()
