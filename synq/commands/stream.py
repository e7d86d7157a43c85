"""Stream command - create a live stream."""

from __future__ import annotations

import argparse

from synq.commands.base import BaseCommand
from synq.commands.video import collect_metadata
from synq.ui.console import console, print_success
from synq.ui.panels import create_details_text


class StreamCommand(BaseCommand):
    """Create a live stream and show where to push and where to watch."""

    name = "stream"
    description = "Create a live stream"
    usage = "synq stream [--title TITLE] [--json]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--title", help="Stream title")
        cls.add_json_flag(parser)

    def execute(self, args: argparse.Namespace) -> bool:
        if not self.require_auth():
            return False

        metadata = collect_metadata(args)
        response = self.call_api("Creating stream...", lambda: self.api.create_stream(metadata))
        if not response.success:
            return False

        return self.output(args, response.data, self._render)

    def _render(self, data: dict) -> None:
        console.print(create_details_text("Live Stream Created", [
            ("Video ID", data.get("video_id") or data.get("id"), "id"),
            ("Stream URL", data.get("stream_url"), "stream"),
            ("Playback URL", data.get("playback_url"), "url"),
        ]))
        print_success("Stream to the Stream URL, viewers use the Playback URL")
