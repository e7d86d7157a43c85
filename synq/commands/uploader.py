"""Uploader command - get the embeddable upload widget for a video."""

from __future__ import annotations

import argparse

from synq.commands.base import BaseCommand
from synq.ui.console import console, print_success
from synq.ui.panels import create_details_text


class UploaderCommand(BaseCommand):
    name = "uploader"
    description = "Get uploader widget URL"
    usage = "synq uploader <video-id> [--json]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("video_id", metavar="video-id", help="Video ID")
        cls.add_json_flag(parser)

    def execute(self, args: argparse.Namespace) -> bool:
        if not self.require_auth():
            return False

        response = self.call_api(
            f"Getting uploader widget for {args.video_id}...",
            lambda: self.api.get_uploader_widget(args.video_id),
        )
        if not response.success:
            return False

        return self.output(args, response.data, lambda data: self._render(args.video_id, data))

    def _render(self, video_id: str, data: dict) -> None:
        console.print(create_details_text("Uploader Widget", [
            ("Video ID", video_id, "id"),
            ("Widget URL", data.get("uploader_url"), "url"),
        ]))
        print_success("Embed this URL for user uploads")
