"""Video commands - create, inspect, update and query videos."""

from __future__ import annotations

import argparse
import json
from typing import Any

from synq.commands.base import BaseCommand
from synq.core.errors import ValidationError
from synq.ui.console import console, print_success
from synq.ui.panels import create_details_text, create_video_list_text


def collect_metadata(args: argparse.Namespace) -> dict[str, Any]:
    """Pick the metadata flags that were actually given."""
    metadata = {}
    for field in ("title", "description"):
        value = getattr(args, field, None)
        if value:
            metadata[field] = value
    return metadata


def add_metadata_flags(parser: argparse.ArgumentParser, title_help: str, description_help: str) -> None:
    parser.add_argument("--title", help=title_help)
    parser.add_argument("--description", help=description_help)


class VideoCreateCommand(BaseCommand):
    """Create a new video."""

    name = "video create"
    description = "Create a new video"
    usage = "synq video create [--title TITLE] [--description DESC] [--json]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        add_metadata_flags(parser, "Video title", "Video description")
        cls.add_json_flag(parser)

    def execute(self, args: argparse.Namespace) -> bool:
        if not self.require_auth():
            return False

        metadata = collect_metadata(args)
        response = self.call_api("Creating video...", lambda: self.api.create_video(metadata))
        if not response.success:
            return False

        return self.output(args, response.data, self._render)

    def _render(self, data: dict) -> None:
        console.print(create_details_text("Video Created", [
            ("Video ID", data.get("video_id") or data.get("id"), "id"),
            ("Title", data.get("title"), "text"),
        ]))
        print_success("Video created successfully")


class VideoDetailsCommand(BaseCommand):
    """Fetch details for one video."""

    name = "video details"
    description = "Get video details"
    usage = "synq video details <video-id> [--json]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("video_id", metavar="video-id", help="Video ID")
        cls.add_json_flag(parser)

    def execute(self, args: argparse.Namespace) -> bool:
        if not self.require_auth():
            return False

        response = self.call_api(
            f"Fetching details for {args.video_id}...",
            lambda: self.api.get_video_details(args.video_id),
        )
        if not response.success:
            return False

        return self.output(args, response.data, lambda data: self._render(args.video_id, data))

    def _render(self, video_id: str, data: dict) -> None:
        console.print(create_details_text("Video Details", [
            ("ID", data.get("video_id") or video_id, "id"),
            ("Title", data.get("title"), "text"),
            ("State", data.get("state"), "state"),
            ("Created", data.get("created_at"), "text"),
            ("Playback", data.get("playback_url"), "url"),
        ]))


class VideoUploadCommand(BaseCommand):
    """Fetch the parameters needed to upload a video file."""

    name = "video upload"
    description = "Get upload parameters for a video"
    usage = "synq video upload <video-id> [--json]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("video_id", metavar="video-id", help="Video ID")
        cls.add_json_flag(parser)

    def execute(self, args: argparse.Namespace) -> bool:
        if not self.require_auth():
            return False

        response = self.call_api(
            f"Getting upload params for {args.video_id}...",
            lambda: self.api.get_upload_params(args.video_id),
        )
        if not response.success:
            return False

        return self.output(args, response.data, lambda data: self._render(args.video_id, data))

    def _render(self, video_id: str, data: dict) -> None:
        console.print(create_details_text("Upload Parameters", [
            ("Video ID", video_id, "id"),
            ("Upload URL", data.get("upload_url"), "url"),
            ("Action", data.get("action"), "text"),
        ]))
        print_success("Use these parameters to upload your video file")


class VideoUpdateCommand(BaseCommand):
    """Update a video's title and/or description."""

    name = "video update"
    description = "Update video metadata"
    usage = "synq video update <video-id> [--title TITLE] [--description DESC] [--json]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("video_id", metavar="video-id", help="Video ID")
        add_metadata_flags(parser, "New title", "New description")
        cls.add_json_flag(parser)

    def execute(self, args: argparse.Namespace) -> bool:
        # Nothing to send is a local error, whatever the auth state
        metadata = collect_metadata(args)
        if not metadata:
            raise ValidationError("No metadata provided. Use --title or --description")

        if not self.require_auth():
            return False

        response = self.call_api(
            f"Updating video {args.video_id}...",
            lambda: self.api.update_video(args.video_id, metadata),
        )
        if not response.success:
            return False

        return self.output(
            args, response.data,
            lambda data: print_success(f"Video {args.video_id} updated successfully"),
        )


class VideoQueryCommand(BaseCommand):
    """Query videos with an optional JSON filter."""

    name = "video query"
    description = "Query videos"
    usage = "synq video query [--filter JSON] [--json]"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--filter", help="Filter as JSON string")
        cls.add_json_flag(parser)

    def execute(self, args: argparse.Namespace) -> bool:
        filter = self._parse_filter(args.filter)

        if not self.require_auth():
            return False

        response = self.call_api("Querying videos...", lambda: self.api.query_videos(filter))
        if not response.success:
            return False

        return self.output(args, response.data, self._render)

    @staticmethod
    def _parse_filter(raw: str | None) -> dict[str, Any]:
        if not raw:
            return {}
        try:
            filter = json.loads(raw)
        except ValueError as e:
            raise ValidationError("Invalid JSON filter") from e
        if not isinstance(filter, dict):
            raise ValidationError("Invalid JSON filter: expected a JSON object")
        return filter

    def _render(self, data: dict) -> None:
        console.print("\n[title]Video Query Results[/title]\n")
        videos = data.get("videos") or data.get("results") or []

        if not videos:
            console.print("[warning]No videos found.[/warning]")
            return

        console.print(create_video_list_text(videos), end="")
        console.print(f"\n[dim]{len(videos)} video(s) found[/dim]")
