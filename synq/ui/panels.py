"""Renderables for API results."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from rich.text import Text

# (label, value, style); rows with a value of None are skipped
Field = tuple[str, Any, str]


def create_details_text(title: str, fields: Iterable[Field]) -> Text:
    """Create a titled block of ``Label:  value`` lines.

    Labels are padded to a common width. Missing optional values are left
    out rather than printed as blanks.
    """
    rows = [(label, value, style) for label, value, style in fields if value is not None]
    width = max((len(label) for label, _, _ in rows), default=0) + 2

    text = Text()
    text.append(f"\n{title}\n\n", style="title")
    for label, value, style in rows:
        text.append(f"{label + ':':<{width}}", style="muted")
        text.append(f"{value}\n", style=style)
    return text


def create_video_list_text(videos: list[dict[str, Any]]) -> Text:
    """Create one bullet line per video: • <id> - <title>."""
    text = Text()
    for video in videos:
        if not isinstance(video, dict):
            video = {"id": video}
        text.append("• ", style="primary")
        text.append(f"{video.get('video_id') or video.get('id')}", style="id")
        text.append(f" - {video.get('title') or 'Untitled'}\n", style="text")
    return text
