"""Request-body builders for each SYNQ endpoint.

Each builder is a pure function: it takes the caller's input, checks it
against a small pydantic schema and returns the dict that is sent as the
JSON body (before the API key is merged in).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as SchemaError

from synq.core.errors import ValidationError


class VideoMetadata(BaseModel):
    """Free-form video metadata; title and description are the known fields."""

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    description: Optional[str] = None


class VideoRef(BaseModel):
    video_id: str = Field(min_length=1)


class VideoUpdate(VideoRef):
    source: VideoMetadata

    @field_validator("source")
    @classmethod
    def _not_empty(cls, value: VideoMetadata) -> VideoMetadata:
        if not value.model_dump(exclude_none=True):
            raise ValueError("No metadata provided. Use --title or --description")
        return value


class VideoQuery(BaseModel):
    filter: dict[str, Any] = Field(default_factory=dict)


def _validate(
    model: type[BaseModel], data: Mapping[str, Any], exclude_none: bool = True
) -> dict[str, Any]:
    """Validate ``data`` against ``model`` and dump it back to a plain dict."""
    try:
        return model.model_validate(dict(data)).model_dump(exclude_none=exclude_none)
    except SchemaError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        message = error["msg"].removeprefix("Value error, ")
        raise ValidationError(f"{field}: {message}" if field else message) from e


def build_metadata(metadata: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    """Body for /video/create and /video/stream: the metadata itself."""
    return _validate(VideoMetadata, metadata or {})


def build_video_ref(video_id: str) -> dict[str, Any]:
    """Body for endpoints addressed by a single video ID."""
    return _validate(VideoRef, {"video_id": video_id})


def build_update(video_id: str, metadata: Mapping[str, Any]) -> dict[str, Any]:
    """Body for /video/update: ``{video_id, source: metadata}``."""
    return _validate(VideoUpdate, {"video_id": video_id, "source": dict(metadata)})


def build_query(filter: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    """Body for /video/query. The filter is always sent, even when empty."""
    # Filter values may legitimately be null, so nothing is dropped here
    return _validate(VideoQuery, {"filter": {} if filter is None else filter}, exclude_none=False)
