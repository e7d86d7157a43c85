"""CLI Commands for SYNQ."""

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

__all__ = [
    "ConfigSetCommand",
    "ConfigShowCommand",
    "ConfigClearCommand",
    "VideoCreateCommand",
    "VideoDetailsCommand",
    "VideoUploadCommand",
    "VideoUpdateCommand",
    "VideoQueryCommand",
    "StreamCommand",
    "UploaderCommand",
    "HelpCommand",
]
