"""The bridge configuration record and the defaults that exist before it is read."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from babel import Locale
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_LOCALE_STRING = "en-US"
DEFAULT_TIMESTAMP_FORMAT = "MM/dd/yyyy HH:mm:ss zzz"
DEFAULT_ABORT_ON_ERROR = False

BYTE_MAX = 0xFF
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1

ColorChannel = Annotated[int, Field(ge=0, le=BYTE_MAX)]


@dataclass(frozen=True, slots=True)
class ConfigurationSeed:
    """Hard-coded values in effect before the document has been read."""

    locale_string: str = DEFAULT_LOCALE_STRING
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    abort_on_error: bool = DEFAULT_ABORT_ON_ERROR


class Configuration(BaseModel):
    """Fully loaded bridge configuration, handed to collaborators at start-up."""

    model_config = ConfigDict(frozen=True, strict=True, arbitrary_types_allowed=True)

    bot_token: str = Field(..., min_length=1, repr=False)
    channel_id: int = Field(..., ge=0, le=UINT64_MAX)
    owner_id: int = Field(..., ge=0, le=UINT64_MAX)
    command_prefix: str = Field(..., min_length=1, max_length=1)
    relay_commands: bool
    remote_commands: bool
    authorized_roles: str
    bot_game: str
    topic_interval: int = Field(..., ge=0, le=UINT32_MAX)
    offline_topic: str
    broadcast_color: tuple[ColorChannel, ColorChannel, ColorChannel]
    silence_broadcasts: bool
    silence_chat: bool
    silence_saves: bool
    announce_reconnect: bool
    join_prefix: str
    leave_prefix: str
    ignore_chat: bool
    log_chat: bool
    message_length: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    debug_mode: bool
    locale_string: str = DEFAULT_LOCALE_STRING
    locale: Locale = Field(..., exclude=True)
    author_format: str
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    abort_on_error: bool = DEFAULT_ABORT_ON_ERROR

    @property
    def authorized_role_names(self) -> list[str]:
        """Role names allowed to run remote commands."""

        return self.authorized_roles.split()

    @property
    def message_length_unlimited(self) -> bool:
        return self.message_length == 0


__all__ = [
    "BYTE_MAX",
    "ColorChannel",
    "Configuration",
    "ConfigurationSeed",
    "DEFAULT_ABORT_ON_ERROR",
    "DEFAULT_LOCALE_STRING",
    "DEFAULT_TIMESTAMP_FORMAT",
    "INT32_MAX",
    "INT32_MIN",
    "UINT32_MAX",
    "UINT64_MAX",
]
