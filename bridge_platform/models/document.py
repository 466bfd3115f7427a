"""Layout of the persisted XML configuration document."""
from __future__ import annotations

from dataclasses import dataclass

from .configuration import BYTE_MAX, INT32_MAX, INT32_MIN, UINT32_MAX, UINT64_MAX
from .enums import FieldKind


ROOT_ELEMENT = "configuration"

INTEGER_BOUNDS: dict[FieldKind, tuple[int, int]] = {
    FieldKind.BYTE: (0, BYTE_MAX),
    FieldKind.INT32: (INT32_MIN, INT32_MAX),
    FieldKind.UINT32: (0, UINT32_MAX),
    FieldKind.UINT64: (0, UINT64_MAX),
}


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One attribute of the document mapped onto a configuration field."""

    name: str
    element: str
    attribute: str
    kind: FieldKind
    default: str


@dataclass(frozen=True, slots=True)
class ElementSpec:
    tag: str
    comment: str


# Read order. ``locale`` comes first because every later conversion depends on it.
FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("locale_string", "locale", "string", FieldKind.TEXT, "en-US"),
    FieldSpec("bot_token", "bot", "token", FieldKind.TEXT, "ABC"),
    FieldSpec("channel_id", "channel", "id", FieldKind.UINT64, "123"),
    FieldSpec("owner_id", "owner", "id", FieldKind.UINT64, "123"),
    FieldSpec("command_prefix", "command", "prefix", FieldKind.CHARACTER, "!"),
    FieldSpec("relay_commands", "relay", "commands", FieldKind.BOOLEAN, "true"),
    FieldSpec("remote_commands", "remote", "commands", FieldKind.BOOLEAN, "true"),
    FieldSpec("authorized_roles", "authorized", "roles", FieldKind.TEXT, "Administrators Moderators"),
    FieldSpec("bot_game", "game", "status", FieldKind.TEXT, "Terraria"),
    FieldSpec("topic_interval", "topic", "interval", FieldKind.UINT32, "300"),
    FieldSpec("offline_topic", "topic", "offline", FieldKind.TEXT, "Relay offline"),
    FieldSpec("broadcast_red", "broadcast", "red", FieldKind.BYTE, "255"),
    FieldSpec("broadcast_green", "broadcast", "green", FieldKind.BYTE, "215"),
    FieldSpec("broadcast_blue", "broadcast", "blue", FieldKind.BYTE, "0"),
    FieldSpec("silence_broadcasts", "silence", "broadcasts", FieldKind.BOOLEAN, "false"),
    FieldSpec("silence_chat", "silence", "chat", FieldKind.BOOLEAN, "false"),
    FieldSpec("silence_saves", "silence", "saves", FieldKind.BOOLEAN, "false"),
    FieldSpec("announce_reconnect", "announce", "reconnect", FieldKind.BOOLEAN, "true"),
    FieldSpec("join_prefix", "join", "prefix", FieldKind.TEXT, ":green_circle:"),
    FieldSpec("leave_prefix", "leave", "prefix", FieldKind.TEXT, ":red_circle:"),
    FieldSpec("ignore_chat", "ignore", "chat", FieldKind.BOOLEAN, "false"),
    FieldSpec("log_chat", "log", "chat", FieldKind.BOOLEAN, "true"),
    FieldSpec("message_length", "message", "length", FieldKind.INT32, "0"),
    FieldSpec("debug_mode", "debug", "mode", FieldKind.BOOLEAN, "false"),
    FieldSpec("author_format", "author", "format", FieldKind.TEXT, "<%u%@Discord>"),
    FieldSpec("timestamp_format", "timestamp", "format", FieldKind.TEXT, "MM/dd/yyyy HH:mm:ss zzz"),
    FieldSpec("abort_on_error", "exception", "abort", FieldKind.BOOLEAN, "false"),
)

BROADCAST_CHANNELS = ("broadcast_red", "broadcast_green", "broadcast_blue")

# Write order of the generated document.
ELEMENTS: tuple[ElementSpec, ...] = (
    ElementSpec("bot", "Discord bot token"),
    ElementSpec("channel", "Discord channel ID"),
    ElementSpec("owner", "Discord bot owner ID"),
    ElementSpec("command", "Bot command prefix"),
    ElementSpec("relay", "Relay bot commands from Discord to players"),
    ElementSpec("remote", "Toggle execution of TShock commands submitted remotely by Discord bot owner"),
    ElementSpec(
        "authorized",
        "List of space-separated Discord roles authorized to execute TShock commands remotely",
    ),
    ElementSpec("game", 'Discord bot game for "playing" status'),
    ElementSpec("topic", "Topic update interval in seconds and topic to set when relay is offline"),
    ElementSpec("broadcast", "Terraria broadcast color in RGB"),
    ElementSpec("silence", "Toggle broadcasts, chat, and world saves displayed in Discord"),
    ElementSpec("announce", "Notify Discord channel of relay availability after restoring the connection"),
    ElementSpec("join", "Player join event prefix/emoji displayed in Discord"),
    ElementSpec("leave", "Player leave event prefix/emoji displayed in Discord"),
    ElementSpec("ignore", "Toggle Discord chat displayed in game"),
    ElementSpec("log", "Log all chat messages"),
    ElementSpec("message", "Maximum length allowed in game for received Discord messages (0 = unlimited)"),
    ElementSpec("debug", "Debug mode"),
    ElementSpec("locale", "Locale"),
    ElementSpec("author", "Discord message author appearance in game"),
    ElementSpec("timestamp", "Timestamp format"),
    ElementSpec("exception", "Terminate TShock when an error is encountered"),
)


def fields_for(element: str) -> tuple[FieldSpec, ...]:
    """Return the attributes stored on ``element`` in document order."""

    return tuple(spec for spec in FIELDS if spec.element == element)


__all__ = [
    "BROADCAST_CHANNELS",
    "ELEMENTS",
    "ElementSpec",
    "FIELDS",
    "FieldSpec",
    "INTEGER_BOUNDS",
    "ROOT_ELEMENT",
    "fields_for",
]
