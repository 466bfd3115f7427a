"""Diagnostic rendering of the loaded configuration."""
from __future__ import annotations

import logging
from typing import Optional

from ..logging_config import get_logger
from ..models.configuration import Configuration
from .locale import activate_locale


logger = get_logger(__name__)


def render_configuration(configuration: Configuration) -> list[str]:
    """Return one ``Label: value`` line per field in display order.

    The bot token is rendered as is.
    """

    context = activate_locale(configuration.locale)
    number = context.format_integer
    flag = context.format_boolean
    red, green, blue = configuration.broadcast_color

    return [
        f"Bot Token: {configuration.bot_token}",
        f"Channel ID: {number(configuration.channel_id)}",
        f"Owner ID: {number(configuration.owner_id)}",
        f"Command Prefix: {configuration.command_prefix}",
        f"Relay Commands: {flag(configuration.relay_commands)}",
        f"Remote Commands: {flag(configuration.remote_commands)}",
        f"Authorized Roles: {configuration.authorized_roles}",
        f"Bot Game: {configuration.bot_game}",
        f"Topic Interval: {number(configuration.topic_interval)}",
        f"Offline Topic: {configuration.offline_topic}",
        f"Broadcast Color (RGB): {number(red)}, {number(green)}, {number(blue)}",
        f"Silence Broadcasts: {flag(configuration.silence_broadcasts)}",
        f"Silence Chat: {flag(configuration.silence_chat)}",
        f"Silence Saves: {flag(configuration.silence_saves)}",
        f"Announce Reconnect: {flag(configuration.announce_reconnect)}",
        f"Join Prefix: {configuration.join_prefix}",
        f"Leave Prefix: {configuration.leave_prefix}",
        f"Ignore Chat: {flag(configuration.ignore_chat)}",
        f"Log Chat: {flag(configuration.log_chat)}",
        f"Message Length: {number(configuration.message_length)}",
        f"Debug Mode: {flag(configuration.debug_mode)}",
        f"Locale String: {configuration.locale_string}",
        f"Author Format: {configuration.author_format}",
        f"Timestamp Format: {configuration.timestamp_format}",
        f"Exception Abort: {flag(configuration.abort_on_error)}",
    ]


def display_configuration(
    configuration: Configuration,
    target: Optional[logging.Logger] = None,
) -> list[str]:
    """Log every configuration value at DEBUG severity and return the lines."""

    target = target or logger
    lines = render_configuration(configuration)
    for line in lines:
        target.debug(line)
    return lines


__all__ = ["display_configuration", "render_configuration"]
