"""Tests for rendering the configuration to the log."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from bridge_platform.services.loader import load_configuration
from bridge_platform.services.presenter import display_configuration, render_configuration


EXPECTED_LABELS = [
    "Bot Token",
    "Channel ID",
    "Owner ID",
    "Command Prefix",
    "Relay Commands",
    "Remote Commands",
    "Authorized Roles",
    "Bot Game",
    "Topic Interval",
    "Offline Topic",
    "Broadcast Color (RGB)",
    "Silence Broadcasts",
    "Silence Chat",
    "Silence Saves",
    "Announce Reconnect",
    "Join Prefix",
    "Leave Prefix",
    "Ignore Chat",
    "Log Chat",
    "Message Length",
    "Debug Mode",
    "Locale String",
    "Author Format",
    "Timestamp Format",
    "Exception Abort",
]


def test_render_round_trips_document_values(write_document, config_dir: Path) -> None:
    write_document(
        {
            ("locale", "string"): "de-DE",
            ("bot", "token"): "tok.en",
            ("channel", "id"): "18446744073709551615",
            ("owner", "id"): "987654321",
            ("command", "prefix"): "?",
            ("remote", "commands"): "false",
            ("authorized", "roles"): "Admins",
            ("game", "status"): "Terraria 1.4",
            ("topic", "interval"): "1200",
            ("topic", "offline"): "Bridge down",
            ("broadcast", "red"): "10",
            ("broadcast", "green"): "20",
            ("broadcast", "blue"): "30",
            ("silence", "chat"): "true",
            ("message", "length"): "-1",
            ("author", "format"): "[%u%]",
            ("timestamp", "format"): "dd.MM.yyyy HH:mm",
            ("exception", "abort"): "true",
        }
    )
    config = load_configuration(config_dir).unwrap()

    lines = render_configuration(config)

    assert [line.split(": ", 1)[0] for line in lines] == EXPECTED_LABELS
    values = dict(line.split(": ", 1) for line in lines)
    assert values["Bot Token"] == "tok.en"
    assert values["Channel ID"] == "18446744073709551615"
    assert values["Owner ID"] == "987654321"
    assert values["Command Prefix"] == "?"
    assert values["Relay Commands"] == "True"
    assert values["Remote Commands"] == "False"
    assert values["Authorized Roles"] == "Admins"
    assert values["Bot Game"] == "Terraria 1.4"
    assert values["Topic Interval"] == "1200"
    assert values["Offline Topic"] == "Bridge down"
    assert values["Broadcast Color (RGB)"] == "10, 20, 30"
    assert values["Silence Chat"] == "True"
    assert values["Message Length"] == "-1"
    assert values["Locale String"] == "de-DE"
    assert values["Author Format"] == "[%u%]"
    assert values["Timestamp Format"] == "dd.MM.yyyy HH:mm"
    assert values["Exception Abort"] == "True"


def test_display_logs_each_line_at_debug(
    write_document, config_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    write_document()
    config = load_configuration(config_dir).unwrap()
    caplog.set_level(logging.DEBUG)
    target = logging.getLogger("tests.presenter")

    lines = display_configuration(config, target)

    records = [record for record in caplog.records if record.name == "tests.presenter"]
    assert [record.getMessage() for record in records] == lines
    assert all(record.levelno == logging.DEBUG for record in records)
    assert "Bot Token: ABC" in lines
