"""Tests for the ``KeyRichHandler`` key event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from rich.style import Style
from rich.text import Text

from keypath.platform.logging import LOGGER_NAME, KeyRichHandler, setup_logger


def _make_handler() -> KeyRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return KeyRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with key event extras for testing."""

    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_for_rejected_component() -> None:
    """Rejected components show the key, position and reason."""

    handler = _make_handler()
    record = _build_record(
        key_event="key.invalid",
        key="bar$baz",
        character_index=3,
        position=1,
        reason="Character '$' at index 3 is not allowed",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Rejected bar$baz" in plain
    assert "position=1" in plain
    assert "Character '$' at index 3 is not allowed" in plain


def test_rejected_character_is_highlighted() -> None:
    handler = _make_handler()
    record = _build_record(key_event="key.invalid", key="ab$", character_index=2)

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    dollar_offset = rendered.plain.index("$")
    styles = [span.style for span in rendered.spans if span.start <= dollar_offset < span.end]
    assert any(isinstance(style, Style) and style.underline for style in styles)


def test_render_message_for_built_key() -> None:
    handler = _make_handler()
    record = _build_record(key_event="key.built", key="tenants/acme/report.csv", component_count=3)

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Built tenants/acme/report.csv (components=3)" in rendered.plain


def test_plain_records_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")
    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_replaces_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "keypath.log"

    logger = setup_logger(log_file=log_file, console_level=logging.WARNING)
    logger = setup_logger(log_file=log_file, console_level=logging.WARNING)

    try:
        assert len(logger.handlers) == 2
        assert isinstance(logger.handlers[0], KeyRichHandler)
        assert logger.handlers[0].level == logging.WARNING

        logger.debug("written to file only")
        for handler in logger.handlers:
            handler.flush()
        assert "written to file only" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger(log_file=None)


def test_setup_logger_console_only() -> None:
    logger = setup_logger(log_file=None)
    assert len(logger.handlers) == 1


def test_setup_logger_unopenable_file_keeps_previous_handlers(tmp_path: Path) -> None:
    logger = setup_logger(log_file=None)
    previous = list(logger.handlers)
    blocker = tmp_path / "blocker"
    _ = blocker.write_text("", encoding="utf-8")

    with pytest.raises(OSError):
        _ = setup_logger(log_file=blocker / "keypath.log")

    assert logger.handlers == previous
