"""Rich console handler for key path events.

Where: platform/logging/handlers.py
What: Render ``key_event`` log records with icons and coloured key separators.
Why: Make rejected components easy to spot in terminal output.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class KeyRichHandler(RichHandler):
    """Rich handler that highlights key separators and rejected characters."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "key.valid": ("✅", "green"),
        "key.invalid": ("⛔", "red"),
        "key.built": ("🔑", "cyan"),
        "key.parsed": ("🧩", "blue"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "key.valid": "Valid ",
        "key.invalid": "Rejected ",
        "key.built": "Built ",
        "key.parsed": "Parsed ",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _style_key(key: str, highlight_index: int | None = None) -> Text:
        """Style a rendered key, colouring separators and one highlighted character."""

        text = Text()
        for index, char in enumerate(key):
            if index == highlight_index:
                _ = text.append(char, style=Style(color="red", bold=True, underline=True))
            elif char == "/":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_key_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured key events, or ``None`` for plain records."""

        event = getattr(record, "key_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_PREFIXES.get(event, ""))

        key = getattr(record, "key", None)
        if isinstance(key, str):
            index = getattr(record, "character_index", None)
            _ = body.append_text(
                self._style_key(key, index if isinstance(index, int) else None)
            )

        details: list[str] = []
        components = getattr(record, "component_count", None)
        if isinstance(components, int):
            details.append(f"components={components}")
        position = getattr(record, "position", None)
        if isinstance(position, int):
            details.append(f"position={position}")
        reason = getattr(record, "reason", None)
        if reason:
            details.append(str(reason))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render key events with custom styling, other records as usual."""

        key_text = self._render_key_message(record)
        if key_text is not None:
            return key_text

        return super().render_message(record, message)


__all__ = ["KeyRichHandler"]
