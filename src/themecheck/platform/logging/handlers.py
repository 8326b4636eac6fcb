"""Rich console handler for theme check events.

Where: platform/logging/handlers.py
What: Render structured ``check_event`` log records with icons and colours.
Why: Keep console output readable while the file log stays plain text.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ImpactRichHandler(RichHandler):
    """Rich handler that styles impact check events."""

    _CHECK_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "check.skip.no_update": ("⏭️", "dim"),
        "check.cache.hit": ("♻️", "green"),
        "check.fetch.start": ("🌐", "blue"),
        "check.fetch.cached": ("✅", "green"),
        "check.fetch.uncached": ("⚠️", "yellow"),
        "check.fetch.error": ("❌", "red"),
    }
    _CHECK_PREFIXES: ClassVar[dict[str, str]] = {
        "check.skip.no_update": "No update pending for ",
        "check.cache.hit": "Using cached impact for ",
        "check.fetch.start": "Requesting impact for ",
        "check.fetch.cached": "Cached impact for ",
        "check.fetch.uncached": "Impact not cached for ",
        "check.fetch.error": "Impact check failed for ",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact console settings.

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

    def _render_check_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured check events with dedicated styling."""

        event = getattr(record, "check_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._CHECK_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._CHECK_PREFIXES.get(event, "Impact check for "))

        package_id = getattr(record, "package_id", None)
        _ = body.append(str(package_id) if package_id else "unknown package", style=Style(color="white"))

        installed = getattr(record, "installed_version", None)
        available = getattr(record, "available_version", None)
        if installed and available:
            _ = body.append(f" {installed} → {available}")

        details: list[str] = []
        diff_percent = getattr(record, "diff_percent", None)
        if isinstance(diff_percent, (int, float)) and not isinstance(diff_percent, bool):
            details.append(f"diff={diff_percent:g}%")
        status_code = getattr(record, "status_code", None)
        if status_code:
            details.append(f"status={status_code}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        fingerprint = getattr(record, "fingerprint", None)
        if isinstance(fingerprint, str) and fingerprint:
            details.append(f"key={fingerprint[:12]}")
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for check events."""

        check_text = self._render_check_message(record)
        if check_text is not None:
            return check_text

        return super().render_message(record, message)


__all__ = ["ImpactRichHandler"]
