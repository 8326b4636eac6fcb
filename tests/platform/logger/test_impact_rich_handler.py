"""Tests for the ``ImpactRichHandler`` check event rendering."""

from __future__ import annotations

import logging
import logging.handlers
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from themecheck.platform.logging import ImpactRichHandler, setup_logger


def _make_handler() -> ImpactRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return ImpactRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with check extras for testing."""

    record = logging.LogRecord(
        name="themecheck",
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


def test_render_message_formats_cache_hit() -> None:
    handler = _make_handler()
    record = _build_record(
        check_event="check.cache.hit",
        package_id="mytheme",
        installed_version="1.0.0",
        available_version="1.2.0",
        diff_percent=5.0,
        fingerprint="0123456789abcdef0123",
    )

    rendered = handler.render_message(record, "ignored")

    assert isinstance(rendered, Text)
    assert rendered.plain.endswith(
        " Using cached impact for mytheme 1.0.0 → 1.2.0 (diff=5%, key=0123456789ab)"
    )


def test_render_message_formats_fetch_error() -> None:
    handler = _make_handler()
    record = _build_record(
        check_event="check.fetch.error",
        package_id="mytheme",
        error_message="network",
    )

    rendered = handler.render_message(record, "ignored")

    assert isinstance(rendered, Text)
    assert rendered.plain.endswith(" Impact check failed for mytheme (network)")


def test_render_message_falls_back_for_plain_records() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "Configuration loaded")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Configuration loaded"


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "themecheck.log"
    try:
        logger = setup_logger(log_file=log_file)

        assert logger.name == "themecheck"
        assert any(isinstance(h, ImpactRichHandler) for h in logger.handlers)
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
        logger.info("hello file")
        for handler in logger.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()
