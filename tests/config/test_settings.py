"""Tests for settings module behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from themecheck.config.config import DEFAULT_FINGERPRINT_SECRET, Config
from themecheck.config.settings import CHECKS_OPTION, resolve_settings


def test_checks_option_name() -> None:
    assert CHECKS_OPTION == "checks"


def test_resolve_settings_keeps_valid_values(tmp_path: Path) -> None:
    config = Config(
        endpoint_url=" https://api/check ",
        request_timeout=12,
        package_field="theme",
        fingerprint_secret="s3cret",
        database_path=tmp_path / "opts.db",
    )

    settings = resolve_settings(config)

    assert settings.endpoint_url == "https://api/check"
    assert settings.request_timeout == 12.0
    assert settings.package_field == "theme"
    assert settings.fingerprint_secret == "s3cret"
    assert settings.database_path == tmp_path / "opts.db"


@pytest.mark.parametrize("timeout", [0, -5, True])
def test_resolve_settings_defaults_unusable_timeout(timeout: float) -> None:
    settings = resolve_settings(Config(request_timeout=timeout))

    assert settings.request_timeout == 45.0


def test_resolve_settings_defaults_unknown_field_and_blank_secret() -> None:
    settings = resolve_settings(Config(package_field="slug", fingerprint_secret="  "))

    assert settings.package_field == "package"
    assert settings.fingerprint_secret == DEFAULT_FINGERPRINT_SECRET


def test_resolve_settings_defaults_database_path(repo_root: Path) -> None:
    settings = resolve_settings(Config())

    assert settings.database_path == (repo_root / ".data" / "themecheck.db").resolve()
