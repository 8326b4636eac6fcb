"""Where: src/themecheck/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Hand validated values to the checker and HTTP layers without file I/O.
Trade-offs: - Validation is limited to simple boundary checks; bad values fall
  back to defaults instead of failing the host.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from themecheck.config.config import (
    DEFAULT_FINGERPRINT_SECRET,
    DEFAULT_PACKAGE_FIELD,
    DEFAULT_REQUEST_TIMEOUT,
    Config,
)
from themecheck.config.paths import default_database_path

# Form fields accepted by the theme check service for the package identifier.
# "theme" is what the legacy endpoint expects.
PACKAGE_FIELDS: Final[tuple[str, ...]] = ("package", "theme")

# Option holding the fingerprint -> report mapping.
CHECKS_OPTION: Final[str] = "checks"


@dataclass(slots=True, frozen=True)
class CheckerSettings:
    """Validated values consumed by the impact checker wiring."""

    endpoint_url: str
    request_timeout: float
    package_field: str
    fingerprint_secret: str
    database_path: Path


def resolve_settings(config: Config) -> CheckerSettings:
    """Validate ``config`` and fill defaults for unusable values."""

    timeout = config.request_timeout
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        timeout = DEFAULT_REQUEST_TIMEOUT

    package_field = (config.package_field or "").strip()
    if package_field not in PACKAGE_FIELDS:
        package_field = DEFAULT_PACKAGE_FIELD

    secret = config.fingerprint_secret
    if not isinstance(secret, str) or not secret.strip():
        secret = DEFAULT_FINGERPRINT_SECRET

    return CheckerSettings(
        endpoint_url=config.endpoint_url.strip(),
        request_timeout=float(timeout),
        package_field=package_field,
        fingerprint_secret=secret,
        database_path=config.database_path or default_database_path(),
    )


__all__ = [
    "CHECKS_OPTION",
    "CheckerSettings",
    "PACKAGE_FIELDS",
    "resolve_settings",
]
