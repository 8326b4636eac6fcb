"""
Summary: Update candidates and impact reports exchanged with the theme check service.
Why: Give the checker typed values instead of host transients and raw JSON.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, cast

import semver
from packaging.version import InvalidVersion, Version

from .errors import MalformedResponseError, UpstreamFailureError

SUCCESS_STATUS: Final[str] = "200"
FAILURE_STATUS: Final[str] = "error"


def parse_version(value: str) -> semver.Version | None:
    """Return a semantic version or ``None`` when ``value`` is not one.

    Missing minor and patch parts count as zero, so ``"1.2"`` reads as ``1.2.0``.
    """

    try:
        return semver.Version.parse(value.strip(), optional_minor_and_patch=True)
    except (TypeError, ValueError):
        return None


def _parse_release(value: str) -> Version | None:
    try:
        return Version(value.strip())
    except InvalidVersion:
        return None


def compare_versions(left: str, right: str) -> int | None:
    """Order two version strings, returning -1, 0 or 1, or ``None`` when unordered.

    Semantic version precedence applies when both sides are semantic versions:
    build metadata is ignored and prerelease identifiers compare numerically or
    lexically. Release strings outside that grammar, such as ``1.0.0.1`` or
    ``v2.1``, fall back to PEP 440 ordering.
    """

    left_semver, right_semver = parse_version(left), parse_version(right)
    if left_semver is not None and right_semver is not None:
        return left_semver.compare(right_semver)

    left_release, right_release = _parse_release(left), _parse_release(right)
    if left_release is None or right_release is None:
        return None
    return (left_release > right_release) - (left_release < right_release)


@dataclass(slots=True, frozen=True)
class UpdateCandidate:
    """A pending update as reported by the host's update check."""

    package_id: str
    installed_version: str
    available_version: str

    @property
    def is_update_pending(self) -> bool:
        """Return True when the available version is strictly newer."""

        order = compare_versions(self.available_version, self.installed_version)
        return order is not None and order > 0


def _coerce_status(value: object) -> str | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, str)):
        status = str(value).strip()
        return status or None
    return None


def _coerce_percent(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        percent = float(value.strip() if isinstance(value, str) else value)
    except (OverflowError, ValueError):
        return None
    return percent if math.isfinite(percent) else None


@dataclass(slots=True, frozen=True)
class ImpactReport:
    """Remote summary of how much an update changes a package."""

    status_code: str
    diff_percent: float | None = None
    gallery_url: str | None = None
    raw: Mapping[str, Any] | None = None

    @property
    def is_success(self) -> bool:
        return self.status_code == SUCCESS_STATUS

    def require_success(self) -> "ImpactReport":
        """Return ``self`` or raise when the service reported a failure."""

        if not self.is_success:
            raise UpstreamFailureError(self.status_code)
        return self

    @classmethod
    def failure(cls) -> "ImpactReport":
        """Report used when the service could not be reached or understood."""

        return cls(status_code=FAILURE_STATUS)

    @classmethod
    def from_payload(cls, payload: object) -> "ImpactReport":
        """Build a report from a decoded response body.

        Raises:
            MalformedResponseError: The payload is not an object, has no usable
                ``status_code``, or claims success without a ``data`` object
                carrying a numeric ``global_diff``.
        """

        if not isinstance(payload, Mapping):
            raise MalformedResponseError("Response body is not a JSON object")
        body = cast(Mapping[str, Any], payload)

        status = _coerce_status(body.get("status_code"))
        if status is None:
            raise MalformedResponseError("Response body has no status_code")

        data_raw = body.get("data")
        if status == SUCCESS_STATUS and not isinstance(data_raw, Mapping):
            raise MalformedResponseError("Successful response has no data object")

        diff_percent: float | None = None
        gallery_url: str | None = None
        if isinstance(data_raw, Mapping):
            data = cast(Mapping[str, Any], data_raw)
            diff_percent = _coerce_percent(data.get("global_diff"))
            gallery = data.get("gallery")
            if isinstance(gallery, str) and gallery.strip():
                gallery_url = gallery.strip()

        if status == SUCCESS_STATUS and diff_percent is None:
            raise MalformedResponseError("Successful response has no numeric global_diff")

        return cls(
            status_code=status,
            diff_percent=diff_percent,
            gallery_url=gallery_url,
            raw=dict(body),
        )


__all__ = [
    "FAILURE_STATUS",
    "ImpactReport",
    "SUCCESS_STATUS",
    "UpdateCandidate",
    "compare_versions",
    "parse_version",
]
