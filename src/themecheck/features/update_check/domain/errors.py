"""
Summary: Exception hierarchy for failed impact checks.
Why: Let the HTTP and parsing layers signal distinct faults the checker absorbs.
"""

from __future__ import annotations


class ImpactCheckError(Exception):
    """Base exception for every impact check failure."""

    kind: str = "error"


class NetworkError(ImpactCheckError):
    """The theme check service could not be reached or timed out."""

    kind = "network"


class MalformedResponseError(ImpactCheckError):
    """The response body is not JSON or lacks the required fields."""

    kind = "malformed"


class UpstreamFailureError(ImpactCheckError):
    """The response parsed but reports a non-success status."""

    kind = "upstream"

    def __init__(self, status_code: str) -> None:
        super().__init__(f"Theme check service reported status {status_code!r}")
        self.status_code = status_code


__all__ = [
    "ImpactCheckError",
    "MalformedResponseError",
    "NetworkError",
    "UpstreamFailureError",
]
