"""
Summary: Ports defining the impact checker's collaborators.
Why: Decouple the use case from SQLite and HTTP so tests can inject fakes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ..domain.models import UpdateCandidate


@runtime_checkable
class OptionStore(Protocol):
    """Key-value storage for host configuration options."""

    def get(self, key: str) -> Any | None:
        """Return the stored value or ``None`` when absent.

        A failed read raises instead of returning ``None``.
        """
        ...

    def set(self, key: str, value: Any) -> None:
        """Persist ``value`` under ``key``, replacing any previous value."""
        ...


@runtime_checkable
class ImpactAPI(Protocol):
    """Outbound theme check service."""

    def request_impact(self, candidate: UpdateCandidate) -> Mapping[str, Any]:
        """Return the decoded response body for ``candidate``.

        Raises:
            NetworkError: The service was unreachable or timed out.
            MalformedResponseError: The body could not be decoded.
        """
        ...


__all__ = ["ImpactAPI", "OptionStore"]
