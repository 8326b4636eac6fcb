"""Where: src/themecheck/platform/themecheck_api/client.py
What: ``ImpactAPI`` implementation backed by the theme check HTTP endpoint.
Why: Translate transport outcomes into the domain's error taxonomy.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from themecheck import __version__
from themecheck.features.update_check.domain import (
    MalformedResponseError,
    NetworkError,
    UpdateCandidate,
)

from .http_client import DEFAULT_HTTP_CLIENT, DEFAULT_TIMEOUT, HTTPClient

USER_AGENT: Final[str] = f"themecheck/{__version__}"


def build_request_fields(candidate: UpdateCandidate, package_field: str = "package") -> dict[str, str]:
    """Return the form fields posted for ``candidate``."""

    return {
        package_field: candidate.package_id,
        "current_ver": candidate.installed_version,
        "next_ver": candidate.available_version,
    }


class ThemeCheckClient:
    """Post one request per candidate to the theme check service."""

    def __init__(
        self,
        endpoint_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        package_field: str = "package",
        http_client: HTTPClient | None = None,
    ) -> None:
        self.endpoint_url: str = endpoint_url
        self.timeout: float = timeout
        self.package_field: str = package_field
        self._http: HTTPClient = http_client or DEFAULT_HTTP_CLIENT

    def request_impact(self, candidate: UpdateCandidate) -> Mapping[str, Any]:
        """Return the decoded response body for ``candidate``.

        Raises:
            NetworkError: No response arrived within the timeout.
            MalformedResponseError: The body is not a JSON object.
        """

        result = self._http.post_form(
            self.endpoint_url,
            build_request_fields(candidate, self.package_field),
            timeout=self.timeout,
            headers={"User-Agent": USER_AGENT},
        )
        if result.status == 0:
            raise NetworkError(result.error or "theme check service unreachable")
        if not isinstance(result.data, Mapping):
            raise MalformedResponseError(result.error or "response body is not a JSON object")
        return result.data


__all__ = ["ThemeCheckClient", "USER_AGENT", "build_request_fields"]
