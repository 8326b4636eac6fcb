"""Where: src/themecheck/platform/themecheck_api/http_client.py
What: HTTP adapter posting form-encoded theme check requests.
Why: Decouple network concerns from payload interpretation and caching.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Final, Protocol, cast

import requests

from themecheck.platform.logging import logger

DEFAULT_TIMEOUT: Final[float] = 45.0


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response payload relevant to the theme check client.

    ``status`` is 0 when no response was received; ``data`` is ``None`` when
    the body was missing or not valid JSON.
    """

    status: int
    headers: dict[str, str]
    data: Any | None
    error: str | None = None


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to post forms and decode JSON replies."""

    def post_form(
        self,
        url: str,
        fields: Mapping[str, str],
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResult:
        ...


class ThemeCheckHTTPClient:
    """Perform a single form POST through ``requests`` without retries."""

    def post_form(
        self,
        url: str,
        fields: Mapping[str, str],
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResult:
        request_headers = {"Accept": "application/json", **(headers or {})}
        try:
            response = requests.post(
                url,
                data=dict(fields),
                headers=request_headers,
                timeout=timeout,
            )
        except requests.Timeout as exc:
            logger.warning("Theme check request timed out after %.1fs: %s", timeout, exc)
            return HTTPResult(status=0, headers={}, data=None, error="timeout")
        except requests.RequestException as exc:
            logger.warning("Theme check request error: %s", exc)
            return HTTPResult(status=0, headers={}, data=None, error=str(exc) or "unreachable")

        status = int(response.status_code)
        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        response_headers = {str(key): str(value) for key, value in header_items}

        if not 200 <= status < 300:
            logger.debug("Theme check HTTP status=%s; relying on body status", status)

        try:
            data = response.json()
        except (RecursionError, ValueError) as exc:
            logger.warning("Theme check JSON parse error (status=%s): %s", status, exc)
            return HTTPResult(status=status, headers=response_headers, data=None, error="invalid json")

        return HTTPResult(status=status, headers=response_headers, data=data)


DEFAULT_HTTP_CLIENT = ThemeCheckHTTPClient()


__all__ = [
    "DEFAULT_HTTP_CLIENT",
    "DEFAULT_TIMEOUT",
    "HTTPClient",
    "HTTPResult",
    "ThemeCheckHTTPClient",
]
