"""Theme check service infrastructure package.

This package provides the HTTP client used to ask the theme check service
how much an update changes a package.
"""

from .client import ThemeCheckClient, build_request_fields
from .http_client import HTTPClient, HTTPResult, ThemeCheckHTTPClient

__all__ = [
    "HTTPClient",
    "HTTPResult",
    "ThemeCheckClient",
    "ThemeCheckHTTPClient",
    "build_request_fields",
]
