"""
Summary: Domain types for update impact checks.
Why: Re-export candidates, reports, fingerprints, and errors from one place.
"""

from .errors import (
    ImpactCheckError,
    MalformedResponseError,
    NetworkError,
    UpstreamFailureError,
)
from .fingerprint import canonical_request, compute_fingerprint
from .models import (
    FAILURE_STATUS,
    SUCCESS_STATUS,
    ImpactReport,
    UpdateCandidate,
    compare_versions,
    parse_version,
)

__all__ = [
    "FAILURE_STATUS",
    "ImpactCheckError",
    "ImpactReport",
    "MalformedResponseError",
    "NetworkError",
    "SUCCESS_STATUS",
    "UpdateCandidate",
    "UpstreamFailureError",
    "canonical_request",
    "compare_versions",
    "compute_fingerprint",
    "parse_version",
]
