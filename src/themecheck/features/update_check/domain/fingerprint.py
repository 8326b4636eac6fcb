"""
Summary: Deterministic cache keys for impact check requests.
Why: Identical candidates must hit the same cache entry across processes.
"""

from __future__ import annotations

import hashlib
import hmac
import json

from .models import UpdateCandidate


def canonical_request(candidate: UpdateCandidate) -> str:
    """Serialize the fingerprinted fields with a stable key order."""

    return json.dumps(
        {
            "package": candidate.package_id,
            "current_ver": candidate.installed_version,
            "next_ver": candidate.available_version,
        },
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def compute_fingerprint(candidate: UpdateCandidate, secret: str) -> str:
    """Return the hex HMAC-SHA256 of the canonical request keyed by ``secret``."""

    digest = hmac.new(
        secret.encode("utf-8"),
        canonical_request(candidate).encode("utf-8"),
        hashlib.sha256,
    )
    return digest.hexdigest()


__all__ = ["canonical_request", "compute_fingerprint"]
