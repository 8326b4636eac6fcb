"""
Summary: Cache-or-fetch use case returning the impact report for a pending update.
Why: Avoid repeated theme check requests while never blocking the base update notice.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from logging import Logger, getLogger
from typing import Any, cast

from themecheck.config.config import DEFAULT_FINGERPRINT_SECRET
from themecheck.config.settings import CHECKS_OPTION

from ..domain.errors import ImpactCheckError, MalformedResponseError, UpstreamFailureError
from ..domain.fingerprint import compute_fingerprint
from ..domain.models import ImpactReport, UpdateCandidate
from .notices import decorate_notice
from .ports import ImpactAPI, OptionStore


@dataclass(slots=True)
class _LockSlot:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


class _KeyedLocks:
    """Hand out one lock per key and drop it once nobody waits on it."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._slots: dict[str, _LockSlot] = {}

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._guard:
            slot = self._slots.setdefault(key, _LockSlot())
            slot.holders += 1
        try:
            with slot.lock:
                yield
        finally:
            with self._guard:
                slot.holders -= 1
                if slot.holders == 0:
                    _ = self._slots.pop(key, None)


class UpdateImpactChecker:
    """Return impact reports for pending updates, caching successful answers.

    Concurrent calls for the same fingerprint are serialized so only the first
    one reaches the service; later callers find its cached answer. Updates to
    the ``checks`` option are serialized across fingerprints.
    """

    _store: OptionStore
    _api: ImpactAPI
    _secret: str
    _logger: Logger

    def __init__(
        self,
        *,
        store: OptionStore,
        api: ImpactAPI,
        secret: str = DEFAULT_FINGERPRINT_SECRET,
        logger: Logger | None = None,
    ) -> None:
        self._store = store
        self._api = api
        self._secret = secret
        self._logger = logger or getLogger(__name__)
        self._in_flight = _KeyedLocks()
        self._store_lock = threading.Lock()

    def fingerprint(self, candidate: UpdateCandidate) -> str:
        """Cache key for ``candidate`` under the configured secret."""

        return compute_fingerprint(candidate, self._secret)

    def evaluate(self, candidate: UpdateCandidate) -> ImpactReport | None:
        """Return the impact report for ``candidate`` or ``None`` when no update is pending."""

        extra = _candidate_extra(candidate)
        if not candidate.is_update_pending:
            self._logger.debug(
                "No update pending for %s", candidate.package_id,
                extra={**extra, "check_event": "check.skip.no_update"},
            )
            return None

        fingerprint = self.fingerprint(candidate)
        extra["fingerprint"] = fingerprint

        with self._in_flight.hold(fingerprint):
            cached = self._read_cached(fingerprint)
            if cached is not None:
                self._logger.info(
                    "Using cached impact for %s", candidate.package_id,
                    extra={**extra, "check_event": "check.cache.hit", "diff_percent": cached.diff_percent},
                )
                return cached

            return self._fetch(candidate, fingerprint, extra)

    def decorate(
        self,
        notice: str,
        report: ImpactReport | None,
        candidate: UpdateCandidate | None = None,
    ) -> str:
        """Append the impact summary for ``report`` to ``notice``."""

        return decorate_notice(notice, report, candidate)

    def _fetch(
        self,
        candidate: UpdateCandidate,
        fingerprint: str,
        extra: dict[str, Any],
    ) -> ImpactReport:
        self._logger.debug(
            "Requesting impact for %s", candidate.package_id,
            extra={**extra, "check_event": "check.fetch.start"},
        )
        report: ImpactReport | None = None
        try:
            payload = self._api.request_impact(candidate)
            report = ImpactReport.from_payload(payload)
            _ = report.require_success()
        except UpstreamFailureError as exc:
            self._logger.warning(
                "Impact not cached for %s: %s", candidate.package_id, exc,
                extra={**extra, "check_event": "check.fetch.uncached", "status_code": exc.status_code},
            )
            return report if report is not None else ImpactReport.failure()
        except ImpactCheckError as exc:
            self._logger.warning(
                "Impact check failed for %s: %s", candidate.package_id, exc,
                extra={**extra, "check_event": "check.fetch.error", "error_message": exc.kind},
            )
            return ImpactReport.failure()
        except Exception as exc:
            self._logger.warning(
                "Impact check failed for %s: %s", candidate.package_id, exc,
                extra={**extra, "check_event": "check.fetch.error", "error_message": type(exc).__name__},
            )
            return ImpactReport.failure()

        if not self._write_cached(fingerprint, report):
            self._logger.warning(
                "Impact not cached for %s: option store unavailable", candidate.package_id,
                extra={**extra, "check_event": "check.fetch.uncached", "status_code": report.status_code},
            )
            return report
        self._logger.info(
            "Cached impact for %s", candidate.package_id,
            extra={**extra, "check_event": "check.fetch.cached", "diff_percent": report.diff_percent},
        )
        return report

    def _load_checks(self) -> dict[str, Any] | None:
        """Return the ``checks`` mapping, or ``None`` when the store read failed."""

        try:
            stored = self._store.get(CHECKS_OPTION)
        except Exception as exc:
            self._logger.warning("Failed to read the %s option: %s", CHECKS_OPTION, exc)
            return None
        if not isinstance(stored, Mapping):
            return {}
        return dict(cast(Mapping[str, Any], stored))

    def _read_cached(self, fingerprint: str) -> ImpactReport | None:
        with self._store_lock:
            checks = self._load_checks()
        entry = checks.get(fingerprint) if checks else None
        if not entry:
            return None
        try:
            return ImpactReport.from_payload(entry)
        except MalformedResponseError as exc:
            self._logger.warning("Ignoring unreadable cached impact %s: %s", fingerprint[:12], exc)
            return None

    def _write_cached(self, fingerprint: str, report: ImpactReport) -> bool:
        """Merge ``report`` into the ``checks`` option; return whether it was stored."""

        if report.raw is None:
            return False
        with self._store_lock:
            checks = self._load_checks()
            # An unreadable store must not be replaced by a single-entry mapping.
            if checks is None:
                return False
            checks[fingerprint] = dict(report.raw)
            try:
                self._store.set(CHECKS_OPTION, checks)
            except Exception as exc:
                self._logger.warning("Failed to persist the %s option: %s", CHECKS_OPTION, exc)
                return False
        return True


def _candidate_extra(candidate: UpdateCandidate) -> dict[str, Any]:
    return {
        "package_id": candidate.package_id,
        "installed_version": candidate.installed_version,
        "available_version": candidate.available_version,
    }


__all__ = ["UpdateImpactChecker"]
