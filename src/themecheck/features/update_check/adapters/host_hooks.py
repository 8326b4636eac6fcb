"""
Summary: Explicit callbacks a host invokes around its theme update lifecycle.
Why: Replace global hook registration with plain methods taking typed host state.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field

from ..domain.models import ImpactReport, UpdateCandidate
from ..usecases.impact_checker import UpdateImpactChecker
from ..usecases.notices import build_update_notice


@dataclass(slots=True)
class UpdateOffer:
    """The host's record of an available update for one package."""

    package_id: str
    new_version: str
    url: str | None = None
    changes: ImpactReport | None = None


@dataclass(slots=True)
class UpdateState:
    """Result of the host's update check: installed versions and offers."""

    checked: dict[str, str] = field(default_factory=dict)
    response: dict[str, UpdateOffer] = field(default_factory=dict)


@dataclass(slots=True)
class PackageListing:
    """One row of the host's package management list."""

    package_id: str
    name: str
    version: str
    update_notice: str | None = None


class ThemeUpdateHooks:
    """Attach impact reports to update state and notices to package listings."""

    def __init__(self, checker: UpdateImpactChecker) -> None:
        self._checker = checker

    def on_update_state(self, state: UpdateState, package_id: str | None = None) -> UpdateState:
        """Evaluate offers whenever the host recomputes its update state.

        Only ``package_id`` is evaluated when given; otherwise every offer for
        a checked package is. State without checked packages is returned as-is.
        """

        if not state.checked:
            return state

        package_ids = [package_id] if package_id is not None else list(state.response)
        for current_id in package_ids:
            offer = state.response.get(current_id)
            installed = state.checked.get(current_id)
            if offer is None or installed is None:
                continue
            candidate = UpdateCandidate(
                package_id=current_id,
                installed_version=installed,
                available_version=offer.new_version,
            )
            report = self._checker.evaluate(candidate)
            if report is not None:
                offer.changes = report
        return state

    def on_prepare_packages(
        self,
        listings: MutableMapping[str, PackageListing],
        state: UpdateState,
    ) -> MutableMapping[str, PackageListing]:
        """Set the update notice of every listing with a pending offer."""

        for package_id, listing in listings.items():
            offer = state.response.get(package_id)
            if offer is None:
                continue
            candidate = UpdateCandidate(
                package_id=package_id,
                installed_version=listing.version,
                available_version=offer.new_version,
            )
            if not candidate.is_update_pending:
                continue
            notice = build_update_notice(listing.name, offer.new_version, offer.url)
            listing.update_notice = self._checker.decorate(notice, offer.changes, candidate)
        return listings


__all__ = ["PackageListing", "ThemeUpdateHooks", "UpdateOffer", "UpdateState"]
