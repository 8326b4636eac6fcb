"""Public surface for the update check feature."""

from .adapters import PackageListing, ThemeUpdateHooks, UpdateOffer, UpdateState
from .domain import ImpactReport, UpdateCandidate, compute_fingerprint
from .usecases import ImpactAPI, OptionStore, UpdateImpactChecker, build_update_notice, decorate_notice

__all__ = [
    "ImpactAPI",
    "ImpactReport",
    "OptionStore",
    "PackageListing",
    "ThemeUpdateHooks",
    "UpdateCandidate",
    "UpdateImpactChecker",
    "UpdateOffer",
    "UpdateState",
    "build_update_notice",
    "compute_fingerprint",
    "decorate_notice",
]
