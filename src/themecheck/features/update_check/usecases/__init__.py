"""
Summary: Use cases for update impact checks.
Why: Expose the checker, its ports, and notice rendering as one import surface.
"""

from .impact_checker import UpdateImpactChecker
from .notices import build_update_notice, decorate_notice
from .ports import ImpactAPI, OptionStore

__all__ = [
    "ImpactAPI",
    "OptionStore",
    "UpdateImpactChecker",
    "build_update_notice",
    "decorate_notice",
]
