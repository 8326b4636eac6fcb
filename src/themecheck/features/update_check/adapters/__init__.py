"""
Summary: Host-facing adapters for the update check feature.
Why: Surface the inbound callbacks without exposing use case internals.
"""

from .host_hooks import PackageListing, ThemeUpdateHooks, UpdateOffer, UpdateState

__all__ = ["PackageListing", "ThemeUpdateHooks", "UpdateOffer", "UpdateState"]
