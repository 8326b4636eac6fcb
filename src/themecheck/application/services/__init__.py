"""Application services composing the update check feature."""

from .impact_service import ImpactCheckService, create_impact_service

__all__ = ["ImpactCheckService", "create_impact_service"]
