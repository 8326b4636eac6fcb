"""src/themecheck/application/services/impact_service.py
What: Wire configuration, the option database, and the HTTP client into a checker.
Why: Give hosts one entry point instead of assembling ports by hand.
"""

from __future__ import annotations

from typing import Any, final

from themecheck.config.config import Config
from themecheck.config.settings import CheckerSettings, resolve_settings
from themecheck.features.update_check import ThemeUpdateHooks, UpdateImpactChecker
from themecheck.platform.db import DatabaseManager, OptionsDAO
from themecheck.platform.logging import DEFAULT_LOG_FILE, setup_logger
from themecheck.platform.themecheck_api import HTTPClient, ThemeCheckClient


@final
class ImpactCheckService:
    """Own the option database and expose a configured checker and host hooks."""

    settings: CheckerSettings
    checker: UpdateImpactChecker
    hooks: ThemeUpdateHooks

    def __init__(self, settings: CheckerSettings, *, http_client: HTTPClient | None = None) -> None:
        self.settings = settings
        self._db = DatabaseManager(settings.database_path)
        self._db.connect()
        assert self._db.conn is not None
        api = ThemeCheckClient(
            settings.endpoint_url,
            timeout=settings.request_timeout,
            package_field=settings.package_field,
            http_client=http_client,
        )
        self.checker = UpdateImpactChecker(
            store=OptionsDAO(self._db.conn),
            api=api,
            secret=settings.fingerprint_secret,
        )
        self.hooks = ThemeUpdateHooks(self.checker)

    def close(self) -> None:
        self._db.close()

    def __enter__(self) -> "ImpactCheckService":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any | None,
    ) -> None:
        self.close()


def create_impact_service(
    config: Config | None = None,
    *,
    http_client: HTTPClient | None = None,
) -> ImpactCheckService:
    """Build a service from ``config`` (the persisted configuration by default).

    Also points the shared logger's file handler at the configured log file.
    """

    active = config or Config.load()
    _ = setup_logger(log_file=active.log_file or DEFAULT_LOG_FILE)
    return ImpactCheckService(resolve_settings(active), http_client=http_client)


__all__ = ["ImpactCheckService", "create_impact_service"]
