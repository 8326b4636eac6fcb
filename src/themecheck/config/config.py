"""Configuration management for themecheck."""

from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from themecheck.config.file_ops import write_text_file
from themecheck.config.paths import default_config_path
from themecheck.platform.logging import logger

DEFAULT_ENDPOINT_URL: Final[str] = "http://localhost/wp-minions/api/themecheck/check"
DEFAULT_FINGERPRINT_SECRET: Final[str] = "themecheck.fingerprint.v1"
DEFAULT_REQUEST_TIMEOUT: Final[float] = 45.0
DEFAULT_PACKAGE_FIELD: Final[str] = "package"

ENV_ENDPOINT_URL: Final[str] = "THEMECHECK_ENDPOINT_URL"
ENV_FINGERPRINT_SECRET: Final[str] = "THEMECHECK_FINGERPRINT_SECRET"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Theme check service
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    package_field: str = DEFAULT_PACKAGE_FIELD

    # Key used to derive request fingerprints (cache keys)
    fingerprint_secret: str = DEFAULT_FINGERPRINT_SECRET

    # SQLite file holding the option store
    database_path: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# themecheck Configuration File")
        lines.append("")

        lines.append("# Theme check service endpoint (POSTed once per uncached update)")
        lines.append(f"# Overridden by the {ENV_ENDPOINT_URL} environment variable")
        lines.append(f"endpoint_url = {self._format_toml_value(config['endpoint_url'])}")
        lines.append("")

        lines.append("# Request timeout in seconds")
        lines.append(f"request_timeout = {self._format_toml_value(config['request_timeout'])}")
        lines.append("")

        lines.append('# Form field carrying the package identifier ("package" or "theme")')
        lines.append(f"package_field = {self._format_toml_value(config['package_field'])}")
        lines.append("")

        lines.append("# Secret keying the request fingerprint used as cache key")
        lines.append("# Changing it invalidates every cached check")
        lines.append(f"# Overridden by the {ENV_FINGERPRINT_SECRET} environment variable")
        lines.append(
            f"fingerprint_secret = {self._format_toml_value(config['fingerprint_secret'])}"
        )
        lines.append("")

        lines.append("# Option store database path (optional)")
        lines.append('# Example: database_path = "/path/to/data/themecheck.db"')
        if config["database_path"] is not None:
            lines.append(f"database_path = {self._format_toml_value(config['database_path'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/themecheck.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    def apply_environment(self, env: dict[str, str] | None = None) -> "Config":
        """Override endpoint and secret from the environment when set."""

        mapping = env if env is not None else os.environ
        endpoint = (mapping.get(ENV_ENDPOINT_URL) or "").strip()
        if endpoint:
            self.endpoint_url = endpoint
        secret = (mapping.get(ENV_FINGERPRINT_SECRET) or "").strip()
        if secret:
            self.fingerprint_secret = secret
        return self

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict).apply_environment()

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            config.apply_environment()
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = [
    "Config",
    "DEFAULT_ENDPOINT_URL",
    "DEFAULT_FINGERPRINT_SECRET",
    "DEFAULT_PACKAGE_FIELD",
    "DEFAULT_REQUEST_TIMEOUT",
    "ENV_ENDPOINT_URL",
    "ENV_FINGERPRINT_SECRET",
]
