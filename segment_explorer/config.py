"""Configuration management for segment-explorer."""

import os
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from segment_explorer.exceptions import ConfigurationError

T = TypeVar("T")

DEFAULT_TABLE_LIMIT = 10


@dataclass
class UpstreamConfig:
    """Clustering service connection configuration."""

    base_url: str = "http://localhost:5000"
    endpoint: str = "/get-clusters"
    timeout_seconds: float = 10.0
    max_retries: int = 3
    backoff_initial_seconds: float = 0.5
    backoff_multiplier: float = 2.0

    @property
    def url(self) -> str:
        """Get the full clusters URL."""
        return self.base_url.rstrip("/") + "/" + self.endpoint.lstrip("/")


@dataclass
class ViewConfig:
    """Settings for the derived dashboard views."""

    table_limit: int = DEFAULT_TABLE_LIMIT
    strict_ingestion: bool = False


@dataclass
class ExplorerConfig:
    """Main configuration for segment-explorer."""

    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    view: ViewConfig = field(default_factory=ViewConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ExplorerConfig":
        """Create config from environment variables."""
        upstream = UpstreamConfig(
            base_url=os.getenv("CLUSTER_SERVICE_URL", "http://localhost:5000"),
            endpoint=os.getenv("CLUSTER_SERVICE_ENDPOINT", "/get-clusters"),
            timeout_seconds=_env("CLUSTER_SERVICE_TIMEOUT", "10", float),
            max_retries=_env("CLUSTER_SERVICE_RETRIES", "3", int),
        )

        view = ViewConfig(
            table_limit=_env("TABLE_ROW_LIMIT", str(DEFAULT_TABLE_LIMIT), int),
            strict_ingestion=os.getenv("STRICT_INGESTION", "false").lower() == "true",
        )

        if upstream.max_retries < 0:
            raise ConfigurationError("CLUSTER_SERVICE_RETRIES must be >= 0")
        if view.table_limit < 0:
            raise ConfigurationError("TABLE_ROW_LIMIT must be >= 0")

        return cls(
            upstream=upstream,
            view=view,
            seed=_env("SEED", "", int) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _env(name: str, default: str, cast: Callable[[str], T]) -> T:
    """Read an environment variable and convert it, raising ConfigurationError on bad input."""
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} has invalid value {raw!r}") from exc
