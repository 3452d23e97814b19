"""Configuration contract for hatscore.

Pydantic-validated models for the settings a client needs: logging and the
subgraph endpoints per chain. ``load_config_from_env()`` is the only place
that reads environment variables; everything else takes a config object.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, PositiveInt, ValidationError, field_validator

from .constants import DEFAULT_PAGE_SIZE
from .exceptions import ConfigurationError


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


_STUDIO = "https://api.studio.thegraph.com/query/55784"

DEFAULT_SUBGRAPH_ENDPOINTS: dict[int, str] = {
    1: f"{_STUDIO}/hats-v1-ethereum/version/latest",
    10: f"{_STUDIO}/hats-v1-optimism/version/latest",
    100: f"{_STUDIO}/hats-v1-gnosis-chain/version/latest",
    137: f"{_STUDIO}/hats-v1-polygon/version/latest",
    8453: f"{_STUDIO}/hats-v1-base/version/latest",
    42161: f"{_STUDIO}/hats-v1-arbitrum/version/latest",
    42220: f"{_STUDIO}/hats-v1-celo/version/latest",
    84532: f"{_STUDIO}/hats-v1-base-sepolia/version/latest",
    11155111: f"{_STUDIO}/hats-v1-sepolia/version/latest",
}


class SubgraphConfig(BaseModel):
    """Where and how to query the Hats subgraph.

    Environment variables:
        HATS_SUBGRAPH_ENDPOINTS: comma-separated ``chainId=url`` overrides
        HATS_SUBGRAPH_PAGE_SIZE: default ``first`` bound for relations
    """

    model_config = {"extra": "forbid"}

    endpoints: dict[int, str] = Field(
        default_factory=lambda: dict(DEFAULT_SUBGRAPH_ENDPOINTS),
        description="Subgraph GraphQL endpoint per chain id",
    )
    default_page_size: PositiveInt = Field(
        default=DEFAULT_PAGE_SIZE,
        description="Pagination bound for relations without a filter override",
    )

    @field_validator("endpoints")
    @classmethod
    def validate_endpoints(cls, v: dict[int, str]) -> dict[int, str]:
        """Endpoints must be http(s) URLs."""
        for chain_id, url in v.items():
            if not url.startswith(("http://", "https://")):
                raise ValueError(f"Endpoint for chain {chain_id} must start with http:// or https://")
        return v

    def endpoint_for(self, chain_id: int) -> Optional[str]:
        return self.endpoints.get(chain_id)


class HatsConfig(BaseModel):
    """Top-level configuration for hatscore clients.

    RULE: All settings come through this config chain. Only
    ``load_config_from_env()`` reads the environment.
    """

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )

    service_name: Optional[str] = Field(
        default=None,
        description="Name used for the service logger",
    )

    subgraph: SubgraphConfig = Field(
        default_factory=SubgraphConfig,
        description="Subgraph endpoints and pagination",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",
    }


def _parse_endpoint_overrides(raw: str) -> dict[int, str]:
    overrides: dict[int, str] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        chain_id, sep, url = item.partition("=")
        if not sep or not chain_id.strip().isdigit() or not url.strip():
            raise ConfigurationError(
                f"Invalid HATS_SUBGRAPH_ENDPOINTS entry {item!r}; expected chainId=url",
                entry=item,
            )
        overrides[int(chain_id)] = url.strip()
    return overrides


def load_config_from_env() -> HatsConfig:
    """Load configuration from environment variables.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - SERVICE_NAME: Service logger name
    - HATS_SUBGRAPH_ENDPOINTS: ``chainId=url`` pairs merged over the defaults
    - HATS_SUBGRAPH_PAGE_SIZE: Default relation page size

    Returns:
        HatsConfig instance with values from environment or defaults.

    Raises:
        ConfigurationError: If an endpoint override or the page size is malformed.
    """
    import os

    endpoints = dict(DEFAULT_SUBGRAPH_ENDPOINTS)
    endpoints.update(_parse_endpoint_overrides(os.getenv("HATS_SUBGRAPH_ENDPOINTS", "")))

    page_size_raw = os.getenv("HATS_SUBGRAPH_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
    if not page_size_raw.strip().isdigit():
        raise ConfigurationError(
            f"HATS_SUBGRAPH_PAGE_SIZE must be a positive integer, got {page_size_raw!r}",
        )

    try:
        subgraph = SubgraphConfig(
            endpoints=endpoints,
            default_page_size=int(page_size_raw),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid subgraph configuration: {e}", errors=e.errors()) from e

    return HatsConfig(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes"),
        service_name=os.getenv("SERVICE_NAME"),
        subgraph=subgraph,
    )


__all__ = [
    "DEFAULT_SUBGRAPH_ENDPOINTS",
    "HatsConfig",
    "LogLevel",
    "SubgraphConfig",
    "load_config_from_env",
]
