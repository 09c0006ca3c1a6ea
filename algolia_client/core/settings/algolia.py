"""Algolia client settings.

Environment variables use the ALGOLIA_ prefix.
Example: ALGOLIA_APPLICATION_ID=LATENCY, ALGOLIA_API_KEY=..., ALGOLIA_READ_TIMEOUT=30
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from ._sanitizers import sanitize_inline_numeric, split_csv


class AlgoliaSettings(BaseSettings):
    """Connection and polling configuration for the Algolia REST API.

    Attributes:
        application_id: Algolia application identifier.
        api_key: API key sent with every request.
        hosts: Explicit host list. When empty the default DSN/write hosts and
            the algolianet.com fallbacks are derived from ``application_id``.
        connect_timeout: TCP connect timeout in seconds.
        read_timeout: Response read timeout in seconds.
        max_idle_conns_per_host: Keep-alive connections kept in the pool.
        max_connections: Upper bound on concurrent connections.
        wait_task_initial_delay: First delay between two task status checks.
        wait_task_max_delay: Cap on the delay between two checks.
        wait_task_timeout: Total time budget for ``wait_task``.
    """

    application_id: str = Field(default="", description="Algolia application ID")
    api_key: SecretStr = Field(default=SecretStr(""), description="Algolia API key")

    hosts: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Comma separated host override (empty = derive from application ID)",
    )

    user_agent: str = Field(
        default="Algolia for Python (algolia-client 0.1.0)",
        description="User-Agent header sent with every request",
    )

    # Transport tuning
    connect_timeout: float = Field(default=2.0, gt=0, le=300, description="Connect timeout (s)")
    read_timeout: float = Field(default=30.0, gt=0, le=3600, description="Read timeout (s)")
    max_idle_conns_per_host: int = Field(
        default=20, ge=0, le=1000, description="Keep-alive connections kept per pool"
    )
    max_connections: int = Field(default=100, ge=1, le=10000, description="Max connections")

    # Task completion polling
    wait_task_initial_delay: float = Field(
        default=1.0, gt=0, le=60, description="First delay between task status checks (s)"
    )
    wait_task_max_delay: float = Field(
        default=10.0, gt=0, le=600, description="Max delay between task status checks (s)"
    )
    wait_task_timeout: float = Field(
        default=1200.0, gt=0, description="Total time budget when waiting for a task (s)"
    )

    # API key propagation polling
    wait_key_max_attempts: int = Field(
        default=120, ge=1, le=10000, description="Checks before giving up on a new key"
    )
    wait_key_delay: float = Field(
        default=1.0, gt=0, le=60, description="Delay between two key checks (s)"
    )

    @field_validator("hosts", mode="before")
    @classmethod
    def _split_hosts(cls, v: Any) -> Any:
        return split_csv(v)

    @field_validator(
        "connect_timeout",
        "read_timeout",
        "max_idle_conns_per_host",
        "max_connections",
        "wait_task_initial_delay",
        "wait_task_max_delay",
        "wait_task_timeout",
        "wait_key_max_attempts",
        "wait_key_delay",
        mode="before",
    )
    @classmethod
    def _strip_numeric_comments(cls, v: Any) -> Any:
        return sanitize_inline_numeric(v)

    @property
    def is_configured(self) -> bool:
        """True when both credentials are present."""
        return bool(self.application_id and self.api_key.get_secret_value())

    model_config = SettingsConfigDict(
        env_prefix="ALGOLIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )


__all__ = ["AlgoliaSettings"]
