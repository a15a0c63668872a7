"""Configuration management for the engine client."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from engine_client.domain.value_objects.uri import Uri


class EngineConfig(BaseModel):
    """Engine API endpoint configuration."""

    uri: str = Field(default="unix:///var/run/docker.sock", description="Engine API endpoint URI")
    unix_base_url: str = Field(
        default="http://localhost", description="Base URL for requests sent over a unix socket"
    )
    host_header: str = Field(default="docker", description="Host header for unix socket requests")
    api_version: str | None = Field(default=None, description="Pinned API version, e.g. v1.47")
    timeout_seconds: float = Field(default=30.0, gt=0, description="Request timeout")

    @field_validator("uri")
    @classmethod
    def _validate_uri(cls, value: str) -> str:
        Uri.parse(value)
        return value


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")
    otel_endpoint: str | None = Field(default=None)
    otel_service_name: str = Field(default="engine_client")
    metrics_port: int = Field(default=8003, ge=1, le=65535, description="Prometheus metrics port")


class Config(BaseSettings):
    """Main configuration for the engine client."""

    model_config = SettingsConfigDict(
        env_prefix="ENGINE_CLIENT_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    engine: EngineConfig = Field(default_factory=EngineConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
