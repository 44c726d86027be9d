"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

from gateway.ingest.cwa_client import CWA_BASE_URL, FORECAST_36H_DATASET
from gateway.locations import REGISTRY
from gateway.models.errors import API_KEY_ENV


class UpstreamConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = CWA_BASE_URL
    dataset_id: str = FORECAST_36H_DATASET
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    api_key_env: str = API_KEY_ENV


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    cors_origins: list[str] = ["*"]


class GatewayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    upstream: UpstreamConfig = UpstreamConfig()
    server: ServerConfig = ServerConfig()
    default_location: str = "yilan"

    @field_validator("default_location")
    @classmethod
    def _known_location(cls, v: str) -> str:
        if not REGISTRY.is_known(v):
            raise ValueError(f"unknown location code: {v}")
        return v.strip().lower()
