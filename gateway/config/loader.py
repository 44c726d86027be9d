"""YAML config loader with environment overrides."""

import os
from pathlib import Path

import yaml

from gateway.config.schema import GatewayConfig

PORT_ENV = "PORT"


def load_config(path: str | Path | None = None) -> GatewayConfig:
    """Load and validate config from a YAML file.

    A missing path or empty file yields the defaults. The PORT environment
    variable, when set, overrides server.port.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    port = os.environ.get(PORT_ENV)
    if port:
        raw.setdefault("server", {})
        raw["server"]["port"] = int(port)

    return GatewayConfig(**raw)


def resolve_api_key(config: GatewayConfig) -> str:
    """Read the CWA credential from the env var named in the config."""
    return os.environ.get(config.upstream.api_key_env, "")
