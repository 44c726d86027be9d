"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from gateway.config.schema import GatewayConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-cwa.example.com/api"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment's key and port out of every test."""
    monkeypatch.delenv("CWA_API_KEY", raising=False)
    monkeypatch.delenv("PORT", raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def kaohsiung_forecast() -> dict:
    with open(FIXTURE_DIR / "cwa_forecast_kaohsiung.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def empty_forecast() -> dict:
    with open(FIXTURE_DIR / "cwa_forecast_empty.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def test_config() -> GatewayConfig:
    """Config pointed at the mocked upstream host."""
    return GatewayConfig(upstream={"base_url": TEST_BASE_URL})


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    data = {
        "upstream": {"timeout_seconds": 5},
        "server": {"port": 4000},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
