"""Tests for CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

import httpx
import respx

from gateway.cli import main

FORECAST_URL = "https://opendata.cwa.gov.tw/api/v1/rest/datastore/F-C0032-001"


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 0
        assert "F-C0032-001" in capsys.readouterr().out

    def test_locations(self, capsys):
        assert main(["locations"]) == 0
        out = capsys.readouterr().out
        assert "kaohsiung" in out
        assert "高雄市" in out
        assert "Total: 22" in out

    @respx.mock
    def test_forecast(self, monkeypatch, capsys, kaohsiung_forecast: dict):
        monkeypatch.setenv("CWA_API_KEY", "CWA-TEST-KEY")
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=kaohsiung_forecast)
        )
        assert main(["forecast", "kaohsiung"]) == 0
        assert route.calls[0].request.url.params["locationName"] == "高雄市"
        data = json.loads(capsys.readouterr().out)
        assert data["city"] == "高雄市"
        assert len(data["forecasts"]) == 3

    @respx.mock
    def test_forecast_default_location(self, monkeypatch, kaohsiung_forecast: dict):
        monkeypatch.setenv("CWA_API_KEY", "CWA-TEST-KEY")
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=kaohsiung_forecast)
        )
        main(["forecast"])
        assert route.calls[0].request.url.params["locationName"] == "宜蘭縣"

    def test_forecast_missing_key(self, capsys):
        assert main(["forecast", "taipei"]) == 1
        assert "CWA_API_KEY" in capsys.readouterr().out

    def test_serve(self, tmp_path: Path):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("server:\n  port: 4555\n")
        with patch("uvicorn.run") as run:
            assert main(["--config", str(config_path), "serve", "--host", "127.0.0.1"]) == 0
        _, kwargs = run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 4555
