"""CWA weather gateway: FastAPI routes and error boundary."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.config.loader import load_config, resolve_api_key
from gateway.config.schema import GatewayConfig
from gateway.ingest.cwa_client import CwaClient
from gateway.ingest.forecast_fetcher import ForecastFetcher
from gateway.locations import REGISTRY, LocationRegistry
from gateway.models.common import utc_now_iso
from gateway.models.errors import GatewayError, UnknownError

logger = logging.getLogger(__name__)

SERVICE_DESCRIPTION = {
    "message": "Welcome to the CWA weather forecast API",
    "endpoints": {
        "health": "/api/health",
        "locations": "/api/locations",
        "weather_english": "/api/weather/:location (English code)",
        "weather_chinese": "/api/weather/:location (Chinese location name)",
    },
    "examples": {
        "english_taipei": "/api/weather/taipei",
        "english_kaohsiung": "/api/weather/kaohsiung",
        "english_yilan": "/api/weather/yilan",
        "chinese_taipei": "/api/weather/台北市",
        "chinese_kaohsiung": "/api/weather/高雄市",
    },
}


def build_fetcher(config: GatewayConfig) -> ForecastFetcher:
    client = CwaClient(
        api_key=resolve_api_key(config),
        base_url=config.upstream.base_url,
        dataset_id=config.upstream.dataset_id,
        timeout=config.upstream.timeout_seconds,
        api_key_env=config.upstream.api_key_env,
    )
    return ForecastFetcher(client)


def create_app(
    config: GatewayConfig | None = None,
    fetcher: ForecastFetcher | None = None,
    registry: LocationRegistry = REGISTRY,
) -> FastAPI:
    config = config or load_config()
    fetcher = fetcher or build_fetcher(config)

    app = FastAPI(title="CWA Weather Gateway", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Error boundary ──────────────────────────────────────────────

    @app.exception_handler(GatewayError)
    async def _gateway_error(request: Request, exc: GatewayError):
        logger.error("Failed to fetch weather data: %s", exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "Not found"})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "Request error", "message": str(exc.detail)},
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content=UnknownError().to_payload())

    # ── Routes ──────────────────────────────────────────────────────

    def _weather(token: str) -> dict:
        location = registry.resolve_or_passthrough(token)
        try:
            report = fetcher.fetch(location)
        except GatewayError:
            raise
        except Exception as e:
            logger.exception("Unexpected error fetching weather for %s", location)
            raise UnknownError() from e
        return {"success": True, "data": report.to_dict()}

    @app.get("/")
    def get_root():
        """Service description and example endpoints."""
        return SERVICE_DESCRIPTION

    @app.get("/api/health")
    def get_health():
        return {"status": "OK", "timestamp": utc_now_iso()}

    @app.get("/api/locations")
    def get_locations():
        """All registered location codes and their region names."""
        codes = registry.all_codes()
        return {
            "total": len(codes),
            "locations": registry.all_entries(),
            "codes": codes,
        }

    # Kept for clients of the original single-city endpoint.
    @app.get("/api/weather/kaohsiung")
    def get_weather_kaohsiung():
        return _weather("kaohsiung")

    @app.get("/api/weather/{location}")
    def get_weather(location: str):
        """Forecast by English code or Chinese region name."""
        return _weather(location)

    return app


app = create_app()
