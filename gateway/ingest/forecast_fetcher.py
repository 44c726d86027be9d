"""Forecast fetcher: queries CWA and flattens element time series into periods."""

import logging

from gateway.ingest.cwa_client import CwaClient
from gateway.models.errors import NotFoundError
from gateway.models.forecast import ForecastPeriod, WeatherReport

logger = logging.getLogger(__name__)

# elementName -> (ForecastPeriod field, suffix)
ELEMENT_FIELDS: dict[str, tuple[str, str]] = {
    "Wx": ("weather", ""),
    "PoP": ("rain", "%"),
    "MinT": ("min_temp", "°C"),
    "MaxT": ("max_temp", "°C"),
    "CI": ("comfort", ""),
    "WS": ("wind_speed", ""),
}


class ForecastFetcher:
    """Stateless: every call goes to CWA."""

    def __init__(self, client: CwaClient):
        self.client = client

    def fetch(self, location: str) -> WeatherReport:
        """Fetch the 36-hour forecast for a canonical region name.

        ConfigurationError and UpstreamError from the client propagate
        unchanged; a response with no location record raises NotFoundError.
        """
        raw = self.client.get_forecast(location)
        report = normalize_forecast(raw, location)
        logger.info(
            "Forecast for %s: %d periods", report.city, len(report.forecasts)
        )
        return report


def normalize_forecast(raw: dict, location: str) -> WeatherReport:
    """Build a WeatherReport from a raw F-C0032-001 envelope."""
    records = raw.get("records") or {}
    locations = records.get("location") or []
    if not locations:
        raise NotFoundError(location)

    record = locations[0]
    elements = record.get("weatherElement") or []
    return WeatherReport(
        city=record.get("locationName", ""),
        update_time=records.get("datasetDescription", ""),
        forecasts=tuple(_build_periods(elements, location)),
    )


def _build_periods(elements: list[dict], location: str) -> list[ForecastPeriod]:
    if not elements:
        return []

    timeline = elements[0].get("time", [])
    count = len(timeline)
    for element in elements[1:]:
        if len(element.get("time", [])) < count:
            logger.warning(
                "Element %s for %s has %d time entries, expected %d",
                element.get("elementName"), location,
                len(element.get("time", [])), count,
            )

    periods: list[ForecastPeriod] = []
    for i, slot in enumerate(timeline):
        values: dict[str, str] = {}
        for element in elements:
            mapped = ELEMENT_FIELDS.get(element.get("elementName", ""))
            if mapped is None:
                continue  # forward-compatible with new upstream elements
            times = element.get("time", [])
            if i >= len(times):
                continue
            field, suffix = mapped
            value = times[i].get("parameter", {}).get("parameterName")
            if value is None:
                continue
            values[field] = f"{value}{suffix}"

        periods.append(
            ForecastPeriod(
                start_time=slot.get("startTime", ""),
                end_time=slot.get("endTime", ""),
                **values,
            )
        )
    return periods
