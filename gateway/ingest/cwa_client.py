"""CWA open-data API client for the 36-hour general forecast dataset."""

import logging
import os

import httpx

from gateway.models.errors import API_KEY_ENV, ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

CWA_BASE_URL = "https://opendata.cwa.gov.tw/api"
FORECAST_36H_DATASET = "F-C0032-001"
DEFAULT_UPSTREAM_MESSAGE = "Unable to fetch weather data"


class CwaClient:
    """Single-shot GET against the CWA datastore. No retries."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = CWA_BASE_URL,
        dataset_id: str = FORECAST_36H_DATASET,
        timeout: float = 30.0,
        api_key_env: str = API_KEY_ENV,
    ):
        self.api_key = api_key or os.environ.get(api_key_env, "")
        self.api_key_env = api_key_env
        self.base_url = base_url.rstrip("/")
        self.dataset_id = dataset_id
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}/v1/rest/datastore/{self.dataset_id}"

    def get_forecast(self, location_name: str) -> dict:
        """Fetch the raw forecast envelope for one region name.

        Raises ConfigurationError before any request when no key is set,
        and UpstreamError for transport failures and HTTP errors.
        """
        if not self.api_key:
            raise ConfigurationError(self.api_key_env)

        params = {"Authorization": self.api_key, "locationName": location_name}
        logger.info("CWA %s request for %s", self.dataset_id, location_name)
        try:
            resp = httpx.get(self.url, params=params, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("CWA request failed for %s: %s", location_name, e)
            raise UpstreamError(
                f"Request to CWA failed: {e}", status_code=502, details=str(e)
            ) from e

        if resp.status_code >= 400:
            details = _body(resp)
            message = DEFAULT_UPSTREAM_MESSAGE
            if isinstance(details, dict) and details.get("message"):
                message = str(details["message"])
            logger.error(
                "CWA API %d for %s: %s", resp.status_code, location_name, details
            )
            raise UpstreamError(message, status_code=resp.status_code, details=details)

        try:
            return resp.json()
        except ValueError as e:
            logger.error("CWA returned non-JSON body for %s", location_name)
            raise UpstreamError(
                "CWA returned an invalid response",
                status_code=502,
                details=resp.text,
            ) from e


def _body(resp: httpx.Response) -> object:
    try:
        return resp.json()
    except ValueError:
        return resp.text
