"""Gateway error taxonomy.

Every failure the fetch path can produce is one of these. The API layer
turns them into HTTP responses; nothing below it knows about HTTP
responses beyond the status code each error carries.
"""

from typing import Any

API_KEY_ENV = "CWA_API_KEY"


class GatewayError(Exception):
    """Base class for errors surfaced to gateway clients."""

    status_code: int = 500
    error: str = "Server error"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(GatewayError):
    """Raised when the CWA credential is not configured."""

    error = "Server configuration error"

    def __init__(self, env_var: str = API_KEY_ENV):
        super().__init__(f"Set {env_var} in the environment")
        self.env_var = env_var


class NotFoundError(GatewayError):
    """Raised when the upstream dataset has no record for a location."""

    status_code = 404
    error = "No data"

    def __init__(self, location: str):
        super().__init__(f"No weather data available for {location}")
        self.location = location


class UpstreamError(GatewayError):
    """Raised on CWA transport or HTTP-level failures."""

    status_code = 502
    error = "CWA API error"


class UnknownError(GatewayError):
    error = "Server error"

    def __init__(self, message: str = "Unable to fetch weather data, please try again later"):
        super().__init__(message)
