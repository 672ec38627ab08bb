"""Error types translated into JSON error envelopes by the app's handlers."""

from typing import Any, Optional

# Body message for failures whose details stay in the server log
GENERIC_ERROR_MESSAGE = "無法取得天氣資料，請稍後再試"


class WeatherAPIError(Exception):
    """An error that maps directly onto an HTTP error response."""

    status_code: int = 500
    error: str = "伺服器錯誤"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error: Optional[str] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if error is not None:
            self.error = error
        self.details = details

    def to_body(self) -> dict:
        body: dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class MissingParameterError(WeatherAPIError):
    status_code = 400
    error = "參數錯誤"


class ConfigurationError(WeatherAPIError):
    status_code = 500
    error = "伺服器設定錯誤"


class LocationNotFoundError(WeatherAPIError):
    status_code = 404
    error = "查無資料"

    def __init__(self, city: str) -> None:
        super().__init__(
            f"無法取得 {city} 天氣資料，請確認城市名稱是否正確",
        )
        self.city = city


class UpstreamError(WeatherAPIError):
    """Non-2xx response from the CWA API; status is passed through."""

    error = "CWA API 錯誤"


class UpstreamUnavailableError(WeatherAPIError):
    """CWA could not be reached or returned something unreadable."""

    status_code = 500
    error = "伺服器錯誤"


class UpstreamDataError(WeatherAPIError):
    status_code = 502
    error = "CWA 資料不一致"


class ForecastAlignmentError(ValueError):
    """A weather element's time series does not line up with the first element's."""

    def __init__(self, element_name: str, expected: int, actual: int) -> None:
        super().__init__(
            f"element {element_name!r} has {actual} periods, expected {expected}"
        )
        self.element_name = element_name
        self.expected = expected
        self.actual = actual
