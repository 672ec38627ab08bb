"""Normalize CWA element-oriented forecasts into per-period records.

The F-C0032-001 dataset returns, per location, a list of weather elements
(``Wx``, ``PoP``, ``MinT`` ...), each with its own ``time`` series.  Clients
want the transpose: one record per time window holding every element's
value.  Periods (start/end) are taken from the first element.
"""

import logging
from typing import Any, Callable

from ..constants import (
    ELEMENT_COMFORT,
    ELEMENT_MAX_TEMP,
    ELEMENT_MIN_TEMP,
    ELEMENT_RAIN,
    ELEMENT_WEATHER,
    ELEMENT_WIND_SPEED,
)
from ..errors import ForecastAlignmentError
from ..schemas.forecast import ForecastPeriod

logger = logging.getLogger(__name__)


def _suffix(unit: str) -> Callable[[str], str]:
    def transform(value: str) -> str:
        return f"{value}{unit}" if value else ""
    return transform


def _passthrough(value: str) -> str:
    return value


# Element code -> (ForecastPeriod field, value transform)
ELEMENT_FIELDS: dict[str, tuple[str, Callable[[str], str]]] = {
    ELEMENT_WEATHER:    ("weather", _passthrough),
    ELEMENT_RAIN:       ("rain", _suffix("%")),
    ELEMENT_MIN_TEMP:   ("minTemp", _suffix("°C")),
    ELEMENT_MAX_TEMP:   ("maxTemp", _suffix("°C")),
    ELEMENT_COMFORT:    ("comfort", _passthrough),
    ELEMENT_WIND_SPEED: ("windSpeed", _passthrough),
}


def _series(element: dict) -> list:
    series = element.get("time")
    return series if isinstance(series, list) else []


def _parameter_name(entry: Any) -> str:
    """Pull ``parameter.parameterName`` out of a time entry, or "" if absent."""
    if not isinstance(entry, dict):
        return ""
    param = entry.get("parameter")
    if not isinstance(param, dict):
        return ""
    value = param.get("parameterName")
    return "" if value is None else str(value)


def _check_alignment(elements: list[dict], expected: int) -> None:
    for element in elements[1:]:
        actual = len(_series(element))
        if actual != expected:
            raise ForecastAlignmentError(
                str(element.get("elementName", "?")), expected, actual,
            )


def normalize_forecast(weather_elements: list[dict]) -> list[ForecastPeriod]:
    """Transpose a location's ``weatherElement`` list into ForecastPeriods.

    Args:
        weather_elements: The ``weatherElement`` array of one CWA location.

    Returns:
        One ForecastPeriod per entry of the first element's series, in
        upstream order.  Unknown element codes are ignored and missing
        values stay empty strings.

    Raises:
        ForecastAlignmentError: an element's series length differs from
            the first element's.
    """
    if not isinstance(weather_elements, list):
        return []
    elements = [e for e in weather_elements if isinstance(e, dict)]
    if not elements:
        return []

    periods = _series(elements[0])
    _check_alignment(elements, len(periods))

    forecasts: list[ForecastPeriod] = []
    for i, period in enumerate(periods):
        period = period if isinstance(period, dict) else {}
        record = ForecastPeriod(
            startTime=str(period.get("startTime") or ""),
            endTime=str(period.get("endTime") or ""),
        )
        for element in elements:
            name = element.get("elementName")
            mapping = ELEMENT_FIELDS.get(name) if isinstance(name, str) else None
            if mapping is None:
                continue
            field, transform = mapping
            setattr(record, field, transform(_parameter_name(_series(element)[i])))
        forecasts.append(record)

    logger.debug("Normalized %d elements into %d periods", len(elements), len(forecasts))
    return forecasts
