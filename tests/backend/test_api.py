"""Tests for the HTTP surface, with CWA mocked by respx."""

import re
from datetime import datetime

import httpx
import respx
from fastapi.testclient import TestClient

from app.config import Settings
from app.constants import AVAILABLE_CITIES
from app.errors import (
    GENERIC_ERROR_MESSAGE,
    ConfigurationError,
    LocationNotFoundError,
    MissingParameterError,
    UpstreamDataError,
    UpstreamUnavailableError,
)
from app.main import create_app


class TestDiscovery:
    def test_root_lists_endpoints(self, client: TestClient):
        resp = client.get("/")
        assert resp.status_code == 200
        body = resp.json()
        assert set(body) == {"message", "endpoints", "usage"}
        assert body["endpoints"]["weatherByCity"] == "/api/weather/:city"
        assert body["endpoints"]["health"] == "/api/health"
        assert body["endpoints"]["availableCities"] == "/api/cities"
        assert "/api/weather/臺北市" in body["usage"]["examples"]


class TestHealth:
    def test_ok_with_timestamp(self, client: TestClient):
        body = client.get("/api/health").json()
        assert body["status"] == "OK"
        assert datetime.fromisoformat(body["timestamp"]).tzinfo is not None

    def test_does_not_need_api_key(self, settings_without_key: Settings):
        with TestClient(create_app(settings_without_key)) as c:
            assert c.get("/api/health").status_code == 200


class TestCities:
    def test_fixed_list(self, client: TestClient):
        body = client.get("/api/cities").json()
        assert body["success"] is True
        assert body["data"] == list(AVAILABLE_CITIES)
        assert len(body["data"]) == 22

    def test_order_stable(self, client: TestClient):
        first = client.get("/api/cities").json()["data"]
        second = client.get("/api/cities").json()["data"]
        assert first == second


class TestWeatherByCity:
    @respx.mock
    def test_success(self, client: TestClient, settings: Settings, taipei_payload: dict):
        respx.get(settings.forecast_url).mock(
            return_value=httpx.Response(200, json=taipei_payload)
        )

        resp = client.get("/api/weather/臺北市")

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        data = body["data"]
        assert data["city"] == "臺北市"
        assert data["updateTimeDescription"] == "三十六小時天氣預報"
        periods = taipei_payload["records"]["location"][0]["weatherElement"][0]["time"]
        assert len(data["forecasts"]) == len(periods)

        first = data["forecasts"][0]
        for field in ("weather", "rain", "minTemp", "maxTemp", "comfort", "windSpeed"):
            assert isinstance(first[field], str) and first[field]
        assert re.fullmatch(r"\d+%", first["rain"])
        assert re.fullmatch(r"\d+°C", first["minTemp"])
        assert first["startTime"] == periods[0]["startTime"]
        assert first["endTime"] == periods[0]["endTime"]

    @respx.mock
    def test_unknown_city_is_404(self, client: TestClient, settings: Settings, empty_payload: dict):
        respx.get(settings.forecast_url).mock(
            return_value=httpx.Response(200, json=empty_payload)
        )

        resp = client.get("/api/weather/台北")

        assert resp.status_code == 404
        body = resp.json()
        assert body["error"] == LocationNotFoundError.error
        assert "台北" in body["message"]

    def test_missing_key_is_500_for_any_city(self, settings_without_key: Settings):
        with TestClient(create_app(settings_without_key)) as c:
            for city in ("臺北市", "nowhere", "高雄市"):
                resp = c.get(f"/api/weather/{city}")
                assert resp.status_code == 500
                assert resp.json()["error"] == ConfigurationError.error
                assert "CWA_API_KEY" in resp.json()["message"]

    def test_no_city_segment(self, client: TestClient):
        for path in ("/api/weather", "/api/weather/"):
            resp = client.get(path)
            assert resp.status_code in (400, 404)
            assert "success" not in resp.json()

    def test_blank_city_is_400(self, client: TestClient):
        resp = client.get("/api/weather/%20")
        assert resp.status_code == 400
        assert resp.json()["error"] == MissingParameterError.error

    @respx.mock
    def test_upstream_error_passthrough(self, client: TestClient, settings: Settings):
        body = {"success": "false", "message": "Resource not found"}
        respx.get(settings.forecast_url).mock(return_value=httpx.Response(403, json=body))

        resp = client.get("/api/weather/臺北市")

        assert resp.status_code == 403
        assert resp.json() == {
            "error": "CWA API 錯誤",
            "message": "Resource not found",
            "details": body,
        }

    @respx.mock
    def test_upstream_unreachable_is_500(self, client: TestClient, settings: Settings):
        respx.get(settings.forecast_url).mock(side_effect=httpx.ConnectError("down"))

        resp = client.get("/api/weather/臺北市")

        assert resp.status_code == 500
        assert resp.json() == {
            "error": UpstreamUnavailableError.error,
            "message": GENERIC_ERROR_MESSAGE,
        }

    @respx.mock
    def test_misaligned_upstream_is_502(
        self, client: TestClient, settings: Settings, taipei_payload: dict,
    ):
        elements = taipei_payload["records"]["location"][0]["weatherElement"]
        elements[-1]["time"].pop()
        respx.get(settings.forecast_url).mock(
            return_value=httpx.Response(200, json=taipei_payload)
        )

        resp = client.get("/api/weather/臺北市")

        assert resp.status_code == 502
        assert resp.json()["error"] == UpstreamDataError.error

    @respx.mock
    def test_malformed_element_name_is_not_an_error(
        self, client: TestClient, settings: Settings, taipei_payload: dict,
    ):
        elements = taipei_payload["records"]["location"][0]["weatherElement"]
        elements[1]["elementName"] = {"a": 1}
        respx.get(settings.forecast_url).mock(
            return_value=httpx.Response(200, json=taipei_payload)
        )

        resp = client.get("/api/weather/臺北市")

        assert resp.status_code == 200
        first = resp.json()["data"]["forecasts"][0]
        assert first["rain"] == ""
        assert first["weather"] == "多雲時晴"

    def test_unexpected_error_is_500(self, settings: Settings, monkeypatch):
        async def boom(city, settings):
            raise RuntimeError("kaboom")

        monkeypatch.setattr("app.api.weather.get_city_forecast", boom)
        with TestClient(create_app(settings), raise_server_exceptions=False) as c:
            resp = c.get("/api/weather/臺北市")

        assert resp.status_code == 500
        assert resp.json() == {"error": "伺服器錯誤", "message": GENERIC_ERROR_MESSAGE}
        assert "kaboom" not in resp.text


class TestUnmatchedRoute:
    def test_not_found_body(self, client: TestClient):
        resp = client.get("/api/doesnotexist")
        assert resp.status_code == 404
        assert resp.json() == {"error": "not found"}
