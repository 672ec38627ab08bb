"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

FIXTURE_DIR = Path(__file__).parent / "fixtures"

CWA_BASE_URL = "https://test-cwa.example.com/api"


@pytest.fixture
def settings() -> Settings:
    """Settings with a dummy key, isolated from any real .env file."""
    return Settings(
        _env_file=None,
        cwa_api_key="CWA-TEST-KEY",
        cwa_api_base_url=CWA_BASE_URL,
        request_timeout=1.0,
    )


@pytest.fixture
def settings_without_key() -> Settings:
    return Settings(_env_file=None, cwa_api_key="", cwa_api_base_url=CWA_BASE_URL)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def taipei_payload() -> dict:
    with open(FIXTURE_DIR / "cwa_taipei.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def taipei_elements(taipei_payload: dict) -> list[dict]:
    return taipei_payload["records"]["location"][0]["weatherElement"]


@pytest.fixture
def empty_payload() -> dict:
    """What CWA returns for an unknown locationName."""
    return {
        "success": "true",
        "result": {"resource_id": "F-C0032-001", "fields": []},
        "records": {"datasetDescription": "三十六小時天氣預報", "location": []},
    }
