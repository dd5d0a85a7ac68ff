"""
FastAPI endpoint tests for the Currency Formatter API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

from decimal import Decimal

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from currency_formatter.formatter import CurrencyFormatter

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_formatter() -> None:
    """Initialise the formatter once for all API tests (bypasses lifespan)."""
    api._formatter = CurrencyFormatter()
    yield  # type: ignore[misc]
    api._formatter = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["decimal_places"] == 2
        assert data["unit_name"] == "واحد"

    def test_uninitialised_returns_503(self, monkeypatch) -> None:
        monkeypatch.setattr(api, "_formatter", None)
        assert client.get("/health").status_code == 503


class TestFormatEndpoint:
    def test_groups_integer(self) -> None:
        data = client.post("/format", json={"value": 1234567}).json()
        assert data["formatted"] == "1,234,567"

    def test_string_value_keeps_fraction(self) -> None:
        data = client.post("/format", json={"value": "1234.5"}).json()
        assert data["formatted"] == "1,234.50"

    def test_decimal_places_override(self) -> None:
        data = client.post("/format", json={"value": 1234.5, "decimal_places": 0}).json()
        assert data["formatted"] == "1,235"

    def test_garbage_gives_empty_string(self) -> None:
        resp = client.post("/format", json={"value": "abc"})
        assert resp.status_code == 200
        assert resp.json()["formatted"] == ""

    def test_missing_value_gives_empty_string(self) -> None:
        assert client.post("/format", json={}).json()["formatted"] == ""

    def test_decimal_places_out_of_range_returns_422(self) -> None:
        resp = client.post("/format", json={"value": 1, "decimal_places": 9})
        assert resp.status_code == 422


class TestUnformatEndpoint:
    def test_strips_separators(self) -> None:
        data = client.post("/unformat", json={"formatted": "1,234,567"}).json()
        assert Decimal(data["value"]) == 1234567

    def test_lenient_garbage_is_zero(self) -> None:
        data = client.post("/unformat", json={"formatted": "abc"}).json()
        assert Decimal(data["value"]) == 0

    def test_strict_garbage_returns_422(self) -> None:
        resp = client.post("/unformat", json={"formatted": "abc", "strict": True})
        assert resp.status_code == 422
        assert resp.json()["code"] == "NUMBER_UNPARSEABLE"

    def test_missing_body_returns_422(self) -> None:
        assert client.post("/unformat").status_code == 422


class TestWordsEndpoint:
    def test_words_with_unit(self) -> None:
        data = client.post("/words", json={"value": 1001, "unit_name": "تومان"}).json()
        assert data["formatted"] == "1,001"
        assert data["words"] == "یک هزار و یک"
        assert data["words_with_unit"] == "یک هزار و یک تومان"
        assert Decimal(data["value"]) == 1001

    def test_default_unit(self) -> None:
        data = client.post("/words", json={"value": 0}).json()
        assert data["words_with_unit"] == "صفر واحد"

    def test_negative_fraction(self) -> None:
        data = client.post("/words", json={"value": "-5.25"}).json()
        assert data["words"] == "منفی پنج ممیز بیست و پنج"

    def test_invalid_value(self) -> None:
        data = client.post("/words", json={"value": "abc"}).json()
        assert data["value"] is None
        assert data["words"] == ""

    def test_too_large_returns_422(self) -> None:
        resp = client.post("/words", json={"value": 10**15})
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "MAGNITUDE_OUT_OF_RANGE"
        assert "details" in data


class TestExtremeInput:
    def test_format_huge_exponent_returns_200(self) -> None:
        resp = client.post("/format", json={"value": "1e1000000"})
        assert resp.status_code == 200
        assert resp.json()["formatted"].startswith("1,000,000,")

    def test_words_huge_exponent_returns_422(self) -> None:
        resp = client.post("/words", json={"value": "1e1000000"})
        assert resp.status_code == 422
        assert resp.json()["code"] == "MAGNITUDE_OUT_OF_RANGE"

    def test_format_rejects_underscores(self) -> None:
        data = client.post("/format", json={"value": "1_000"}).json()
        assert data["formatted"] == ""
