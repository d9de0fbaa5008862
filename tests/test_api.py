"""
FastAPI endpoint tests for the Numero API.

Uses httpx + FastAPI TestClient, no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from numero.converter import Converter

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_converter() -> None:
    """Initialise the converter once for all API tests (bypasses lifespan)."""
    api._converter = Converter()
    yield  # type: ignore[misc]
    api._converter = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["naming_systems"] == ["short_scale", "long_scale"]


class TestConvertEndpoint:
    def test_number_to_numeral(self) -> None:
        resp = client.post("/convert", json={"input": "12,083,056"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["output"] == "twelve million eighty-three thousand fifty-six"
        assert data["direction"] == "to_numeral"

    def test_numeral_to_number(self) -> None:
        data = client.post("/convert", json={"input": "nineteen hundred"}).json()
        assert data["output"] == "1,900"
        assert data["direction"] == "to_number"

    def test_request_options(self) -> None:
        resp = client.post(
            "/convert",
            json={"input": "one milliard", "options": {"naming_system": "long_scale"}},
        )
        assert resp.status_code == 200
        assert resp.json()["output"] == "1,000,000,000"

    def test_request_options_do_not_stick(self) -> None:
        client.post("/convert", json={"input": "5", "options": {"naming_system": "long_scale"}})
        assert client.post("/convert", json={"input": "1,000,000,000"}).json()["output"] == "one billion"

    def test_conversion_error_is_422(self) -> None:
        resp = client.post("/convert", json={"input": "gazillion"})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "UNKNOWN_TERM"
        assert detail["details"]["term"] == "gazillion"

    def test_grammar_error_code(self) -> None:
        resp = client.post("/convert", json={"input": "six thousand fourty-four million"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "OUT_OF_ORDER_MAGNITUDE"

    def test_empty_input(self) -> None:
        resp = client.post("/convert", json={"input": ""})
        assert resp.status_code == 422

    def test_conflicting_separators(self) -> None:
        resp = client.post(
            "/convert",
            json={"input": "5", "options": {"thousands_separator_symbol": ",", "decimal_separator_symbol": ","}},
        )
        assert resp.status_code == 422


    def test_huge_exponent_is_422(self) -> None:
        resp = client.post("/convert", json={"input": "1e200000000"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "UNSUPPORTED_MAGNITUDE"

    def test_unparseable_exponent_is_422(self) -> None:
        resp = client.post("/convert", json={"input": "1e99999999999999999999"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_NUMBER"

    def test_reserved_separator_is_422(self) -> None:
        resp = client.post("/convert", json={"input": "5", "options": {"thousands_separator_symbol": "e"}})
        assert resp.status_code == 422


class TestBatchEndpoint:
    def test_results_in_order(self) -> None:
        resp = client.post("/convert/batch", json={"inputs": ["5", "twenty-one", "bogus!"]})
        assert resp.status_code == 200
        data = resp.json()
        assert [r["input"] for r in data["results"]] == ["5", "twenty-one", "bogus!"]
        assert data["results"][0]["output"] == "five"
        assert data["results"][1]["output"] == "21"
        assert data["results"][2]["code"] == "NOT_CONVERTIBLE"
        assert data["failure_count"] == 1

    def test_parallel_batch(self) -> None:
        inputs = [str(n) for n in range(100)]
        resp = client.post("/convert/batch", json={"inputs": inputs, "jobs_count": 4})
        data = resp.json()
        assert data["failure_count"] == 0
        assert data["results"][42]["output"] == "fourty-two"

    def test_batch_options(self) -> None:
        resp = client.post(
            "/convert/batch",
            json={"inputs": ["1,000,000,000"], "options": {"naming_system": "long_scale"}},
        )
        assert resp.json()["results"][0]["output"] == "one milliard"

    def test_empty_batch_rejected(self) -> None:
        resp = client.post("/convert/batch", json={"inputs": []})
        assert resp.status_code == 422


class TestNotInitialised:
    def test_503_without_converter(self) -> None:
        api._converter = None
        try:
            assert client.get("/health").status_code == 503
        finally:
            api._converter = Converter()
