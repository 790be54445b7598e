"""
End-to-end tests: a real number file, a real engine built during app
startup, and HTTP requests through the full middleware stack.

These cover the documented scenarios over [1, 3, 5, 7, 9, 11, 13, 15]
exactly as a client of the service sees them.
"""

import pytest
from fastapi.testclient import TestClient

from number_finder.api.app import create_app
from number_finder.config import DataSettings, Settings


@pytest.fixture
def client(number_file):
    app = create_app(settings=Settings(data=DataSettings(path=number_file)))
    with TestClient(app) as test_client:
        yield test_client


class TestScenarios:
    def test_exact_match(self, client):
        resp = client.get("/api/number/7?thresholdPercentage=0.1")
        assert resp.status_code == 200
        assert resp.json() == {"index": 3, "value": 7, "isApproximate": False}

    def test_approximate_match(self, client):
        resp = client.get("/api/number/8?thresholdPercentage=0.2")
        assert resp.status_code == 200
        assert resp.json() == {"index": 4, "value": 9, "isApproximate": True}

    def test_zero_threshold_not_found(self, client):
        resp = client.get("/api/number/8?thresholdPercentage=0")
        assert resp.status_code == 404
        assert resp.json()["detail"]["error"] == "not_found"

    def test_default_threshold_not_found(self, client):
        resp = client.get("/api/number/8")
        assert resp.status_code == 404
        assert resp.json()["detail"]["message"] == "number not found"

    def test_out_of_threshold(self, client):
        resp = client.get("/api/number/100?thresholdPercentage=0.1")
        assert resp.status_code == 404
        assert resp.json()["detail"]["error"] == "out_of_threshold"

    def test_every_value_exact(self, client, sample_numbers):
        for i, v in enumerate(sample_numbers):
            assert client.get(f"/api/number/{v}").json() == {
                "index": i,
                "value": v,
                "isApproximate": False,
            }

    def test_repeated_requests_identical(self, client):
        first = client.get("/api/number/8?thresholdPercentage=0.2").json()
        second = client.get("/api/number/8?thresholdPercentage=0.2").json()
        assert first == second

    def test_health(self, client):
        assert client.get("/api/health").json()["status"] == "ok"
