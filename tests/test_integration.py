import pytest
from fastapi.testclient import TestClient

from binroute.config import settings
from binroute.main import create_app


def _bin(bid: str, lat: float, lng: float, fill: int, location: str | None = None) -> dict:
    return {"id": bid, "location": location or f"Bin {bid}", "fillLevel": fill, "lat": lat, "lng": lng}


def _payload(algorithm: str, **overrides) -> dict:
    payload = {
        "algorithm": algorithm,
        "bins": [
            _bin("bin1", 40.7128, -74.0060, 85, "Main Street & 1st Ave"),
            _bin("bin2", 40.7589, -73.9851, 92, "Park Avenue & 2nd St"),
            _bin("bin3", 40.7505, -73.9934, 78, "Broadway & 3rd St"),
        ],
        "truckCapacity": 1000,
        "startPoint": {"lat": 30.3165, "lng": 78.0322},
        "endPoint": {"lat": 30.3165, "lng": 78.0322},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def api_client() -> TestClient:
    return TestClient(create_app())


def test_health_endpoint(api_client: TestClient):
    response = api_client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_algorithms_endpoint_lists_aliases(api_client: TestClient):
    response = api_client.get("/api/routes/algorithms")

    assert response.status_code == 200
    payload = {entry["name"]: entry for entry in response.json()}
    assert set(payload) == {"shortest-path", "spanning-tree", "tour", "capacity-selection"}
    assert payload["capacity-selection"]["aliases"] == ["knapsack"]


def test_optimize_endpoint_returns_camel_case_route(api_client: TestClient):
    payload = _payload(
        "knapsack",
        startPoint={"lat": 40.7128, "lng": -74.0060},
        endPoint={"lat": 40.8000, "lng": -73.9500},
    )
    response = api_client.post("/api/routes/optimize", json=payload)

    assert response.status_code == 200
    payload = response.json()
    assert payload["algorithm"] == "capacity-selection"
    assert payload["capacityUsed"] == 920
    assert payload["executionTime"] >= 0
    assert [point["id"] for point in payload["path"]] == ["start", "bin2", "end"]
    assert payload["path"][0]["fillLevel"] == 0
    assert payload["metrics"]["stopCount"] == 1
    assert payload["metrics"]["criticalBins"] == 1
    assert payload["metrics"]["efficiency"] == 92.0


def test_optimize_endpoint_defaults_missing_points(api_client: TestClient):
    payload = _payload("tour")
    del payload["startPoint"]
    del payload["endPoint"]

    response = api_client.post("/api/routes/optimize", json=payload)

    assert response.status_code == 200
    start = response.json()["path"][0]
    assert start["lat"] == settings.default_start_lat
    assert start["lng"] == settings.default_start_lng


def test_optimize_endpoint_rejects_unknown_algorithm(api_client: TestClient):
    response = api_client.post("/api/routes/optimize", json=_payload("genetic"))

    assert response.status_code == 400
    assert "genetic" in response.json()["detail"]


def test_optimize_endpoint_rejects_fractional_capacity_for_selection(api_client: TestClient):
    response = api_client.post("/api/routes/optimize", json=_payload("capacity-selection", truckCapacity=999.5))

    assert response.status_code == 400


def test_optimize_endpoint_validates_fill_level(api_client: TestClient):
    payload = _payload("tour", bins=[_bin("bad", 40.0, -74.0, 150)])

    response = api_client.post("/api/routes/optimize", json=payload)

    assert response.status_code == 422


def test_compare_endpoint_returns_every_algorithm(api_client: TestClient):
    response = api_client.post("/api/routes/compare", json=_payload("tour", truckCapacity=2000))

    assert response.status_code == 200
    entries = response.json()
    assert [entry["algorithm"] for entry in entries] == [
        "shortest-path",
        "spanning-tree",
        "tour",
        "capacity-selection",
    ]
    assert all(entry["totalDistance"] >= 0 for entry in entries)


def test_sample_bins_endpoint(api_client: TestClient):
    response = api_client.get("/api/bins/sample")

    assert response.status_code == 200
    bins = response.json()
    assert len(bins) == 5
    assert bins[1]["priority"] == "critical"

    filtered = api_client.get("/api/bins/sample", params=[("ids", "bin3"), ("ids", "bin5")])
    assert [entry["id"] for entry in filtered.json()] == ["bin3", "bin5"]
