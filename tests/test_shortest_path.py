import pytest

from binroute.models.domain import Bin, Coordinate, RouteRequest
from binroute.services.geospatial import haversine_km
from binroute.services.routing.errors import EmptyPointSet, UnreachableEndpoint
from binroute.services.routing.shortest_path import ShortestPathSolver, dijkstra


def _bin(bid: str, lat: float, lng: float, fill: int = 50) -> Bin:
    return Bin(id=bid, location=f"Bin {bid}", lat=lat, lng=lng, fill_level=fill)


def _request(bins, start=(30.3165, 78.0322), end=(30.3165, 78.0322)) -> RouteRequest:
    return RouteRequest(
        algorithm="shortest-path",
        bins=bins,
        truck_capacity=1000,
        start_point=Coordinate(*start),
        end_point=Coordinate(*end),
    )


def test_dijkstra_prefers_cheaper_detour():
    matrix = [
        [0, 1, 10],
        [1, 0, 1],
        [10, 1, 0],
    ]
    assert dijkstra(matrix, 0, 2) == [0, 1, 2]


def test_dijkstra_breaks_ties_on_lowest_index():
    matrix = [
        [0, 1, 1, 5],
        [1, 0, 9, 1],
        [1, 9, 0, 1],
        [5, 1, 1, 0],
    ]
    assert dijkstra(matrix, 0, 3) == [0, 1, 3]


def test_dijkstra_returns_partial_path_when_unreachable():
    matrix = [
        [0, 0],
        [0, 0],
    ]
    assert dijkstra(matrix, 0, 1) == [1]


def test_round_trip_through_single_bin_when_start_equals_end():
    bin_ = _bin("B1", 30.3255, 78.0367, fill=50)
    response = ShortestPathSolver().solve(_request([bin_]))

    assert [point.id for point in response.path] == ["start", "B1", "end"]
    expected = 2 * haversine_km(30.3165, 78.0322, 30.3255, 78.0367)
    assert response.total_distance == pytest.approx(expected)
    assert response.capacity_used == 500
    assert response.execution_time == 0.0


def test_distinct_endpoints_use_the_direct_edge_and_count_all_bins():
    bins = [_bin("B1", 30.40, 78.10, fill=80), _bin("B2", 30.20, 77.90, fill=30)]
    response = ShortestPathSolver().solve(_request(bins, start=(30.30, 78.00), end=(30.35, 78.05)))

    assert response.path[0].id == "start"
    assert response.path[-1].id == "end"
    assert [point.id for point in response.path] == ["start", "end"]
    assert response.total_distance == pytest.approx(haversine_km(30.30, 78.00, 30.35, 78.05))
    assert response.capacity_used == 1100


def test_dijkstra_needs_two_points():
    with pytest.raises(EmptyPointSet):
        dijkstra([[0]], 0, 0)


def test_unreachable_end_raises():
    bins = [_bin("B1", 30.3165, 78.0322)]
    with pytest.raises(UnreachableEndpoint):
        ShortestPathSolver().solve(_request(bins))
