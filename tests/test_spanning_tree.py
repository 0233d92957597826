import pytest

from binroute.models.domain import Bin, Coordinate, RouteRequest
from binroute.services.geospatial import haversine_km
from binroute.services.routing.matrix import build_distance_matrix
from binroute.services.routing.points import build_point_set
from binroute.services.routing.spanning_tree import SpanningTreeSolver, TreeEdge, depth_first_order, prim


def _bin(bid: str, lat: float, lng: float, fill: int = 50) -> Bin:
    return Bin(id=bid, location=f"Bin {bid}", lat=lat, lng=lng, fill_level=fill)


def test_prim_picks_first_minimum_edges():
    matrix = [
        [0, 1, 5, 9],
        [1, 0, 9, 2],
        [5, 9, 0, 9],
        [9, 2, 9, 0],
    ]
    edges = prim(matrix)

    assert edges == [TreeEdge(0, 1, 1), TreeEdge(1, 3, 2), TreeEdge(0, 2, 5)]
    assert depth_first_order(edges, 4) == [0, 1, 3, 2]


def test_depth_first_order_matches_recursive_preorder():
    edges = [TreeEdge(0, 2, 1), TreeEdge(0, 1, 1), TreeEdge(2, 3, 1), TreeEdge(1, 4, 1), TreeEdge(2, 5, 1)]

    assert depth_first_order(edges, 6) == [0, 2, 3, 5, 1, 4]


def test_prim_skips_points_that_coincide_with_the_tree():
    matrix = [
        [0, 0],
        [0, 0],
    ]
    assert prim(matrix) == []
    assert depth_first_order([], 2) == [0]


def test_solver_reports_tree_weight_and_visits_every_point():
    bins = [
        _bin("bin1", 40.7128, -74.0060, 85),
        _bin("bin2", 40.7589, -73.9851, 92),
        _bin("bin3", 40.7505, -73.9934, 78),
        _bin("bin4", 40.7614, -73.9776, 95),
    ]
    request = RouteRequest(
        algorithm="spanning-tree",
        bins=bins,
        truck_capacity=1000,
        start_point=Coordinate(40.70, -74.02),
        end_point=Coordinate(40.78, -73.96),
    )
    response = SpanningTreeSolver().solve(request)

    points = build_point_set(request.start_point, bins, request.end_point)
    edges = prim(build_distance_matrix(points))
    assert len(edges) == len(points) - 1
    assert response.total_distance == pytest.approx(sum(edge.weight for edge in edges))
    assert len(response.metadata["tree_edges"]) == len(points) - 1

    assert response.path[0].id == "start"
    assert sorted(point.id for point in response.path) == sorted(point.id for point in points)
    assert response.capacity_used == (85 + 92 + 78 + 95) * 10


def test_traversal_can_finish_on_a_bin_instead_of_the_end_point():
    request = RouteRequest(
        algorithm="spanning-tree",
        bins=[_bin("B1", 0.0, 2.0)],
        truck_capacity=1000,
        start_point=Coordinate(0.0, 0.0),
        end_point=Coordinate(0.0, 1.0),
    )
    response = SpanningTreeSolver().solve(request)

    assert [point.id for point in response.path] == ["start", "end", "B1"]
    assert response.path[-1].id == "B1"
    assert response.total_distance == pytest.approx(2 * haversine_km(0.0, 0.0, 0.0, 1.0))
