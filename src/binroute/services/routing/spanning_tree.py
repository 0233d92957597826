"""Prim minimum spanning tree with a depth-first linearisation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ...models.domain import RouteRequest, RouteResponse
from .base import RoutingStrategy, total_bin_weight
from .errors import EmptyPointSet
from .matrix import DistanceMatrix, build_distance_matrix
from .points import build_point_set

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TreeEdge:
    source: int
    target: int
    weight: float


def prim(distances: DistanceMatrix) -> list[TreeEdge]:
    """Grow a minimum spanning tree from node 0.

    Each round scans every visited/unvisited pair in ascending index order and
    keeps the first strictly smaller edge. Zero-length edges are ignored, so a
    point coinciding with every visited point is left out of the tree.
    """

    n = len(distances)
    if n == 0:
        return []
    visited = [False] * n
    visited[0] = True
    edges: list[TreeEdge] = []

    for _ in range(n - 1):
        min_weight = math.inf
        min_from = -1
        min_to = -1
        for u in range(n):
            if not visited[u]:
                continue
            for v in range(n):
                weight = distances[u][v]
                if not visited[v] and 0 < weight < min_weight:
                    min_weight = weight
                    min_from = u
                    min_to = v
        if min_to == -1:
            logger.warning("Spanning tree stopped after %d of %d edges; remaining points coincide", len(edges), n - 1)
            break
        visited[min_to] = True
        edges.append(TreeEdge(source=min_from, target=min_to, weight=min_weight))
        logger.debug("MST edge %d -> %d (%.4f km)", min_from, min_to, min_weight)

    return edges


def depth_first_order(edges: list[TreeEdge], node_count: int, root: int = 0) -> list[int]:
    """Pre-order walk of the tree, neighbours taken in edge insertion order.

    Uses an explicit stack; neighbours are pushed in reverse so they pop in
    the same order a recursive walk would visit them.
    """

    adjacency: list[list[int]] = [[] for _ in range(node_count)]
    for edge in edges:
        adjacency[edge.source].append(edge.target)
        adjacency[edge.target].append(edge.source)

    visited = [False] * node_count
    order: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node)
        for neighbor in reversed(adjacency[node]):
            if not visited[neighbor]:
                stack.append(neighbor)
    return order


class SpanningTreeSolver(RoutingStrategy):
    """Reports the tree weight as the route distance.

    The path is only a traversal order for display; its own length is not the
    reported distance.
    """

    name = "spanning-tree"

    def solve(self, request: RouteRequest) -> RouteResponse:
        points = build_point_set(request.start_point, request.bins, request.end_point)
        if len(points) < 2:
            raise EmptyPointSet("Spanning tree needs at least two points.")

        distances = build_distance_matrix(points)
        edges = prim(distances)
        order = depth_first_order(edges, len(points))

        return RouteResponse(
            path=[points[index] for index in order],
            total_distance=sum(edge.weight for edge in edges),
            capacity_used=total_bin_weight(request.bins),
            execution_time=0.0,
            metadata={"tree_edges": [(edge.source, edge.target, edge.weight) for edge in edges]},
        )
