"""Weighted queries: Dijkstra shortest paths and Prim spanning trees."""

from degreegraph.paths.dijkstra import dijkstra, shortest_path_distances
from degreegraph.paths.prim import prim_mst
from degreegraph.paths.types import NO_PARENT, UNREACHED, ShortestPaths, SpanningTree

__all__ = [
    "NO_PARENT",
    "UNREACHED",
    "ShortestPaths",
    "SpanningTree",
    "dijkstra",
    "prim_mst",
    "shortest_path_distances",
]
