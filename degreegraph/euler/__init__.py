"""Eulerian analysis and trail extraction."""

from degreegraph.euler.analysis import (
    analyze_eulerian,
    classify_eulerian,
    is_eulerian,
    odd_degree_vertices,
    suggest_start,
)
from degreegraph.euler.fleury import extract_eulerian_trail, find_eulerian_trail
from degreegraph.euler.types import EulerianAnalysis, EulerianKind, EulerianTrail

__all__ = [
    "EulerianAnalysis",
    "EulerianKind",
    "EulerianTrail",
    "analyze_eulerian",
    "classify_eulerian",
    "extract_eulerian_trail",
    "find_eulerian_trail",
    "is_eulerian",
    "odd_degree_vertices",
    "suggest_start",
]
