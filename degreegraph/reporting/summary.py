"""Text and JSON renderings of a ToolkitReport.

The text form is rendered from templates/summary.txt with Jinja2; the JSON
form is a plain dict of built-in types, safe for json.dumps.
"""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from degreegraph.config.serialization import config_to_dict
from degreegraph.paths.types import UNREACHED
from degreegraph.reporting.reproduction import build_reproduction_command

_TEMPLATE_DIR = Path(__file__).parent / "templates"

UNREACHABLE_MARKER = "unreachable"


def _format_distances(distances) -> str:
    return " ".join(
        UNREACHABLE_MARKER if d == UNREACHED else str(int(d)) for d in distances
    )


def _tree_lines(tree) -> list[str]:
    """One "parent - child" line per non-root vertex, in child order."""
    unreached = set(tree.unreached)
    lines = []
    for v in range(tree.n):
        if v == tree.root:
            continue
        if v in unreached:
            lines.append(f"none - {v} ({UNREACHABLE_MARKER})")
        else:
            lines.append(f"{int(tree.parents[v])} - {v}")
    return lines


def _build_context(report) -> dict[str, Any]:
    ctx: dict[str, Any] = {
        "seed": report.seed,
        "degree_sequence": " ".join(str(d) for d in report.degree_sequence),
        "realized": report.realized,
        "failure_reason": report.failure_reason,
        "reproduce": build_reproduction_command(report),
        "distances": None,
        "trail": None,
    }
    if not report.realized:
        return ctx

    eulerian = report.eulerian
    ctx.update(
        edge_count=eulerian.edge_count,
        eulerian_kind=eulerian.kind.value,
        odd_vertices=" ".join(str(v) for v in eulerian.odd_vertices),
        odd_count=len(eulerian.odd_vertices),
    )
    if report.trail is not None:
        ctx["trail"] = " ".join(str(v) for v in report.trail.vertices)
        ctx["trail_errors"] = "; ".join(report.trail.errors)

    if report.shortest_paths is not None:
        ctx["src"] = report.shortest_paths.source
        ctx["distances"] = _format_distances(report.shortest_paths.distances)
        ctx["tree_weight"] = report.spanning_tree.total_weight
        ctx["tree_lines"] = _tree_lines(report.spanning_tree)
    return ctx


def format_report(report) -> str:
    """Human-readable run summary."""
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    template = env.get_template("summary.txt")
    return template.render(**_build_context(report))


def report_to_dict(report) -> dict[str, Any]:
    """JSON-safe dict of everything in the report (UNREACHED -> None)."""
    data: dict[str, Any] = {
        "seed": report.seed,
        "n": report.n,
        "config": config_to_dict(report.config),
        "degree_sequence": list(report.degree_sequence),
        "sequence_source": report.sequence_source,
        "realized": report.realized,
        "failure_reason": report.failure_reason,
        "eulerian": None,
        "trail": None,
        "edges": None,
        "shortest_paths": None,
        "spanning_tree": None,
        "reproduce": build_reproduction_command(report),
    }
    if not report.realized:
        return data

    eulerian = report.eulerian
    data["eulerian"] = {
        "kind": eulerian.kind.value,
        "odd_vertices": list(eulerian.odd_vertices),
        "edge_count": eulerian.edge_count,
        "edges_connected": eulerian.edges_connected,
    }
    if report.trail is not None:
        data["trail"] = {
            "vertices": list(report.trail.vertices),
            "start": report.trail.start,
            "complete": report.trail.complete,
            "errors": list(report.trail.errors),
        }
    data["edges"] = [list(e) for e in report.graph.edges()]

    if report.shortest_paths is not None:
        sp = report.shortest_paths
        data["shortest_paths"] = {
            "source": sp.source,
            "distances": [
                None if d == UNREACHED else int(d) for d in sp.distances
            ],
        }
        tree = report.spanning_tree
        data["spanning_tree"] = {
            "root": tree.root,
            "edges": [list(e) for e in tree.weighted_edges()],
            "total_weight": tree.total_weight,
            "unreached": tree.unreached,
        }
    return data
