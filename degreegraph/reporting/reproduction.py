"""Copy-pasteable command that replays a run."""

from typing import Any


def build_reproduction_command(report: Any) -> str:
    """CLI invocation reproducing report exactly.

    The resolved seed is always pinned; an explicit degree sequence is
    passed through since it did not come from the seed. An empty explicit
    sequence is written as --n 0, which draws the same empty sequence.
    """
    config = report.config
    parts = ["degreegraph"]
    if report.sequence_source == "explicit" and report.degree_sequence:
        degrees = ",".join(str(d) for d in report.degree_sequence)
        # argparse reads a leading "-1" as an option unless it is attached
        sep = "=" if degrees.startswith("-") else " "
        parts.append(f"--degrees{sep}{degrees}")
    else:
        parts.append(f"--n {config.graph.n}")
    parts.append(f"--src {config.query.src}")
    parts.append(f"--seed {report.seed}")
    if config.query.euler_start is not None:
        parts.append(f"--euler-start {config.query.euler_start}")
    if config.query.mst_root != 0:
        parts.append(f"--mst-root {config.query.mst_root}")
    if config.graph.realization != "tracked":
        parts.append(f"--realization {config.graph.realization}")
    if config.graph.representation != "dense":
        parts.append(f"--representation {config.graph.representation}")
    if (config.weights.low, config.weights.high) != (1, 10):
        parts.append(f"--weights {config.weights.low},{config.weights.high}")
    return " ".join(parts)
