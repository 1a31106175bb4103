"""Tests for the run_toolkit command-line entry point."""

import json
import shlex
from dataclasses import replace

import numpy as np
import pytest

from degreegraph.config import (
    GraphConfig,
    QueryConfig,
    ToolkitConfig,
    WeightConfig,
    config_to_json,
)
from degreegraph.pipeline import run_pipeline
from run_toolkit import build_parser, main, resolve_config


def _answers(monkeypatch, *values: str) -> None:
    it = iter(values)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


class TestMain:
    """main() wires config resolution, pipeline and output together."""

    def test_explicit_degrees(self, capsys) -> None:
        code = main(["--degrees", "3,3,2,2,2", "--src", "0", "--seed", "7"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Seed: 7" in out
        assert "Graph constructed successfully (6 edges)." in out
        assert "Reproduce: degreegraph --degrees 3,3,2,2,2 --src 0 --seed 7" in out

    def test_json_output(self, capsys) -> None:
        code = main(["--degrees", "2,2,2", "--src", "1", "--seed", "3", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["realized"] is True
        assert data["shortest_paths"]["source"] == 1
        assert data["eulerian"]["kind"] == "circuit"

    def test_non_graphical_still_succeeds(self, capsys) -> None:
        code = main(["--degrees", "3,3,1,1", "--src", "0", "--seed", "1"])
        assert code == 0
        assert "cannot be constructed" in capsys.readouterr().out

    def test_prompts_for_n_and_src(self, monkeypatch, capsys) -> None:
        _answers(monkeypatch, "5", "2")
        code = main(["--seed", "9"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Reproduce: degreegraph --n 5 --src 2 --seed 9" in out

    def test_prompt_rejects_non_integer(self, monkeypatch, capsys) -> None:
        _answers(monkeypatch, "five")
        assert main(["--seed", "1"]) == 1
        assert "expected an integer" in capsys.readouterr().err

    def test_prompt_eof(self, monkeypatch) -> None:
        def _eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert main(["--seed", "1"]) == 1

    def test_src_out_of_range(self, capsys) -> None:
        assert main(["--n", "3", "--src", "3", "--seed", "1"]) == 1
        assert "src" in capsys.readouterr().err

    def test_n_disagrees_with_degrees(self, capsys) -> None:
        assert main(["--degrees", "1,1", "--n", "3", "--src", "0"]) == 1
        assert "disagrees" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys) -> None:
        assert main(["--config", str(tmp_path / "nope.json")]) == 1
        assert "config file not found" in capsys.readouterr().err

    def test_invalid_config_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"graph": {"n": 4}, "bogus": 1}))
        assert main(["--config", str(path)]) == 1
        assert "Error" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys) -> None:
        config = ToolkitConfig(
            graph=GraphConfig(n=6), query=QueryConfig(src=4), seed=21
        )
        path = tmp_path / "config.json"
        path.write_text(config_to_json(config))
        code = main(["--config", str(path)])
        assert code == 0
        assert "--n 6 --src 4 --seed 21" in capsys.readouterr().out

    def test_figures_dir(self, tmp_path) -> None:
        out_dir = tmp_path / "figs"
        code = main([
            "--degrees", "3,3,2,2,2", "--src", "0", "--seed", "2",
            "--figures-dir", str(out_dir),
        ])
        assert code == 0
        assert (out_dir / "adjacency.png").exists()
        assert (out_dir / "distances.svg").exists()

    def test_bad_degree_list(self) -> None:
        with pytest.raises(SystemExit):
            main(["--degrees", "3,x,1"])


class TestResolveConfig:
    """Flag precedence over config file values."""

    def test_flags_override_config_file(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text(config_to_json(ToolkitConfig(graph=GraphConfig(n=6), seed=1)))
        args = build_parser().parse_args([
            "--config", str(path), "--n", "4", "--seed", "5",
            "--realization", "positional", "--representation", "sparse",
            "--weights", "2,9", "--euler-start", "3", "--mst-root", "2",
        ])
        config = resolve_config(args)
        assert config.graph.n == 4
        assert config.graph.realization == "positional"
        assert config.graph.representation == "sparse"
        assert (config.weights.low, config.weights.high) == (2, 9)
        assert config.query.euler_start == 3
        assert config.query.mst_root == 2
        assert config.seed == 5

    def test_degrees_set_n(self) -> None:
        args = build_parser().parse_args(["--degrees", "1,1,0", "--src", "2"])
        config = resolve_config(args)
        assert config.graph.n == 3
        assert config.query.src == 2

    def test_empty_graph_skips_src_prompt(self, monkeypatch) -> None:
        _answers(monkeypatch, "0")
        config = resolve_config(build_parser().parse_args([]))
        assert config.graph.n == 0
        assert config.query.src == 0

    def test_weights_flag_needs_two_values(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--weights", "3"])


def _replay(report):
    """Parse a report's reproduction command back into (config, degrees)."""
    from degreegraph.reporting import build_reproduction_command

    argv = shlex.split(build_reproduction_command(report))
    assert argv[0] == "degreegraph"
    args = build_parser().parse_args(argv[1:])
    return resolve_config(args), args.degrees


class TestReproductionRoundTrip:
    """The printed reproduction command rebuilds the original run."""

    def test_mst_root_from_config_file(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(
            {"graph": {"n": 6}, "query": {"src": 0, "mst_root": 3}, "seed": 11}
        ))
        original = resolve_config(build_parser().parse_args(["--config", str(path)]))
        report = run_pipeline(original)

        config, degrees = _replay(report)
        assert config == report.config
        assert config.query.mst_root == 3

        replay = run_pipeline(config, degrees=degrees)
        assert replay.degree_sequence == report.degree_sequence
        if report.realized:
            assert replay.spanning_tree.root == 3
            assert np.array_equal(
                replay.spanning_tree.parents, report.spanning_tree.parents
            )

    def test_all_options(self) -> None:
        original = ToolkitConfig(
            graph=GraphConfig(n=5, realization="positional", representation="sparse"),
            weights=WeightConfig(low=2, high=6),
            query=QueryConfig(src=4, mst_root=2, euler_start=1),
            seed=8,
        )
        report = run_pipeline(original)
        config, degrees = _replay(report)
        assert config == original
        assert degrees is None

    def test_explicit_degrees(self) -> None:
        original = ToolkitConfig(graph=GraphConfig(n=5), seed=3)
        report = run_pipeline(original, degrees=[3, 3, 2, 2, 2])
        config, degrees = _replay(report)
        assert config == original
        assert degrees == [3, 3, 2, 2, 2]
        replay = run_pipeline(config, degrees=degrees)
        assert replay.graph.edges() == report.graph.edges()

    def test_empty_explicit_sequence(self) -> None:
        original = ToolkitConfig(graph=GraphConfig(n=0), seed=2)
        report = run_pipeline(original, degrees=[])
        config, degrees = _replay(report)
        assert config == original
        replay = run_pipeline(config, degrees=degrees)
        assert replay.degree_sequence == []
        assert replay.realized

    def test_leading_negative_degree(self) -> None:
        original = ToolkitConfig(graph=GraphConfig(n=2), seed=2)
        report = run_pipeline(original, degrees=[-1, 1])
        config, degrees = _replay(report)
        assert config == original
        assert degrees == [-1, 1]

    def test_wall_clock_seed_is_pinned(self) -> None:
        report = run_pipeline(ToolkitConfig(graph=GraphConfig(n=4)))
        config, _ = _replay(report)
        assert config.seed == report.seed
        assert config == replace(report.config, seed=report.seed)
