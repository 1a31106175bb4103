"""Toolkit configuration system with frozen, hashable, serializable dataclasses."""

from degreegraph.config.experiment import (
    REALIZATION_MODES,
    REPRESENTATIONS,
    GraphConfig,
    QueryConfig,
    ToolkitConfig,
    WeightConfig,
)
from degreegraph.config.defaults import DEFAULT_CONFIG
from degreegraph.config.hashing import config_hash, graph_config_hash, full_config_hash
from degreegraph.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "ToolkitConfig",
    "GraphConfig",
    "WeightConfig",
    "QueryConfig",
    "REALIZATION_MODES",
    "REPRESENTATIONS",
    "DEFAULT_CONFIG",
    "config_hash",
    "graph_config_hash",
    "full_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
