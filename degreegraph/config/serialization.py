"""JSON serialization and deserialization for toolkit configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from degreegraph.config.experiment import ToolkitConfig

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: ToolkitConfig) -> str:
    """Serialize a ToolkitConfig to a JSON string (sorted keys, 2-space indent)."""
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> ToolkitConfig:
    """Deserialize a JSON string to a ToolkitConfig.

    Uses dacite with strict=True to reject unknown keys and cast=[tuple] to
    turn JSON arrays back into tuples. Missing sections fall back to their
    defaults, so a file holding only {"graph": {"n": 5}} is valid.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: ToolkitConfig) -> dict[str, Any]:
    """Convert a ToolkitConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> ToolkitConfig:
    """Reconstruct a ToolkitConfig from a plain dictionary."""
    return from_dict(data_class=ToolkitConfig, data=d, config=_DACITE_CONFIG)
