"""Stable short hashes identifying a toolkit run and its graph family.

The CLI logs both at startup so two runs can be matched without diffing
their configs.
"""

import hashlib
import json
from collections.abc import Iterable
from dataclasses import asdict
from typing import Any

from degreegraph.config.experiment import ToolkitConfig

HASH_LENGTH = 16

# Free-text labels that never change what a run computes.
_LABEL_FIELDS = ("description", "tags")


def _canonical_bytes(data: dict[str, Any]) -> bytes:
    return json.dumps(data, sort_keys=True, separators=(",", ":")).encode("ascii")


def config_hash(config: Any, exclude_fields: Iterable[str] = ()) -> str:
    """SHA-256 over the canonical JSON of a config dataclass.

    Args:
        config: ToolkitConfig or any of its sub-configs.
        exclude_fields: Top-level field names left out of the digest.

    Returns:
        First HASH_LENGTH hex characters of the digest.
    """
    data = asdict(config)
    for name in exclude_fields:
        data.pop(name, None)
    return hashlib.sha256(_canonical_bytes(data)).hexdigest()[:HASH_LENGTH]


def graph_config_hash(config: ToolkitConfig) -> str:
    """Hash of the graph section alone (n and the realization settings)."""
    return config_hash(config.graph)


def full_config_hash(config: ToolkitConfig) -> str:
    """Hash of everything that affects results, labels excluded."""
    return config_hash(config, exclude_fields=_LABEL_FIELDS)
