"""Default configuration: the single source of truth for toolkit parameters."""

from degreegraph.config.experiment import ToolkitConfig

# n=8, weights in [1, 10], src=0, Prim rooted at 0, wall-clock seed.
DEFAULT_CONFIG = ToolkitConfig()
