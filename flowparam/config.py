"""Configuration for building parametrization tables from flow configuration."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ParametrizationConfig:
    """Tunables for `flowparam.dsl.loader.table_from_config`."""

    # Convert int/float/bool list items to strings instead of rejecting them
    coerce_scalars: bool = True

    # Require equal-length lists at load time
    strict: bool = False

    # Upper bound on iterations a single data section may produce; None disables
    max_iterations: Optional[int] = 10_000

    def exceeds_limit(self, iteration_count: int) -> bool:
        """Return True when iteration_count is above max_iterations."""
        return self.max_iterations is not None and iteration_count > self.max_iterations


# Global configuration instance
DEFAULT_CONFIG = ParametrizationConfig()
