"""Data model package.

Defines `ParametrizationTable`, the lock-step variable table that drives
repeated flow execution.
"""

from flowparam.model.parametrization import ParametrizationTable

__all__ = [
    "ParametrizationTable",
]
