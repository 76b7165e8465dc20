"""flowparam: lock-step variable tables for repeated flow execution.

A flow definition can carry a ``data`` section mapping template variables to
lists of values. flowparam turns that section into a `ParametrizationTable`
and hands out one binding set per iteration for an executor to substitute
into ``${name}`` placeholders.

Primary API:
    ParametrizationTable - Immutable name -> values table
    table_from_config() - Build a table from a parsed ``data`` section
    Present, Absent, ABSENT - Per-iteration lookup result
    InvalidArgumentError - Raised for malformed or uneven data

Example:
    from flowparam import ParametrizationTable

    table = ParametrizationTable(
        {"productName": ["Phone", "Laptop"], "category": ["Electronics", "Electronics"]}
    )
    table.validate_or_throw()
    for bindings in table.iter_data_sets():
        run_flow(bindings)
"""

from __future__ import annotations

from flowparam import logging
from flowparam.config import DEFAULT_CONFIG, ParametrizationConfig
from flowparam.dsl.loader import table_from_config
from flowparam.errors import FlowParamError, InvalidArgumentError
from flowparam.model.parametrization import ParametrizationTable
from flowparam.types.binding import ABSENT, Absent, BindingResult, BindingSet, Present

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "ParametrizationTable",
    # Input boundary
    "table_from_config",
    "ParametrizationConfig",
    "DEFAULT_CONFIG",
    # Types
    "BindingSet",
    "BindingResult",
    "Present",
    "Absent",
    "ABSENT",
    # Errors
    "FlowParamError",
    "InvalidArgumentError",
    # Utilities
    "logging",
]
