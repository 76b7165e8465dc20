"""Input boundary for flow configuration.

Turn the parsed ``data`` section of a flow definition into a
`flowparam.model.parametrization.ParametrizationTable` with
`flowparam.dsl.loader.table_from_config`.
"""

from flowparam.dsl.loader import table_from_config

__all__ = [
    "table_from_config",
]
