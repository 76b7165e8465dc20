"""Build parametrization tables from parsed flow configuration.

The caller parses the flow file (YAML or otherwise) and hands over the
``data`` section as plain Python objects. This module normalizes keys that
YAML parsers mangle, renders scalar values as strings, validates the shape
against the packaged JSON schema, and returns a `ParametrizationTable`.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, List, Mapping, Optional

import jsonschema

from flowparam.config import DEFAULT_CONFIG, ParametrizationConfig
from flowparam.errors import InvalidArgumentError
from flowparam.logging import get_logger
from flowparam.model.parametrization import ParametrizationTable
from flowparam.utils.yaml_utils import normalize_yaml_dict_keys, scalar_to_str

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def _data_schema() -> Dict[str, Any]:
    """Load the packaged schema for the ``data`` section."""
    try:
        with (
            resources.files("flowparam.schemas")
            .joinpath("data.json")
            .open("r", encoding="utf-8")
        ) as f:
            return json.load(f)
    except (OSError, ValueError) as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged schema 'flowparam/schemas/data.json'."
        ) from exc


def _render_values(
    name: str, values: List[Any], config: ParametrizationConfig
) -> List[Any]:
    rendered: List[Any] = []
    for position, value in enumerate(values):
        if isinstance(value, str) or not config.coerce_scalars:
            # Non-strings are left for the schema check to reject
            rendered.append(value)
            continue
        try:
            rendered.append(scalar_to_str(value))
        except TypeError as exc:
            raise InvalidArgumentError(
                f"Value #{position} of '{name}' must be a scalar, "
                f"got {type(value).__name__}"
            ) from exc
    return rendered


def table_from_config(
    section: Optional[Mapping[Any, Any]],
    config: Optional[ParametrizationConfig] = None,
) -> ParametrizationTable:
    """Build a `ParametrizationTable` from a parsed ``data`` section.

    Args:
        section: Mapping of variable name to list of values, as produced by a
            YAML or JSON parser. None is treated as an empty section.
        config: Loader settings. Defaults to `DEFAULT_CONFIG`.

    Returns:
        The table. Unless ``config.strict`` is set, a table with uneven list
        lengths is returned as-is and a warning is logged.

    Raises:
        InvalidArgumentError: If the section is not a mapping of names to
            lists of scalars, if two keys normalize to the same name, if it
            would produce more iterations than ``config.max_iterations``, or,
            in strict mode, if list lengths differ.
    """
    cfg = config or DEFAULT_CONFIG
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise InvalidArgumentError(
            "The data section must be a mapping of variable name to list of values, "
            f"got {type(section).__name__}"
        )

    try:
        named = normalize_yaml_dict_keys(dict(section))
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Duplicate variable name in data section: {exc}"
        ) from exc

    data: Dict[str, List[Any]] = {}
    for name, values in named.items():
        if not isinstance(values, (list, tuple)):
            raise InvalidArgumentError(
                f"Values for '{name}' must be a list, got {type(values).__name__}"
            )
        data[name] = _render_values(name, list(values), cfg)

    try:
        jsonschema.validate(data, _data_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise InvalidArgumentError(
            f"Invalid data section at {location}: {exc.message}"
        ) from exc

    table = ParametrizationTable(data)
    iterations = table.iteration_count()
    if cfg.exceeds_limit(iterations):
        raise InvalidArgumentError(
            f"Data section would drive {iterations} iterations "
            f"(limit: {cfg.max_iterations})."
        )

    if cfg.strict:
        table.validate_or_throw()
    elif not table.is_valid():
        logger.warning(
            "Data lists have different lengths; shorter lists bind empty strings "
            "in later iterations: %s",
            table.lengths_by_size(),
        )

    logger.debug(
        "Loaded data section: %d variable(s), %d iteration(s)",
        len(data),
        iterations,
    )
    return table
