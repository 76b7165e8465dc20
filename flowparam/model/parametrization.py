"""Parametrization table for repeated flow execution.

A `ParametrizationTable` maps variable names to lists of values. The lists
are read in lock-step: iteration ``i`` binds every variable to the ``i``-th
entry of its list. Example flow configuration:

    data:
      productName: ["Phone", "Laptop", "Shirt"]
      category: ["Electronics", "Electronics", "Apparel"]

drives three iterations. Lists are expected to share a length, but a table
can hold uneven lists; `is_valid` and `validate_or_throw` check this on
demand, and lookups pad exhausted lists with an empty string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

from flowparam.errors import InvalidArgumentError
from flowparam.logging import get_logger
from flowparam.types.binding import ABSENT, BindingResult, BindingSet, Present

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParametrizationTable:
    """Named value lists iterated in lock-step.

    The table is immutable: `data` is copied into a read-only mapping of
    tuples at construction, so later changes to the caller's dict or lists
    are not observed.

    Attributes:
        data: Mapping of variable name to the ordered values it takes, one
            per iteration.

    Raises:
        InvalidArgumentError: If a value is not a list or tuple.
    """

    data: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen: Dict[str, Tuple[str, ...]] = {}
        for name, values in self.data.items():
            # A bare string would otherwise be split into characters
            if not isinstance(values, (list, tuple)):
                raise InvalidArgumentError(
                    f"Values for '{name}' must be a list, got {type(values).__name__}"
                )
            frozen[name] = tuple(values)
        object.__setattr__(self, "data", MappingProxyType(frozen))

    def __hash__(self) -> int:
        return hash(frozenset(self.data.items()))

    def is_empty(self) -> bool:
        """Check if no variables are defined."""
        return not self.data

    def variable_names(self) -> List[str]:
        """Return variable names in definition order."""
        return list(self.data)

    def iteration_count(self) -> int:
        """Return the number of iterations the table drives.

        This is the length of the longest list, or 0 for an empty table.
        """
        return max((len(values) for values in self.data.values()), default=0)

    def data_set_for_iteration(self, index: int) -> BindingResult:
        """Return the binding set for one iteration.

        Every variable appears in the result. A variable whose list is
        shorter than ``index + 1`` is bound to an empty string.

        Args:
            index: Zero-based iteration index.

        Returns:
            `Present` with the bindings, or `ABSENT` when ``index`` is
            negative or not below `iteration_count`.
        """
        if index < 0 or index >= self.iteration_count():
            return ABSENT

        bindings: Dict[str, str] = {
            name: values[index] if index < len(values) else ""
            for name, values in self.data.items()
        }
        return Present(bindings)

    def iter_data_sets(self) -> Iterator[BindingSet]:
        """Yield the binding set of each iteration, in order."""
        index = 0
        while result := self.data_set_for_iteration(index):
            yield result.unwrap()
            index += 1

    def lengths_by_size(self) -> Dict[int, List[str]]:
        """Group variable names by the length of their value list.

        Returns:
            Mapping of list length to variable names, ordered by length.
            Names within a group keep definition order.
        """
        groups: Dict[int, List[str]] = {}
        for name, values in self.data.items():
            groups.setdefault(len(values), []).append(name)
        return {size: groups[size] for size in sorted(groups)}

    def is_valid(self) -> bool:
        """Return True if the table is empty or all lists share one length."""
        return len({len(values) for values in self.data.values()}) <= 1

    def validate_or_throw(self) -> None:
        """Check that all lists share one length.

        Raises:
            InvalidArgumentError: If list lengths differ. The message lists
                each distinct length with the variables that have it.
        """
        if self.is_valid():
            return

        groups = self.lengths_by_size()
        found = "; ".join(
            f"length {size}: [{', '.join(names)}]" for size, names in groups.items()
        )
        logger.debug("Parametrization data has uneven list lengths: %s", found)
        raise InvalidArgumentError(
            f"All data lists must have the same length. Found: {found}",
            lengths_by_size=groups,
        )

    def to_dict(self) -> Dict[str, List[str]]:
        """Return a plain, JSON-friendly copy of the table data."""
        return {name: list(values) for name, values in self.data.items()}
