"""Result type for per-iteration variable bindings.

`ParametrizationTable.data_set_for_iteration` returns either `Present` with
the binding set for that iteration or the `ABSENT` singleton once the
iterations are exhausted. Callers branch on `is_present` (or truthiness, or
a `match` statement) rather than on None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, TypeVar, Union

#: Mapping from variable name to the single value bound for one iteration.
BindingSet = Mapping[str, str]

T = TypeVar("T")


@dataclass(frozen=True)
class Present:
    """Binding set for an iteration inside the table's range.

    Attributes:
        bindings: Variable name to value, one entry per table key.
    """

    bindings: BindingSet

    def __hash__(self) -> int:
        return hash(frozenset(self.bindings.items()))

    @property
    def is_present(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True

    def unwrap(self) -> BindingSet:
        return self.bindings

    def unwrap_or(self, default: T) -> BindingSet | T:
        return self.bindings


@dataclass(frozen=True)
class Absent:
    """Marker for an iteration index past the end of the table."""

    @property
    def is_present(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> BindingSet:
        """Raise, since there is nothing to unwrap.

        Raises:
            LookupError: Always.
        """
        raise LookupError("No binding set: iteration index is out of range")

    def unwrap_or(self, default: T) -> BindingSet | T:
        return default


#: Shared instance returned for every out-of-range lookup.
ABSENT = Absent()

BindingResult = Union[Present, Absent]
