"""Shared typing constructs for flowparam.

Defines the binding-set alias and the `Present | Absent` result returned for
per-iteration lookups. Contains no table logic.
"""

from flowparam.types.binding import ABSENT, Absent, BindingResult, BindingSet, Present

__all__ = [
    "BindingSet",
    "BindingResult",
    "Present",
    "Absent",
    "ABSENT",
]
