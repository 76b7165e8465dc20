"""Exception types raised by flowparam."""

from __future__ import annotations

from typing import Dict, List, Optional


class FlowParamError(Exception):
    """Base class for flowparam errors."""


class InvalidArgumentError(FlowParamError, ValueError):
    """Raised when parametrization data is structurally invalid.

    Attributes:
        lengths_by_size: Keys grouped by list length, when the failure is a
            length mismatch. Empty for other kinds of invalid input.
    """

    def __init__(
        self, message: str, lengths_by_size: Optional[Dict[int, List[str]]] = None
    ) -> None:
        super().__init__(message)
        self.lengths_by_size: Dict[int, List[str]] = dict(lengths_by_size or {})
