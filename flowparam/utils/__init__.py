"""Utility helpers used across flowparam.

Small, self-contained helpers that do not depend on project internals.
"""

from flowparam.utils.yaml_utils import normalize_yaml_dict_keys, scalar_to_str

__all__ = [
    "normalize_yaml_dict_keys",
    "scalar_to_str",
]
