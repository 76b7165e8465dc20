"""Helpers for values produced by YAML parsers."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return a copy of ``data`` with every key converted to a string.

    YAML 1.1 turns keys such as ``yes``, ``no``, ``on`` and ``off`` into
    Python booleans, and bare numbers into ints. Variable names must be
    strings, so booleans become "True"/"False" and other keys go through
    ``str()``.

    Raises:
        ValueError: If two distinct keys map to the same string, e.g. ``yes``
            (parsed as True) next to a quoted ``"True"``.

    Examples:
        >>> normalize_yaml_dict_keys({True: ['a'], 7: ['b'], 'sku': ['c']})
        {'True': ['a'], '7': ['b'], 'sku': ['c']}
    """
    normalized: Dict[str, V] = {}
    originals: Dict[str, Any] = {}
    for key, value in data.items():
        name = str(key)
        if name in originals:
            raise ValueError(
                f"Keys {originals[name]!r} and {key!r} both normalize to {name!r}"
            )
        originals[name] = key
        normalized[name] = value
    return normalized


def scalar_to_str(value: Any) -> str:
    """Render a YAML scalar the way it was spelled in the source.

    Booleans are lower-cased ("true"/"false") to match YAML spelling; ints,
    floats and strings go through ``str()``.

    Raises:
        TypeError: If ``value`` is not a str, int, float or bool.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"Expected a scalar value, got {type(value).__name__}")
