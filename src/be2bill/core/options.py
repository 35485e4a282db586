"""
Parameter maps and their flat representation.

Every Be2bill request is a mapping from field names to strings, integers,
amounts or one level of nested mapping (``AMOUNTS`` schedules, grouped HTML
attributes). Both the signature base string and the form-encoded wire body
are produced from the same canonical walk implemented here: keys are visited
in lexicographic order and nested keys are composed as ``parent[child]``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from .amount import FragmentedAmount, SingleAmount
from .constants import PARAM_OPERATION_TYPE

__all__ = [
    "Options",
    "encode_request",
    "flatten",
    "is_nested",
    "iter_leaves",
    "merge_options",
    "nested_items",
    "stringify",
]

Value = Union[str, int, bool, SingleAmount, FragmentedAmount, Mapping[str, Any]]
Options = Mapping[str, Value]


def is_nested(value: Any) -> bool:
    """Return True for values that flatten into ``key[subkey]`` entries."""
    return isinstance(value, (Mapping, FragmentedAmount))


def nested_items(value: Any) -> Mapping[str, Any]:
    if isinstance(value, FragmentedAmount):
        return value.schedule
    return value


def stringify(value: Any) -> str:
    """
    Render a scalar parameter value the way the API expects it.

    Floats, ``None`` and containers are rejected instead of being guessed at,
    since the rendered text is part of the signed payload.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, SingleAmount):
        return str(value.value)
    raise TypeError(
        f"Unsupported parameter value {value!r} of type {type(value).__name__}"
    )


def iter_leaves(
    params: Mapping[str, Any],
    prefix: Optional[str] = None,
) -> Iterator[Tuple[str, str]]:
    """
    Yield ``(flat_key, value)`` pairs in canonical order.

    Keys are sorted at each level, so all entries of a nested mapping are
    emitted together at the position of their parent key.
    """
    for key in sorted(params):
        name = key if prefix is None else f"{prefix}[{key}]"
        value = params[key]
        if is_nested(value):
            yield from iter_leaves(nested_items(value), name)
        else:
            yield name, stringify(value)


def flatten(params: Mapping[str, Any]) -> Dict[str, str]:
    """Return a flat mapping of bracketed key names to string values."""
    return dict(iter_leaves(params))


def merge_options(options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Return a shallow, mutable copy of caller-supplied options."""
    return dict(options or {})


def encode_request(params: Mapping[str, Any]) -> Dict[str, str]:
    """
    Build the form-encoded body of a DirectLink call.

    The parameter map is nested under ``params`` and the operation type is
    repeated as ``method``::

        method=payment&params[AMOUNT]=100&params[AMOUNTS][2015-01-01]=50...
    """
    return flatten({"method": params[PARAM_OPERATION_TYPE], "params": params})
