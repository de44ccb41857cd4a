"""Parameter collection classification.

Callers may pass parameters as a bare scalar, a list/tuple, or a mapping.
`bind_params` decides the shape once, at the API boundary, and returns a
tagged `Positional` or `Named` value. Everything downstream (database
adapter, dialect compilation, debug rendering) dispatches on that tag and
never re-inspects the original collection.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from .types import QueryParams


@dataclass(frozen=True)
class Positional:
    """Values bound to `?` placeholders in sequence order."""

    values: Tuple[Any, ...] = ()

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Named:
    """Values bound to `:name` placeholders by name.

    Keys are stored without a leading colon.
    """

    values: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.values)


BoundParams = Union[Positional, Named]


def bind_params(params: QueryParams | BoundParams = None) -> BoundParams:
    """Classify a raw parameter collection as positional or named.

    Args:
        params: `None`, a bare scalar, a list/tuple, a mapping, or an
            already classified `Positional`/`Named`.

    Returns:
        `Positional` for sequences, scalars, empty collections and mappings
        keyed exactly `0..n-1`; `Named` for mappings keyed by strings.

    Raises:
        ValueError: Mapping keys are neither a `0..n-1` run nor all strings.
    """

    if isinstance(params, (Positional, Named)):
        return params
    if params is None:
        return Positional()
    if isinstance(params, (list, tuple)):
        return Positional(tuple(params))
    if isinstance(params, Mapping):
        return _bind_mapping(params)
    return Positional((params,))


def _bind_mapping(params: Mapping[Any, Any]) -> BoundParams:
    if not params:
        return Positional()
    if _is_list(params):
        return Positional(tuple(params.values()))
    if all(isinstance(key, str) for key in params):
        return Named({key[1:] if key.startswith(":") else key: value for key, value in params.items()})
    raise ValueError(
        "Parameter mapping must be keyed 0..n-1 in order or by names only; "
        f"got keys {list(params)!r}."
    )


def _is_list(params: Mapping[Any, Any]) -> bool:
    # bool is an int subclass; {False: x} is not a list.
    return all(
        type(key) is int and key == expected for expected, key in enumerate(params)
    )
