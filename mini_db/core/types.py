"""Shared core type aliases used across contracts, executor, and ports."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Union

Scalar = Union[None, int, float, str, bytes, bool]

NamedParams = Mapping[str, Any]
PositionalParams = Sequence[Any]
QueryParams = Union[NamedParams, PositionalParams, Scalar]

Row = Dict[str, Any]
Rows = List[Row]
KeyedRows = Dict[Any, Row]
