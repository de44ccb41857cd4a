"""Human-readable SQL reconstruction for debug logs.

The output inlines parameter values as SQL literals. It is meant for reading
only: it is never executed and is not guaranteed to be valid SQL.
"""

from __future__ import annotations

from typing import Any, List

from .params import BoundParams, Named, Positional, bind_params
from .placeholders import NAMED, POSITIONAL, tokenize
from .types import QueryParams

_MISSING = object()

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "\x00": "\\0",
}


def quote_string(value: str) -> str:
    """Wrap `value` in single quotes, backslash-escaping quotes, backslashes, and NUL."""

    escaped = "".join(_ESCAPES.get(ch, ch) for ch in value)
    return f"'{escaped}'"


def render_literal(value: Any) -> str:
    """Render one parameter value as SQL literal text."""

    if value is None:
        return "NULL"
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return ",".join(_render_element(item) for item in value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"X'{bytes(value).hex().upper()}'"
    return quote_string(str(value))


def _render_element(item: Any) -> str:
    # Sequence members are joined unquoted; NULL and booleans keep their keywords.
    if isinstance(item, str):
        return item
    return render_literal(item)


def render_sql(
    sql: str, params: QueryParams | BoundParams = None, backslash_escapes: bool = False
) -> str:
    """Return `sql` with placeholders replaced by rendered parameter values.

    Positional values fill `?` placeholders left to right; surplus
    placeholders stay as `?`. Named values replace every `:name` occurrence
    whose name matches exactly; unknown names stay as written.

    `backslash_escapes` selects MySQL-style string literals when locating
    placeholders.
    """

    bound: BoundParams = bind_params(params)
    if not len(bound):
        return sql

    if isinstance(bound, Named):
        return _render_named(sql, bound, backslash_escapes)
    return _render_positional(sql, bound, backslash_escapes)


def _render_positional(sql: str, bound: Positional, backslash_escapes: bool) -> str:
    remaining = iter(bound.values)
    parts: List[str] = []
    for token in tokenize(sql, backslash_escapes):
        if token.kind == POSITIONAL:
            value = next(remaining, _MISSING)
            parts.append(token.text if value is _MISSING else render_literal(value))
        else:
            parts.append(token.text)
    return "".join(parts)


def _render_named(sql: str, bound: Named, backslash_escapes: bool) -> str:
    rendered = {name: render_literal(value) for name, value in bound.values.items()}
    parts: List[str] = []
    for token in tokenize(sql, backslash_escapes):
        if token.kind == NAMED and token.name in rendered:
            parts.append(rendered[token.name])
        else:
            parts.append(token.text)
    return "".join(parts)
