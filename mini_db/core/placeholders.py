"""Single-pass SQL placeholder tokenizer.

Splits SQL text into plain text and placeholder tokens. Quoted strings,
quoted identifiers, comments, and `::` casts are kept as text, so a `?` or
`:name` inside them is never treated as a parameter.

Standard SQL only escapes a quote by doubling it; a backslash inside a
literal is an ordinary character (`'C:\\'` is a complete string). MySQL also
treats backslash as an escape, which callers request with
`backslash_escapes=True`. PostgreSQL `E'...'` strings always honor
backslash escapes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple

TEXT = "text"
POSITIONAL = "positional"
NAMED = "named"

_COMMON = r"""
    (?P<bquote>`(?:[^`]|``)*`) |
    (?P<line_comment>--[^\r\n]*) |
    (?P<block_comment>/\*[\s\S]*?\*/) |
    (?P<cast>::) |
    (?P<named>:(?P<name>[A-Za-z_][A-Za-z0-9_]*)) |
    (?P<qmark>\?)
"""

_STANDARD_REGEX = re.compile(
    r"""
    (?P<estring>(?<![A-Za-z0-9_])[Ee]'(?:[^'\\]|\\.|'')*') |
    (?P<squote>'(?:[^']|'')*') |
    (?P<dquote>"(?:[^"]|"")*") |
    """
    + _COMMON,
    re.VERBOSE,
)

_BACKSLASH_REGEX = re.compile(
    r"""
    (?P<squote>'(?:[^'\\]|\\.|'')*') |
    (?P<dquote>"(?:[^"\\]|\\.|"")*") |
    """
    + _COMMON,
    re.VERBOSE,
)


@dataclass(frozen=True)
class Token:
    """One piece of SQL text.

    Attributes:
        text: Exact source text of the token.
        kind: `TEXT`, `POSITIONAL` (`?`), or `NAMED` (`:name`).
        name: Placeholder name without the colon, for `NAMED` tokens.
    """

    text: str
    kind: str = TEXT
    name: Optional[str] = None

    @property
    def is_placeholder(self) -> bool:
        return self.kind != TEXT


@lru_cache(maxsize=512)
def tokenize(sql: str, backslash_escapes: bool = False) -> Tuple[Token, ...]:
    """Split `sql` into text and placeholder tokens, left to right.

    Joining every token's `text` gives back `sql` unchanged.
    """

    tokens: List[Token] = []
    buffer: List[str] = []
    pos = 0

    regex = _BACKSLASH_REGEX if backslash_escapes else _STANDARD_REGEX
    for match in regex.finditer(sql):
        buffer.append(sql[pos : match.start()])
        pos = match.end()

        if match.group("qmark"):
            _flush(buffer, tokens)
            tokens.append(Token(match.group(0), POSITIONAL))
        elif match.group("named"):
            _flush(buffer, tokens)
            tokens.append(Token(match.group(0), NAMED, match.group("name")))
        else:
            buffer.append(match.group(0))

    buffer.append(sql[pos:])
    _flush(buffer, tokens)
    return tuple(tokens)


def _flush(buffer: List[str], tokens: List[Token]) -> None:
    text = "".join(buffer)
    buffer.clear()
    if text:
        tokens.append(Token(text))
