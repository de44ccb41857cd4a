"""Concrete SQL dialect implementations for DB-API adapters."""

from __future__ import annotations

from typing import Any, List, Optional

from ...core.params import BoundParams, Named
from ...core.placeholders import NAMED, POSITIONAL, tokenize


class Dialect:
    """Base dialect that defines identifier quoting and placeholder behavior.

    Application SQL is always written with `?` (positional) or `:name`
    (named) placeholders. `compile` rewrites them into the driver's own
    paramstyle.
    """

    name: str = "generic"
    positional_style: str = "qmark"
    named_style: str = "named"
    quote_char: str = '"'
    backslash_escapes: bool = False

    def q(self, ident: str) -> str:
        """Quote SQL identifier."""

        return f"{self.quote_char}{ident}{self.quote_char}"

    def placeholder(self, key: Optional[str] = None) -> str:
        """Return parameter placeholder for current param style.

        Args:
            key: Parameter name, or `None` for a positional parameter.
        """

        style = self.positional_style if key is None else self.named_style
        if style == "qmark":
            return "?"
        if style == "format":
            return "%s"
        if style == "named":
            return f":{key}"
        if style == "pyformat":
            return f"%({key})s"
        raise ValueError(f"Unsupported paramstyle: {style}")

    def _escapes_percent(self, params: BoundParams) -> bool:
        style = self.named_style if isinstance(params, Named) else self.positional_style
        return style in {"format", "pyformat"}

    def compile(self, sql: str, params: BoundParams) -> str:
        """Rewrite `?`/`:name` placeholders into the driver paramstyle."""

        if not len(params):
            return sql
        if self.positional_style == "qmark" and self.named_style == "named":
            return sql

        escape_percent = self._escapes_percent(params)
        parts: List[str] = []
        for token in tokenize(sql, self.backslash_escapes):
            if token.kind == POSITIONAL:
                parts.append(self.placeholder())
            elif token.kind == NAMED:
                parts.append(self.placeholder(token.name))
            elif escape_percent:
                parts.append(token.text.replace("%", "%%"))
            else:
                parts.append(token.text)
        return "".join(parts)

    def get_lastrowid(self, cursor: Any) -> Optional[int]:
        """Extract `lastrowid` from DB-API cursor when available."""

        return getattr(cursor, "lastrowid", None)

    def sequence_value_sql(self, name: str) -> Optional[str]:
        """Return SQL reading the current value of sequence `name`, if supported."""

        return None


class SQLiteDialect(Dialect):
    """SQLite dialect (`?` and `:name` parameters are native)."""

    name = "sqlite"
    positional_style = "qmark"
    named_style = "named"
    quote_char = '"'


class PostgresDialect(Dialect):
    """PostgreSQL dialect (`%s` / `%(name)s` parameters, sequences)."""

    name = "postgres"
    positional_style = "format"
    named_style = "pyformat"
    quote_char = '"'

    def sequence_value_sql(self, name: str) -> Optional[str]:
        return "SELECT currval(?)"


class MySQLDialect(Dialect):
    """MySQL dialect (`%s` / `%(name)s` parameters, backtick identifiers).

    String literals use backslash escapes.
    """

    name = "mysql"
    positional_style = "format"
    named_style = "pyformat"
    quote_char = "`"
    backslash_escapes = True
