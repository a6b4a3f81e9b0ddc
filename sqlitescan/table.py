"""Table definitions discovered from a SQLite database."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .column import (
    ColumnInfo,
    ForeignKeysInfo,
    IndexedColumns,
    IndexInfo,
    column_info_from_row,
    foreign_key_from_row,
    indexed_columns_from_row,
    partial_index_from_row,
)
from .executor import SQLITE_MASTER, Executor, SqliteSchema, quote_identifier


def _quote_literal(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


def _pragma(name: str, table: str) -> str:
    return f"PRAGMA {name}({_quote_literal(table)})"


@dataclass
class TableDef:
    """A table with its columns, foreign keys and autoincrement flag."""

    name: str = ""
    foreign_keys: list[ForeignKeysInfo] = field(default_factory=list)
    columns: list[ColumnInfo] = field(default_factory=list)
    auto_increment: bool = False

    def pk_is_autoincrement(self, executor: Executor) -> TableDef:
        """Set ``auto_increment`` when the table's SQL declares AUTOINCREMENT."""
        sql = (
            f"SELECT 1 FROM {quote_identifier(SQLITE_MASTER)} "
            f"WHERE {quote_identifier(SqliteSchema.TYPE.value)} = ? "
            f"AND {quote_identifier(SqliteSchema.NAME.value)} = ? "
            f"AND {quote_identifier(SqliteSchema.SQL.value)} LIKE ?"
        )
        if executor.fetch_all(sql, ("table", self.name, "%AUTOINCREMENT%")):
            self.auto_increment = True
        return self

    def get_indexes(self, executor: Executor) -> list[IndexInfo]:
        """Return every index of the table except the one backing the primary key."""
        rows = executor.fetch_all_raw(_pragma("index_list", self.name))
        partial_indexes = [
            info
            for info in map(partial_index_from_row, rows)
            if info.origin != "pk"
        ]
        indexes = []
        for partial in partial_indexes:
            indexed = self.get_single_indexinfo(executor, partial.name)
            indexes.append(
                IndexInfo(
                    index_type=indexed.index_type,
                    index_name=indexed.name,
                    table_name=indexed.table,
                    unique=partial.unique,
                    origin=partial.origin,
                    partial=partial.partial,
                    columns=indexed.indexed_columns,
                )
            )
        return indexes

    def get_foreign_keys(self, executor: Executor) -> TableDef:
        """Append the table's foreign keys to ``foreign_keys``."""
        rows = executor.fetch_all_raw(_pragma("foreign_key_list", self.name))
        self.foreign_keys.extend(foreign_key_from_row(row) for row in rows)
        return self

    def get_column_info(self, executor: Executor) -> TableDef:
        """Append the table's columns to ``columns``."""
        rows = executor.fetch_all_raw(_pragma("table_info", self.name))
        self.columns.extend(column_info_from_row(row) for row in rows)
        return self

    def get_single_indexinfo(self, executor: Executor, index_name: str) -> IndexedColumns:
        """Read the ``sqlite_master`` entry of an index and the columns it covers."""
        sql = (
            f"SELECT * FROM {quote_identifier(SQLITE_MASTER)} "
            f"WHERE {quote_identifier(SqliteSchema.NAME.value)} = ?"
        )
        return indexed_columns_from_row(executor.fetch_one(sql, (index_name,)))

    def write(self) -> str:
        """Return a CREATE TABLE statement for this table."""
        definitions = []
        primary_keys = []

        for column in self.columns:
            pieces = [quote_identifier(column.name), column.column_type.write_type()]
            if column.not_null:
                pieces.append("NOT NULL")
            if self.auto_increment and column.primary_key:
                pieces.append("PRIMARY KEY AUTOINCREMENT")
            elif column.primary_key:
                primary_keys.append(column.name)
            default = column.default_value.sql()
            if default is not None:
                pieces.append(f"DEFAULT {default}")
            definitions.append(" ".join(pieces))

        if primary_keys:
            keys = ", ".join(quote_identifier(key) for key in primary_keys)
            definitions.append(f"PRIMARY KEY ({keys})")

        for foreign_key in self.foreign_keys:
            reference = quote_identifier(foreign_key.table)
            if foreign_key.to_column is not None:
                reference += f" ({quote_identifier(foreign_key.to_column)})"
            definitions.append(
                f"FOREIGN KEY ({quote_identifier(foreign_key.from_column)}) "
                f"REFERENCES {reference} "
                f"ON DELETE {foreign_key.on_delete.value} "
                f"ON UPDATE {foreign_key.on_update.value}"
            )

        return f"CREATE TABLE {quote_identifier(self.name)} ( {', '.join(definitions)} )"


def table_from_row(row: Sequence[Any]) -> TableDef:
    """Build an empty :class:`TableDef` named by the first field of ``row``."""
    return TableDef(name=row[0])


@dataclass
class Schema:
    """Every table discovered in a database."""

    tables: list[TableDef] = field(default_factory=list)