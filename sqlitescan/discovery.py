"""Discovery of tables and indexes in a SQLite database."""

from __future__ import annotations

import sqlite3

from .column import IndexInfo
from .executor import SQLITE_MASTER, Executor, SqliteSchema, quote_identifier
from .table import Schema, TableDef, table_from_row

_TABLES_QUERY = (
    f"SELECT {quote_identifier(SqliteSchema.NAME.value)} "
    f"FROM {quote_identifier(SQLITE_MASTER)} "
    f"WHERE {quote_identifier(SqliteSchema.TYPE.value)} = ? "
    f"AND {quote_identifier(SqliteSchema.NAME.value)} <> ?"
)
_TABLES_PARAMS = ("table", "sqlite_sequence")


class SchemaDiscovery:
    """Reads the schema of the database behind a :class:`sqlite3.Connection`."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.executor = Executor(connection)

    def _tables(self) -> list[TableDef]:
        rows = self.executor.fetch_all(_TABLES_QUERY, _TABLES_PARAMS)
        return [table_from_row(row) for row in rows]

    def discover(self) -> Schema:
        """Return every table with its columns, foreign keys and autoincrement flag."""
        tables = self._tables()
        for table in tables:
            table.pk_is_autoincrement(self.executor)
            table.get_foreign_keys(self.executor)
            table.get_column_info(self.executor)
        return Schema(tables=tables)

    def discover_indexes(self) -> list[IndexInfo]:
        """Return the indexes of every table, leaving out primary-key indexes."""
        return [
            index
            for table in self._tables()
            for index in table.get_indexes(self.executor)
        ]