"""Runs queries against a SQLite connection and returns plain row tuples."""

from __future__ import annotations

import enum
import logging
import sqlite3
from collections.abc import Iterable
from typing import Any

from .errors import DatabaseError

_log = logging.getLogger(__name__)

#: The catalogue table that describes every object in a SQLite database.
SQLITE_MASTER = "sqlite_master"


class SqliteSchema(str, enum.Enum):
    """Columns of :data:`SQLITE_MASTER`."""

    TYPE = "type"
    NAME = "name"
    TBL_NAME = "tbl_name"
    ROOT_PAGE = "rootpage"
    SQL = "sql"


def quote_identifier(name: str) -> str:
    """Quote an identifier for use in SQLite statements."""
    return '"' + name.replace('"', '""') + '"'


class Executor:
    """Executes statements on a :class:`sqlite3.Connection`."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def _execute(self, sql: str, params: Iterable[Any]) -> sqlite3.Cursor:
        try:
            return self.connection.execute(sql, tuple(params))
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc

    def fetch_all(self, sql: str, params: Iterable[Any] = ()) -> list[tuple]:
        """Run a parameterised query and return every row."""
        params = tuple(params)
        _log.debug("%s, %r", sql, params)
        cursor = self._execute(sql, params)
        try:
            return [tuple(row) for row in cursor.fetchall()]
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc

    def fetch_one(self, sql: str, params: Iterable[Any] = ()) -> tuple:
        """Run a parameterised query and return its first row; no row is an error."""
        params = tuple(params)
        _log.debug("%s, %r", sql, params)
        cursor = self._execute(sql, params)
        try:
            row = cursor.fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc
        if row is None:
            raise DatabaseError(LookupError("no rows returned by a query that expected one"))
        return tuple(row)

    def fetch_all_raw(self, sql: str) -> list[tuple]:
        """Run a statement without parameters and return every row."""
        _log.debug("%s", sql)
        cursor = self._execute(sql, ())
        try:
            return [tuple(row) for row in cursor.fetchall()]
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc