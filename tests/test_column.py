import sqlite3

import pytest

from sqlitescan.column import (
    ForeignKeyAction,
    IndexInfo,
    MatchAction,
    column_info_from_row,
    foreign_key_from_row,
    indexed_columns_from_row,
    parse_foreign_key_action,
    parse_match_action,
    partial_index_from_row,
)
from sqlitescan.errors import ParseIntError
from sqlitescan.types import DEFAULT_LENGTH, DefaultKind, DefaultValue, TypeKind


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.executescript(
        """
        CREATE TABLE parent (id INTEGER PRIMARY KEY);
        CREATE TABLE t (
            id INTEGER PRIMARY KEY,
            name VARCHAR(45) NOT NULL DEFAULT 'anon',
            score REAL DEFAULT 1.5,
            created TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            pid INTEGER REFERENCES parent(id) ON DELETE CASCADE ON UPDATE SET NULL
        );
        CREATE UNIQUE INDEX idx_name ON t (name, "score");
        """
    )
    yield conn
    conn.close()


def _columns(connection):
    rows = connection.execute("PRAGMA table_info('t')").fetchall()
    return {column.name: column for column in map(column_info_from_row, rows)}


def test_primary_key_column(connection):
    column = _columns(connection)["id"]
    assert column.cid == 0
    assert column.column_type.kind is TypeKind.INTEGER
    assert column.primary_key is True
    assert column.not_null is False
    assert column.default_value == DefaultValue(DefaultKind.UNSPECIFIED)


def test_text_column_with_default(connection):
    column = _columns(connection)["name"]
    assert column.column_type.kind is TypeKind.VARCHAR
    assert column.column_type.length == DEFAULT_LENGTH
    assert column.not_null is True
    assert column.default_value == DefaultValue(DefaultKind.STRING, "anon")


def test_float_and_timestamp_defaults(connection):
    columns = _columns(connection)
    assert columns["score"].default_value == DefaultValue(DefaultKind.FLOAT, 1.5)
    assert columns["created"].default_value.kind is DefaultKind.CURRENT_TIMESTAMP


def test_bad_decimal_column_raises():
    with pytest.raises(ParseIntError):
        column_info_from_row((0, "x", "DECIMAL(x,1)", 0, None, 0))


def test_partial_index_from_index_list(connection):
    rows = connection.execute("PRAGMA index_list('t')").fetchall()
    infos = [partial_index_from_row(row) for row in rows]
    assert [info.name for info in infos] == ["idx_name"]
    assert infos[0].unique is True
    assert infos[0].origin == "c"


def test_indexed_columns_from_master(connection):
    row = connection.execute("SELECT * FROM sqlite_master WHERE name = 'idx_name'").fetchone()
    indexed = indexed_columns_from_row(row)
    assert indexed.index_type == "index"
    assert indexed.table == "t"
    assert indexed.indexed_columns == ["name", "score"]


def test_indexed_columns_without_sql_raises():
    with pytest.raises(ValueError):
        indexed_columns_from_row(("index", "sqlite_autoindex_t_1", "t", 3, None))


def test_index_write_unique():
    index = IndexInfo(index_name="idx_name", table_name="t", unique=True, columns=["name", "score"])
    assert index.write() == 'CREATE UNIQUE INDEX "idx_name" ON "t" ("name", "score")'


def test_index_write_plain_round_trips(connection):
    index = IndexInfo(index_name="idx_pid", table_name="t", columns=["pid"])
    statement = index.write()
    assert "UNIQUE" not in statement
    connection.execute(statement)
    names = [row[1] for row in connection.execute("PRAGMA index_list('t')").fetchall()]
    assert "idx_pid" in names


def test_foreign_key_from_row(connection):
    rows = connection.execute("PRAGMA foreign_key_list('t')").fetchall()
    keys = [foreign_key_from_row(row) for row in rows]
    assert len(keys) == 1
    key = keys[0]
    assert (key.table, key.from_column, key.to_column) == ("parent", "pid", "id")
    assert key.on_delete is ForeignKeyAction.CASCADE
    assert key.on_update is ForeignKeyAction.SET_NULL
    assert key.match_action is MatchAction.NONE


@pytest.mark.parametrize("action", list(ForeignKeyAction))
def test_foreign_key_action_round_trip(action):
    assert parse_foreign_key_action(action.value) is action


def test_unknown_foreign_key_action_is_no_action():
    assert parse_foreign_key_action("EXPLODE") is ForeignKeyAction.NO_ACTION


@pytest.mark.parametrize("action", list(MatchAction))
def test_match_action_round_trip(action):
    assert parse_match_action(action.value) is action


def test_unknown_match_action_is_none():
    assert parse_match_action("SIMPLE") is MatchAction.NONE