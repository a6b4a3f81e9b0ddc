"""Column, index and foreign-key descriptions read from SQLite pragmas."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .executor import quote_identifier
from .types import DefaultValue, SqliteType, parse_default, parse_type


@dataclass
class ColumnInfo:
    """One row of ``PRAGMA table_info``."""

    cid: int
    name: str
    column_type: SqliteType
    not_null: bool
    default_value: DefaultValue
    primary_key: bool


def column_info_from_row(row: Sequence[Any]) -> ColumnInfo:
    """Build a :class:`ColumnInfo` from a ``PRAGMA table_info`` row."""
    return ColumnInfo(
        cid=row[0],
        name=row[1],
        column_type=parse_type(row[2]),
        not_null=row[3] != 0,
        default_value=parse_default(row[4]),
        primary_key=row[5] != 0,
    )


@dataclass
class IndexInfo:
    """An index together with the columns it covers."""

    index_type: str = ""
    index_name: str = ""
    table_name: str = ""
    unique: bool = False
    origin: str = ""
    partial: int = 0
    columns: list[str] = field(default_factory=list)

    def write(self) -> str:
        """Return a CREATE INDEX statement for this index."""
        unique = "UNIQUE " if self.unique else ""
        columns = ", ".join(quote_identifier(column) for column in self.columns)
        return (
            f"CREATE {unique}INDEX {quote_identifier(self.index_name)} "
            f"ON {quote_identifier(self.table_name)} ({columns})"
        )


@dataclass
class PartialIndexInfo:
    """One row of ``PRAGMA index_list``."""

    seq: int = 0
    name: str = ""
    unique: bool = False
    origin: str = ""
    partial: int = 0


def partial_index_from_row(row: Sequence[Any]) -> PartialIndexInfo:
    """Build a :class:`PartialIndexInfo` from a ``PRAGMA index_list`` row."""
    return PartialIndexInfo(
        seq=row[0],
        name=row[1],
        unique=row[2] != 0,
        origin=row[3],
        partial=row[4],
    )


@dataclass
class IndexedColumns:
    """An index row of ``sqlite_master`` with the column names taken from its SQL."""

    index_type: str = ""
    name: str = ""
    table: str = ""
    root_page: int = 0
    indexed_columns: list[str] = field(default_factory=list)


def indexed_columns_from_row(row: Sequence[Any]) -> IndexedColumns:
    """Build :class:`IndexedColumns` from a ``sqlite_master`` row for an index."""
    sql = row[4]
    if sql is None:
        raise ValueError(f"index {row[1]!r} has no CREATE INDEX statement")
    after_on = sql.split("ON")
    if len(after_on) < 2:
        raise ValueError(f"cannot find ON in index statement {sql!r}")
    after_bracket = after_on[1].strip().split("(")
    if len(after_bracket) < 2:
        raise ValueError(f"cannot find column list in index statement {sql!r}")
    columns = [
        column.strip().replace("`", "").replace('"', "")
        for column in after_bracket[1].replace(")", "").split(",")
    ]
    return IndexedColumns(
        index_type=row[0],
        name=row[1],
        table=row[2],
        root_page=row[3],
        indexed_columns=columns,
    )


class ForeignKeyAction(enum.Enum):
    """Actions SQLite performs on update or delete of a referenced row."""

    NO_ACTION = "NO ACTION"
    RESTRICT = "RESTRICT"
    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"
    CASCADE = "CASCADE"


def parse_foreign_key_action(action: str) -> ForeignKeyAction:
    """Read an action name; anything unknown is NO ACTION."""
    try:
        return ForeignKeyAction(action)
    except ValueError:
        return ForeignKeyAction.NO_ACTION


class MatchAction(enum.Enum):
    """The MATCH clause of a foreign key."""

    SIMPLE = "MATCH SIMPLE"
    PARTIAL = "MATCH PARTIAL"
    FULL = "MATCH FULL"
    NONE = "MATCH NONE"


def parse_match_action(action: str) -> MatchAction:
    """Read a MATCH clause; anything unknown is MATCH NONE."""
    try:
        return MatchAction(action)
    except ValueError:
        return MatchAction.NONE


@dataclass
class ForeignKeysInfo:
    """One row of ``PRAGMA foreign_key_list``."""

    id: int = 0
    seq: int = 0
    table: str = ""
    from_column: str = ""
    to_column: str | None = ""
    on_update: ForeignKeyAction = ForeignKeyAction.NO_ACTION
    on_delete: ForeignKeyAction = ForeignKeyAction.NO_ACTION
    match_action: MatchAction = MatchAction.NONE


def foreign_key_from_row(row: Sequence[Any]) -> ForeignKeysInfo:
    """Build a :class:`ForeignKeysInfo` from a ``PRAGMA foreign_key_list`` row."""
    return ForeignKeysInfo(
        id=row[0],
        seq=row[1],
        table=row[2],
        from_column=row[3],
        to_column=row[4],
        on_update=parse_foreign_key_action(row[5]),
        on_delete=parse_foreign_key_action(row[6]),
        match_action=parse_match_action(row[7]),
    )