"""Column types and default values as reported by SQLite."""

from __future__ import annotations

import enum
import math
import re
import struct
from dataclasses import dataclass
from decimal import Decimal

from .errors import ParseIntError

#: Length used for every character type; the declared length is not read.
DEFAULT_LENGTH = 255


class TypeKind(enum.Enum):
    """The type names SQLite documents for column declarations."""

    INT = enum.auto()
    INTEGER = enum.auto()
    TINYINT = enum.auto()
    SMALLINT = enum.auto()
    MEDIUMINT = enum.auto()
    BIGINT = enum.auto()
    UNSIGNED_BIGINT = enum.auto()
    INT2 = enum.auto()
    INT8 = enum.auto()
    CHARACTER = enum.auto()
    VARCHAR = enum.auto()
    VARYING_CHARACTER = enum.auto()
    NCHAR = enum.auto()
    NATIVE_CHARACTER = enum.auto()
    NVARCHAR = enum.auto()
    TEXT = enum.auto()
    CLOB = enum.auto()
    BLOB = enum.auto()
    REAL = enum.auto()
    DOUBLE = enum.auto()
    DOUBLE_PRECISION = enum.auto()
    FLOAT = enum.auto()
    NUMERIC = enum.auto()
    DECIMAL = enum.auto()
    BOOLEAN = enum.auto()
    DATE = enum.auto()
    DATETIME = enum.auto()
    TIMESTAMP = enum.auto()


_NAMED_TYPES = {
    "INT": TypeKind.INT,
    "INTEGER": TypeKind.INTEGER,
    "TINY INT": TypeKind.TINYINT,
    "TINYINT": TypeKind.TINYINT,
    "SMALL INT": TypeKind.SMALLINT,
    "SMALLINT": TypeKind.SMALLINT,
    "MEDIUM INT": TypeKind.MEDIUMINT,
    "MEDIUMINT": TypeKind.MEDIUMINT,
    "BIG INT": TypeKind.BIGINT,
    "BIGINT": TypeKind.BIGINT,
    "UNSIGNED INT": TypeKind.UNSIGNED_BIGINT,
    "UNSIGNEDBIGINT": TypeKind.UNSIGNED_BIGINT,
    "INT2": TypeKind.INT2,
    "INT8": TypeKind.INT8,
    "TEXT": TypeKind.TEXT,
    "CLOB": TypeKind.CLOB,
    "BLOB": TypeKind.BLOB,
    "REAL": TypeKind.REAL,
    "DOUBLE": TypeKind.DOUBLE,
    "DOUBLE PRECISION": TypeKind.DOUBLE_PRECISION,
    "FLOAT": TypeKind.FLOAT,
    "NUMERIC": TypeKind.NUMERIC,
    "BOOLEAN": TypeKind.BOOLEAN,
    "DATE": TypeKind.DATE,
    "DATETIME": TypeKind.DATETIME,
    "TIMESTAMP": TypeKind.TIMESTAMP,
}

_CHARACTER_TYPES = {
    "VARCHAR": TypeKind.VARCHAR,
    "CHARACTER": TypeKind.CHARACTER,
    "VARYING CHARACTER": TypeKind.VARYING_CHARACTER,
    "NCHAR": TypeKind.NCHAR,
    "NATIVE CHARACTER": TypeKind.NATIVE_CHARACTER,
    "NVARCHAR": TypeKind.NVARCHAR,
}

_SQL_NAMES = {
    TypeKind.INT: "integer",
    TypeKind.INTEGER: "integer",
    TypeKind.MEDIUMINT: "integer",
    TypeKind.INT2: "integer",
    TypeKind.INT8: "integer",
    TypeKind.TINYINT: "tinyint",
    TypeKind.SMALLINT: "smallint",
    TypeKind.BIGINT: "bigint",
    TypeKind.UNSIGNED_BIGINT: "bigint",
    TypeKind.CHARACTER: "varchar",
    TypeKind.VARCHAR: "varchar",
    TypeKind.VARYING_CHARACTER: "varchar",
    TypeKind.NCHAR: "varchar",
    TypeKind.NATIVE_CHARACTER: "varchar",
    TypeKind.NVARCHAR: "varchar",
    TypeKind.TEXT: "varchar",
    TypeKind.CLOB: "varchar",
    TypeKind.BLOB: "blob",
    TypeKind.REAL: "double",
    TypeKind.DOUBLE: "double",
    TypeKind.DOUBLE_PRECISION: "double",
    TypeKind.FLOAT: "double",
    TypeKind.NUMERIC: "double",
    TypeKind.BOOLEAN: "boolean",
    TypeKind.DATE: "date",
    TypeKind.DATETIME: "datetime",
    TypeKind.TIMESTAMP: "timestamp",
}


@dataclass(frozen=True)
class SqliteType:
    """A column type; ``length`` is set for character types, the rest for DECIMAL."""

    kind: TypeKind
    length: int | None = None
    integral: int | None = None
    fractional: int | None = None

    def write_type(self) -> str:
        """Return the column type as written in a CREATE TABLE statement."""
        if self.kind is TypeKind.DECIMAL:
            return f"decimal({self.integral}, {self.fractional})"
        return _SQL_NAMES[self.kind]


def _parse_digit(char: str) -> int:
    if char.isascii() and char.isdigit():
        return int(char)
    raise ParseIntError(char)


def parse_type(data_type: str) -> SqliteType:
    """Map a declared column type, as SQLite reports it, onto a :class:`SqliteType`."""
    parts = data_type.upper().split("(")
    head = parts[0]

    if head in _NAMED_TYPES:
        return SqliteType(_NAMED_TYPES[head])

    if head == "DECIMAL":
        digits = parts[1] if len(parts) > 1 else ""
        if len(digits) < 3:
            raise ParseIntError(digits)
        return SqliteType(
            TypeKind.DECIMAL,
            integral=_parse_digit(digits[0]),
            fractional=_parse_digit(digits[2]),
        )

    kind = _CHARACTER_TYPES.get(head)
    if kind is None:
        return SqliteType(TypeKind.BLOB)
    return SqliteType(kind, length=DEFAULT_LENGTH)


class DefaultKind(enum.Enum):
    """The kinds of value a column's ``dflt_value`` can hold."""

    INTEGER = enum.auto()
    FLOAT = enum.auto()
    STRING = enum.auto()
    NULL = enum.auto()
    UNSPECIFIED = enum.auto()
    CURRENT_TIMESTAMP = enum.auto()


_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _to_f32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _f32_repr(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if _to_f32(float(text)) == value:
            return format(Decimal(text), "f")
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True)
class DefaultValue:
    """A column default; ``value`` is set for integers, floats and strings."""

    kind: DefaultKind
    value: int | float | str | None = None

    def sql(self) -> str | None:
        """Return the default as an SQL literal, or None when no DEFAULT is written."""
        if self.kind is DefaultKind.INTEGER:
            return str(self.value)
        if self.kind is DefaultKind.FLOAT:
            return _f32_repr(float(self.value))
        if self.kind is DefaultKind.STRING:
            return "'" + str(self.value).replace("'", "''") + "'"
        if self.kind is DefaultKind.CURRENT_TIMESTAMP:
            return "CURRENT_TIMESTAMP"
        return None


def parse_default(raw: str | None) -> DefaultValue:
    """Interpret the ``dflt_value`` column of ``PRAGMA table_info``."""
    if raw == "NULL":
        return DefaultValue(DefaultKind.NULL)
    if not raw:
        return DefaultValue(DefaultKind.UNSPECIFIED)

    value = raw.replace("'", "")
    if _INT_RE.fullmatch(value) and _I32_MIN <= int(value) <= _I32_MAX:
        return DefaultValue(DefaultKind.INTEGER, int(value))
    if _FLOAT_RE.fullmatch(value):
        return DefaultValue(DefaultKind.FLOAT, _to_f32(float(value)))
    if value == "CURRENT_TIMESTAMP":
        return DefaultValue(DefaultKind.CURRENT_TIMESTAMP)
    return DefaultValue(DefaultKind.STRING, value)