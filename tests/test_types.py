import pytest

from sqlitescan.errors import ParseIntError
from sqlitescan.types import (
    DEFAULT_LENGTH,
    DefaultKind,
    DefaultValue,
    SqliteType,
    TypeKind,
    parse_default,
    parse_type,
)


@pytest.mark.parametrize(
    "declared, kind",
    [
        ("integer", TypeKind.INTEGER),
        ("INT", TypeKind.INT),
        ("tiny int", TypeKind.TINYINT),
        ("TINYINT", TypeKind.TINYINT),
        ("big int", TypeKind.BIGINT),
        ("UNSIGNED INT", TypeKind.UNSIGNED_BIGINT),
        ("double precision", TypeKind.DOUBLE_PRECISION),
        ("Timestamp", TypeKind.TIMESTAMP),
        ("DATETIME", TypeKind.DATETIME),
    ],
)
def test_named_types(declared, kind):
    assert parse_type(declared) == SqliteType(kind)


def test_decimal_reads_both_digits():
    parsed = parse_type("DECIMAL(4,2)")
    assert parsed.kind is TypeKind.DECIMAL
    assert (parsed.integral, parsed.fractional) == (4, 2)


@pytest.mark.parametrize("declared", ["DECIMAL(x,2)", "DECIMAL(4,y)", "DECIMAL", "DECIMAL(4"])
def test_bad_decimal_raises(declared):
    with pytest.raises(ParseIntError):
        parse_type(declared)


@pytest.mark.parametrize(
    "declared, kind",
    [
        ("VARCHAR(45)", TypeKind.VARCHAR),
        ("nvarchar", TypeKind.NVARCHAR),
        ("CHARACTER(20)", TypeKind.CHARACTER),
        ("native character(70)", TypeKind.NATIVE_CHARACTER),
    ],
)
def test_character_types_use_default_length(declared, kind):
    parsed = parse_type(declared)
    assert parsed.kind is kind
    assert parsed.length == DEFAULT_LENGTH == 255


def test_unknown_type_is_blob():
    assert parse_type("GEOMETRY") == SqliteType(TypeKind.BLOB)


def test_integer_aliases_write_alike():
    written = {parse_type(name).write_type() for name in ["INT", "INTEGER", "MEDIUMINT", "INT2", "INT8"]}
    assert len(written) == 1


def test_text_types_write_alike():
    written = {parse_type(name).write_type() for name in ["TEXT", "CLOB", "VARCHAR(10)", "NCHAR(3)"]}
    assert len(written) == 1
    assert parse_type("BLOB").write_type() not in written


def test_decimal_write_type():
    assert parse_type("DECIMAL(4,2)").write_type() == "decimal(4, 2)"


def test_default_null_and_unspecified():
    assert parse_default("NULL") == DefaultValue(DefaultKind.NULL)
    assert parse_default("") == DefaultValue(DefaultKind.UNSPECIFIED)
    assert parse_default(None) == DefaultValue(DefaultKind.UNSPECIFIED)


def test_default_integer_strips_quotes():
    assert parse_default("'42'") == DefaultValue(DefaultKind.INTEGER, 42)
    assert parse_default("-7") == DefaultValue(DefaultKind.INTEGER, -7)


def test_default_out_of_range_integer_becomes_float():
    assert parse_default("99999999999").kind is DefaultKind.FLOAT


def test_default_float():
    assert parse_default("1.5") == DefaultValue(DefaultKind.FLOAT, 1.5)


def test_default_current_timestamp():
    parsed = parse_default("CURRENT_TIMESTAMP")
    assert parsed.kind is DefaultKind.CURRENT_TIMESTAMP
    assert parsed.sql() == "CURRENT_TIMESTAMP"


def test_default_string():
    assert parse_default("'abc'") == DefaultValue(DefaultKind.STRING, "abc")


@pytest.mark.parametrize("raw", ["4.99", "19.99"])
def test_float_sql_round_trips(raw):
    assert parse_default(raw).sql() == raw


def test_integer_sql_round_trips():
    assert parse_default("42").sql() == "42"


def test_string_sql_escapes_quotes():
    assert DefaultValue(DefaultKind.STRING, "it's").sql() == "'it''s'"


def test_no_sql_for_null_or_unspecified():
    assert DefaultValue(DefaultKind.NULL).sql() is None
    assert DefaultValue(DefaultKind.UNSPECIFIED).sql() is None