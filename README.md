# sqlitescan

Inspect the schema of an SQLite database from Python, using only the
standard library's `sqlite3` module.

`sqlitescan` reads `sqlite_master` and the results of `PRAGMA table_info`,
`PRAGMA foreign_key_list` and `PRAGMA index_list`, and turns them into plain
dataclasses. Each discovered table and index can be written back out as a
`CREATE TABLE` or `CREATE INDEX` statement.

## Installation

```
pip install sqlitescan
```

## Discovering a schema

```python
import sqlite3

from sqlitescan.discovery import SchemaDiscovery

connection = sqlite3.connect("shop.db")
discovery = SchemaDiscovery(connection)

schema = discovery.discover()
for table in schema.tables:
    print(table.name, "autoincrement" if table.auto_increment else "")
    for column in table.columns:
        print("   ", column.name, column.column_type, column.default_value)
    print(table.write())

for index in discovery.discover_indexes():
    print(index.write())
```

`SchemaDiscovery.discover()` returns a `Schema` (from `sqlitescan.table`)
whose `tables` are `TableDef` objects. Each holds its `columns`
(`ColumnInfo`), its `foreign_keys` (`ForeignKeysInfo`) and `auto_increment`,
which is set when the table's SQL contains `AUTOINCREMENT`. The internal
`sqlite_sequence` table is left out.

`SchemaDiscovery.discover_indexes()` returns an `IndexInfo` for every index
whose origin is not `pk`, with the indexed column names taken from the
index's `CREATE INDEX` statement. Indexes that SQLite creates for `UNIQUE`
constraints have no such statement; reading one raises `ValueError`.

The lower-level pieces can be used directly: `sqlitescan.executor.Executor`
runs queries on a connection and returns rows as tuples, and
`TableDef.get_column_info`, `get_foreign_keys`, `get_indexes` and
`pk_is_autoincrement` each fill in or return one part of a table's
description.

## Types and defaults

`sqlitescan.types.parse_type` maps a declared column type onto a
`SqliteType` with a `TypeKind`, for example `INTEGER`, `VARCHAR(40)`,
`DECIMAL(5,2)` or `DATETIME`. Character types always get a `length` of 255;
the declared length is not read. For `DECIMAL` the single digits before and
after the comma become `integral` and `fractional`. Unknown names become
`BLOB`. `SqliteType.write_type()` gives the name used in generated DDL.

`sqlitescan.types.parse_default` reads a `dflt_value` into a `DefaultValue`
of kind `INTEGER` (32-bit range), `FLOAT` (single precision), `STRING`,
`NULL`, `UNSPECIFIED` or `CURRENT_TIMESTAMP`; quote characters are removed
first. `DefaultValue.sql()` returns the SQL literal, or `None` for `NULL`
and `UNSPECIFIED`, in which case no `DEFAULT` clause is written.

Foreign-key actions and `MATCH` clauses are read into the `ForeignKeyAction`
and `MatchAction` enums in `sqlitescan.column`; unknown text becomes
`NO ACTION` and `MATCH NONE`.

## Errors

All errors of the package derive from `sqlitescan.errors.DiscoveryError`:

- `ParseIntError` – the precision of a `DECIMAL` type could not be read;
- `DatabaseError` – a `sqlite3` call failed, or a query that needed one row
  returned none; the original error is kept in `error`;
- `ParseFloatError` and `NoIndexesFound` – defined for callers, but not
  raised by the discovery functions.

## What it does not do

`sqlitescan` is a library only: it has no command-line tool, and it works
synchronously on a `sqlite3.Connection`. It reads schemas; it does not
compare or migrate them.

## Running the tests

```
pip install -e ".[test]"
pytest
```