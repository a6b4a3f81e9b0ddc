"""Discover the tables, columns, foreign keys and indexes of SQLite databases and write them as DDL."""

__version__ = "0.1.0"

__all__ = ["column", "discovery", "errors", "executor", "table", "types"]