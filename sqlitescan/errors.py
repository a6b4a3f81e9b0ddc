"""Errors raised while discovering the schema of a SQLite database."""

from __future__ import annotations


class DiscoveryError(Exception):
    """Base class for every error raised during schema discovery."""


class ParseIntError(DiscoveryError, ValueError):
    """A value reported by SQLite could not be read as an integer."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("Parse Integer Error")
        self.detail = detail


class ParseFloatError(DiscoveryError, ValueError):
    """A value reported by SQLite could not be read as a float."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("Parse Float Error Error")
        self.detail = detail


class DatabaseError(DiscoveryError):
    """The database driver reported an error; the original is kept in ``error``."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(f"Database Error: {error!r}")
        self.error = error


class NoIndexesFound(DiscoveryError):
    """Index discovery was asked for on a table that has no indexes."""

    def __init__(self) -> None:
        super().__init__("No Indexes Found Error")