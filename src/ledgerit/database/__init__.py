"""Database layer for ledgerit application."""

from ledgerit.database.base import Database
from ledgerit.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
