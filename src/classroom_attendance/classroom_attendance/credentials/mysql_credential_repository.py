from __future__ import annotations

import mysql.connector

from ..core.exceptions import QueryError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import CredentialRepository


class MySQLCredentialRepository(CredentialRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists(self, username: str, password: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    "SELECT * FROM users WHERE username=%s AND password=%s",
                    (username, password),
                )
                rows = fetchall(cur)
            except mysql.connector.Error as e:
                raise QueryError(str(e)) from e
            return len(rows) > 0
