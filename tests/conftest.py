from __future__ import annotations

import json

import mysql.connector
import pytest


class FakeCursor:
    """Just enough of a mysql-connector cursor for the ``users`` lookup."""

    def __init__(self, conn: "FakeConnection"):
        self._conn = conn
        self._rows: list = []
        self.closed = False

    def execute(self, sql, params=None):
        self._conn.executed.append((sql, params))
        if self._conn.fail_query:
            raise mysql.connector.ProgrammingError(msg="Table 'attendance_db.users' doesn't exist")
        if "FROM users WHERE username=%s AND password=%s" in sql:
            username, password = params
            self._rows = [
                {"username": u, "password": p}
                for (u, p) in self._conn.users
                if u == username and p == password
            ]
        elif "SELECT user_id FROM users WHERE username=%s" in sql:
            self._rows = [{"user_id": i + 1} for i, (u, _) in enumerate(self._conn.users) if u == params[0]]
        else:
            self._rows = []

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, users, *, fail_query: bool = False):
        self.users = list(users)
        self.fail_query = fail_query
        self.executed: list = []
        self.cursors: list[FakeCursor] = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary: bool = False):
        cur = FakeCursor(self)
        self.cursors.append(cur)
        return cur

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeDriver:
    """Stands in for ``mysql.connector.connect`` and remembers every connection."""

    def __init__(self):
        self.users: list[tuple[str, str]] = []
        self.fail_query = False
        self.unreachable = False
        self.connections: list[FakeConnection] = []
        self.connect_kwargs: list[dict] = []

    def __call__(self, **kwargs):
        self.connect_kwargs.append(kwargs)
        if self.unreachable:
            raise mysql.connector.InterfaceError(msg="2003: Can't connect to MySQL server on 'localhost:3306'")
        conn = FakeConnection(self.users, fail_query=self.fail_query)
        self.connections.append(conn)
        return conn


@pytest.fixture()
def fake_driver(monkeypatch) -> FakeDriver:
    driver = FakeDriver()
    monkeypatch.setattr(mysql.connector, "connect", driver)
    return driver


@pytest.fixture()
def db_config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "url": "jdbc:mysql://localhost:3306/attendance_db",
                "username": "root",
                "password": "secret",
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def attend_page(tmp_path):
    path = tmp_path / "attendance.html"
    path.write_bytes("<html><body>Mark attendance – điểm danh</body></html>\n".encode("utf-8"))
    return path
