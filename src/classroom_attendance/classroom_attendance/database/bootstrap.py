from __future__ import annotations

import logging

import mysql.connector

from .descriptor import ConnectionDescriptor


logger = logging.getLogger(__name__)

USERS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS users (
    user_id INT AUTO_INCREMENT PRIMARY KEY,
    username VARCHAR(100) NOT NULL,
    password VARCHAR(255) NOT NULL,
    UNIQUE KEY uq_users_username (username)
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""


def _connect(descriptor: ConnectionDescriptor, *, with_database: bool = True):
    kwargs = descriptor.connect_kwargs()
    if not with_database:
        kwargs.pop("database", None)
    return mysql.connector.connect(use_pure=True, **kwargs)


def ensure_database_exists(descriptor: ConnectionDescriptor) -> None:
    database = descriptor.connect_kwargs().get("database")
    if not database:
        return

    conn = _connect(descriptor, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(descriptor: ConnectionDescriptor) -> None:
    """Create the ``users`` table if missing (idempotent)."""
    ensure_database_exists(descriptor)

    conn = _connect(descriptor)
    try:
        cur = conn.cursor()
        cur.execute(USERS_TABLE_DDL)
        conn.commit()
    finally:
        conn.close()


def ensure_user(descriptor: ConnectionDescriptor, *, username: str, password: str) -> None:
    """Insert or update one login row.

    Passwords are stored as given (plaintext); the login lookup compares them verbatim.
    """
    conn = _connect(descriptor)
    try:
        cur = conn.cursor()
        cur.execute("SELECT user_id FROM users WHERE username=%s", (username,))
        existing = cur.fetchone()
        if existing:
            cur.execute("UPDATE users SET password=%s WHERE username=%s", (password, username))
        else:
            cur.execute("INSERT INTO users (username, password) VALUES (%s, %s)", (username, password))
        conn.commit()
    finally:
        conn.close()
    logger.info("Demo user %r ready", username)


def list_tables(descriptor: ConnectionDescriptor) -> list[str]:
    conn = _connect(descriptor)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
