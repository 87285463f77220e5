from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit

from ..core.constants import DEFAULT_MYSQL_PORT
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Where and as whom to connect: read from the JSON config file."""

    url: str
    username: str
    password: str

    def connect_kwargs(self) -> dict:
        """Translate the descriptor into ``mysql.connector.connect`` keyword args."""
        url = self.url
        if url.startswith("jdbc:"):
            url = url[len("jdbc:"):]

        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError as e:
            raise ConfigurationError(f"Invalid database url: {self.url!r}") from e

        if parts.scheme != "mysql":
            raise ConfigurationError(f"Unsupported database url scheme: {self.url!r}")

        kwargs = {
            "host": parts.hostname or "localhost",
            "port": int(port or DEFAULT_MYSQL_PORT),
            "user": self.username,
            "password": self.password,
        }
        database = parts.path.lstrip("/")
        if database:
            kwargs["database"] = database
        return kwargs


class JsonDescriptorLoader:
    """Reads a ConnectionDescriptor from disk.

    The file is read on every ``load()`` call; nothing is cached.
    """

    REQUIRED_FIELDS = ("url", "username", "password")

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load(self) -> ConnectionDescriptor:
        try:
            content = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read database config {self._path}: {e}") from e

        try:
            data = json.loads(content)
        except ValueError as e:
            raise ConfigurationError(f"Database config {self._path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Database config {self._path} must be a JSON object")

        for field in self.REQUIRED_FIELDS:
            if not isinstance(data.get(field), str):
                raise ConfigurationError(f"Database config field '{field}' is missing or not a string")

        return ConnectionDescriptor(url=data["url"], username=data["username"], password=data["password"])
