from __future__ import annotations

from typing import Callable

import mysql.connector

from ..core.exceptions import DatabaseConnectionError
from .descriptor import ConnectionDescriptor


DescriptorProvider = Callable[[], ConnectionDescriptor]


class DatabaseConnection:
    """DB connection factory.

    Note: The descriptor is fetched from the provider on every ``connect()``, and each
    call returns a fresh short-lived connection. Callers own closing it (see ``db_cursor``).
    """

    def __init__(self, descriptor_provider: DescriptorProvider):
        self._descriptor_provider = descriptor_provider

    def connect(self):
        # ConfigurationError from the provider propagates unchanged.
        descriptor = self._descriptor_provider()
        try:
            return mysql.connector.connect(**descriptor.connect_kwargs())
        except mysql.connector.Error as e:
            raise DatabaseConnectionError(str(e)) from e
