from __future__ import annotations

from typing import Protocol


class CredentialRepository(Protocol):
    """Repository interface for the ``users`` login table.

    Note (DIP): the gateway depends on this interface, not on a concrete DB driver.
    """

    def exists(self, username: str, password: str) -> bool:
        """True iff a row matches both values exactly."""

        raise NotImplementedError
