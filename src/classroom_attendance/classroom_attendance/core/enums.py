from __future__ import annotations

from enum import Enum


class CredentialCheckOutcome(str, Enum):
    """Result kinds of a credential lookup."""

    VALID = "VALID"
    NOT_FOUND = "NOT_FOUND"
    CONFIGURATION_FAILURE = "CONFIGURATION_FAILURE"
    CONNECTION_FAILURE = "CONNECTION_FAILURE"
    QUERY_FAILURE = "QUERY_FAILURE"
