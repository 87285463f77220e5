from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import CredentialCheckOutcome


@dataclass(frozen=True)
class CredentialCheckResult:
    """Outcome of one username/password lookup.

    Truthiness is ``is_valid`` so callers that only need yes/no can treat it as a bool.
    """

    outcome: CredentialCheckOutcome
    detail: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.outcome == CredentialCheckOutcome.VALID

    @property
    def is_failure(self) -> bool:
        return self.outcome not in (CredentialCheckOutcome.VALID, CredentialCheckOutcome.NOT_FOUND)

    def __bool__(self) -> bool:
        return self.is_valid
