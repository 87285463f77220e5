from __future__ import annotations

import logging

from ..core.enums import CredentialCheckOutcome
from ..core.exceptions import ConfigurationError, DatabaseConnectionError, QueryError
from .model import CredentialCheckResult
from .repository import CredentialRepository


logger = logging.getLogger(__name__)


class CredentialGateway:
    """Use case: is this username/password pair a known login?

    Every check goes to the repository (one fresh connection per call). Failures never
    escape: they are logged and reported as a failure outcome, which ``validate_user``
    turns into ``False`` (fail-closed).
    """

    def __init__(self, credentials: CredentialRepository):
        self._credentials = credentials

    def check_credentials(self, username: str, password: str) -> CredentialCheckResult:
        try:
            found = self._credentials.exists(username, password)
        except ConfigurationError as e:
            logger.exception("Credential check aborted: database config unusable")
            return CredentialCheckResult(CredentialCheckOutcome.CONFIGURATION_FAILURE, str(e))
        except DatabaseConnectionError as e:
            logger.exception("Credential check aborted: cannot connect to database")
            return CredentialCheckResult(CredentialCheckOutcome.CONNECTION_FAILURE, str(e))
        except QueryError as e:
            logger.exception("Credential check aborted: lookup query failed")
            return CredentialCheckResult(CredentialCheckOutcome.QUERY_FAILURE, str(e))
        except Exception as e:
            # e.g. the connection dropping between connect and cursor
            logger.exception("Credential check aborted: unexpected database error")
            return CredentialCheckResult(CredentialCheckOutcome.QUERY_FAILURE, str(e))

        if found:
            return CredentialCheckResult(CredentialCheckOutcome.VALID)
        return CredentialCheckResult(CredentialCheckOutcome.NOT_FOUND)

    def validate_user(self, username: str, password: str) -> bool:
        return self.check_credentials(username, password).is_valid
