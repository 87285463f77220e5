class DomainError(Exception):
    """Base exception for the attendance tool."""


class ConfigurationError(DomainError):
    """Raised when the connection config file is missing or malformed."""


class DatabaseConnectionError(DomainError):
    """Raised when the database driver cannot open a connection."""


class QueryError(DomainError):
    """Raised when a lookup query fails to execute."""
