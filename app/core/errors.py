class ReportError(Exception):
    """Base class for every error raised by the reporting core."""


class ValidationError(ReportError):
    """
    A filter identifier supplied by the client is not an integer.
    Raised before any statement reaches the store.
    """

    def __init__(self, value, message=None):
        self.value = value
        super().__init__(message or f"Invalid identifier: {value!r}")


class QueryError(ReportError):
    """The store rejected or failed to execute a statement."""


class ConnectionAcquisitionError(QueryError):
    """No connection could be obtained from the pool."""
