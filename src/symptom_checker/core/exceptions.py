"""Error taxonomy shared by the services and adapters."""


class SymptomCheckerError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(SymptomCheckerError):
    """The request is missing required input."""


class RemoteError(SymptomCheckerError):
    """The hosted inference call failed (HTTP status or network)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.reason = reason


class StorageError(SymptomCheckerError):
    """Reading from or writing to the query store failed."""
