"""Custom exception hierarchy for AfroPair."""


class AfropairError(Exception):
    """Base exception for all AfroPair errors."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(AfropairError):
    """Error in configuration loading or validation."""

    pass


class ValidationError(AfropairError):
    """Error in input validation."""

    pass


class ArbitrationError(AfropairError):
    """Winner selection failed on a non-empty candidate list.

    This indicates a logic defect, not a data-quality problem.
    """

    pass


class PersistenceError(AfropairError):
    """Error while writing translation records."""

    pass
