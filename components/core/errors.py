"""Error taxonomy shared by all services."""


class FinanceError(Exception):
    """Base class for errors raised by the finance services."""


class ValidationError(FinanceError):
    """Raised when an input value breaks a business rule."""


class NotFoundError(FinanceError):
    """Raised when an entity addressed by identifier does not exist."""


class ConflictError(FinanceError):
    """Raised when an optimistic-lock version check fails."""

    retryable = True


class RepositoryError(FinanceError):
    """Raised when a repository reports that a write did not happen."""


class EmailDeliveryError(FinanceError):
    """Raised by an email sink when a message could not be delivered."""
