"""Error types raised by services and mapped to HTTP responses."""


class FitnessTrackerError(Exception):
    """Base class for expected application errors."""


class ValidationError(FitnessTrackerError, ValueError):
    """Raised when user input is rejected."""


class NotFoundError(FitnessTrackerError, LookupError):
    """Raised when a record does not exist or is not owned by the caller."""


class SessionStateError(FitnessTrackerError):
    """Raised on an invalid workout session transition."""


class WriteFailedError(FitnessTrackerError):
    """Raised when persisting a change failed."""


class AuthUnavailableError(FitnessTrackerError):
    """Raised when the authentication service could not be reached."""
