"""Error taxonomy surfaced to request handlers."""


class MacroTrackerError(Exception):
    """Base class for errors turned into user-visible responses."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(MacroTrackerError):
    """A required field is missing or malformed."""

    status_code = 400


class UnauthorizedError(MacroTrackerError):
    """No valid session for the request."""

    status_code = 401


class NotFoundError(MacroTrackerError):
    """The entity does not exist or belongs to another user."""

    status_code = 404


class ExtractionError(MacroTrackerError):
    """The nutrition extractor failed or returned unusable data."""

    status_code = 502


class StorageError(MacroTrackerError):
    """The database rejected or failed an operation."""

    status_code = 500
