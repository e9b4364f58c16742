"""Error taxonomy for relative store operations."""


class ItombsError(Exception):
    """Base class for application errors."""


class ValidationError(ItombsError):
    """Required relative fields are missing or invalid."""


class NotFound(ItombsError):
    """The requested relative does not exist (or was already deleted)."""


class TransientError(ItombsError):
    """Network or database failure; the caller may try again later."""
