class MemodateError(Exception):
    """Base class for errors raised by memodate."""


class InputValidationError(MemodateError, TypeError):
    """Raised when the text handed to an extractor is not a string."""


class EmptyContentError(MemodateError, ValueError):
    """Raised when a note is annotated without any content."""


class WallClockFormatError(MemodateError, ValueError):
    """Raised when a string is not a ``YYYY-MM-DDTHH:MM:SS`` wall-clock value."""


class EventValidationError(MemodateError, ValueError):
    """Raised when an event draft is missing a required field."""
