"""Exceptions raised by the date codecs."""


class InvalidDate(ValueError):
    """Raised when a date or encoded value falls outside the supported domain."""
