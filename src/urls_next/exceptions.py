class UrlError(ValueError):
    """Base exception for all urls_next errors."""


class FormatError(UrlError):
    """Raised when a raw string cannot be split into absolute url parts."""
