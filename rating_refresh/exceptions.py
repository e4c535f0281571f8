"""Custom exceptions for the rating refresh tooling."""


class RatingRefreshError(Exception):
    """Base exception for rating refresh operations."""


class ConfigurationError(RatingRefreshError):
    """Raised when required configuration is missing or invalid."""


class InvalidEncodingError(RatingRefreshError):
    """Raised when call data cannot be ABI-encoded (malformed hex, bad address, type mismatch)."""


class ReportFormatError(RatingRefreshError):
    """Raised when the report API returns a body that does not match the expected shape."""


class DataLinkApiError(RatingRefreshError):
    """Raised when the DataLink API answers with a non-success status."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MimicApiError(RatingRefreshError):
    """Raised when the Mimic API answers with a non-success status or an unusable body."""

    def __init__(self, message: str, status_code: int = 0, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MimicAuthError(RatingRefreshError):
    """Raised when no usable credentials are available for a Mimic operation."""
