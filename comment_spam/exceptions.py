"""Custom exception hierarchy for the Comment Spam API.

Defines structured application errors for input validation,
batch parsing and scoring with consistent HTTP status codes
and retry behavior.
"""
from fastapi import status

class AppError(Exception):
    """Base class for all application-level exceptions."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "APP_ERROR"
    retryable = False
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

# ---- input ----
class InvalidInputError(AppError):
    """Raised when incoming prediction data fails validation."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "INVALID_INPUT"

class MissingColumnsError(InvalidInputError):
    """Raised when a CSV batch lacks the post or comment column."""
    code = "MISSING_COLUMNS"

class NoValidDataError(InvalidInputError):
    """Raised when a batch holds no usable rows after filtering."""
    code = "NO_VALID_DATA"

# ---- predict ----
class PredictionError(AppError):
    """Raised for generic scoring failures."""
    code = "PREDICTION_ERROR"

class ConfigError(AppError):
    """Raised for malformed or invalid scoring configuration."""
    code = "CONFIG_ERROR"
