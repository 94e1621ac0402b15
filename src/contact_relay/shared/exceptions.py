"""
Custom exceptions for the application.
"""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 500

    def __init__(self, message: str, code: str = "APP_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Validation error."""

    status_code = 422

    def __init__(self, message: str) -> None:
        super().__init__(message, "VALIDATION_ERROR")


class InvalidEmailError(ValidationError):
    """Submitted email address failed syntax validation."""

    def __init__(self, message: str = "A valid email address is required") -> None:
        super().__init__(message)
        self.code = "INVALID_EMAIL"


class NotSubmittedError(AppError):
    """Request reached the form handler without the submit flag."""

    status_code = 400

    def __init__(self, message: str = "Form was not submitted") -> None:
        super().__init__(message, "NOT_SUBMITTED")


class ConfigurationError(AppError):
    """Invalid or incomplete deployment configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "CONFIGURATION_ERROR")
