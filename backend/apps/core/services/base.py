"""
Base service class and the service-layer exception hierarchy.
Provides common logging helpers and the errors views translate into responses.
"""
import logging
from typing import Dict, Optional


class BaseService:
    """
    Base service class that all other services should inherit from.
    Provides structured logging under the service's module path.
    """

    def __init__(self):
        """Initialize the service with a logger."""
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}")

    def log_debug(self, message: str, **kwargs) -> None:
        """Log a debug message with optional context."""
        self.logger.debug(message, extra={'context': kwargs})

    def log_info(self, message: str, **kwargs) -> None:
        """
        Log an info message with optional context.

        Args:
            message: The message to log
            **kwargs: Additional context to include in the log
        """
        self.logger.info(message, extra={'context': kwargs})

    def log_error(self, message: str, exception: Optional[Exception] = None, **kwargs) -> None:
        """
        Log an error message with optional exception and context.

        Args:
            message: The error message to log
            exception: Optional exception that caused the error
            **kwargs: Additional context to include in the log
        """
        self.logger.error(
            message,
            exc_info=exception,
            extra={'context': kwargs}
        )

    def log_warning(self, message: str, **kwargs) -> None:
        """
        Log a warning message with optional context.

        Args:
            message: The warning message to log
            **kwargs: Additional context to include in the log
        """
        self.logger.warning(message, extra={'context': kwargs})


class ServiceException(Exception):
    """Base exception for service layer errors."""

    default_code = 'SERVICE_ERROR'
    status_code = 500

    def __init__(self, message: str, code: Optional[str] = None,
                 details: Optional[Dict] = None, status_code: Optional[int] = None):
        """
        Initialize service exception.

        Args:
            message: Error message
            code: Optional error code for categorization
            details: Optional dictionary with additional error details
            status_code: Optional HTTP status overriding the class default
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ServiceException):
    """Raised when request or entity validation fails."""
    default_code = 'VALIDATION_ERROR'
    status_code = 400


class NotFoundError(ServiceException):
    """Raised when a looked-up record does not exist."""
    default_code = 'NOT_FOUND'
    status_code = 404


class ExternalServiceError(ServiceException):
    """Raised when an external service (API, Stripe, etc.) fails."""
    default_code = 'EXTERNAL_SERVICE_ERROR'
    status_code = 502


class GatewayError(ExternalServiceError):
    """Raised when the payment gateway fails or rejects a request."""
    default_code = 'GATEWAY_ERROR'


class StorageError(ServiceException):
    """Raised when the key-value store cannot be read or written."""
    default_code = 'STORAGE_ERROR'
    status_code = 503
