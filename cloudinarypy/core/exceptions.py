"""
Custom exceptions for Cloudinary operations.

This module defines the exception classes raised by the client. Filesystem
problems are reported with Python's own ``OSError`` family.
"""
from typing import Optional


class CloudinaryException(Exception):
    """Base exception for all Cloudinary-related errors."""
    
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            status_code: HTTP status code (if available)
        """
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(CloudinaryException):
    """Exception raised for an invalid connection string or configuration."""
    pass


class MissingSecretError(ConfigurationError):
    """Exception raised when the connection string carries no API secret."""
    
    def __init__(self, message: str = "No API secret provided in URI.") -> None:
        super().__init__(message)


class CloudinaryNetworkError(CloudinaryException):
    """Exception raised when the HTTP exchange itself fails."""
    pass
