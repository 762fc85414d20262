"""Cloudinary API error exceptions."""
from typing import Optional

from ...exceptions import CloudinaryException


class CloudinaryAPIError(CloudinaryException):
    """
    Exception raised for non-2xx API responses.
    
    The message is the ``error.message`` member of the JSON envelope when
    the service sent one, otherwise the raw HTTP status line.
    """
    
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message, status_code)
    
    def __repr__(self) -> str:
        return f"CloudinaryAPIError({self.message!r}, status_code={self.status_code})"


class ResponseDecodeError(CloudinaryException):
    """Exception raised when a response body is not a JSON object."""
    pass
