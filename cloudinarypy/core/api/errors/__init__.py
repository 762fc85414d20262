"""Cloudinary API errors and exceptions."""
from .api_errors import CloudinaryAPIError, ResponseDecodeError

__all__ = [
    'CloudinaryAPIError',
    'ResponseDecodeError',
]
