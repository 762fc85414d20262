"""Cloudinary HTTP API layer."""
from .config import ServiceConfig, ResourceType, DEFAULT_API_BASE_URL
from .errors import CloudinaryAPIError, ResponseDecodeError
from .request import (
    ApiRequest,
    RequestBuilder,
    RequestHandler,
    ApiSuccess,
    ApiFailure,
    ResponseHandler,
)
from .session import SessionFactory

__all__ = [
    # Configuration
    'ServiceConfig',
    'ResourceType',
    'DEFAULT_API_BASE_URL',
    
    # Errors
    'CloudinaryAPIError',
    'ResponseDecodeError',
    
    # Requests
    'ApiRequest',
    'RequestBuilder',
    'RequestHandler',
    'ApiSuccess',
    'ApiFailure',
    'ResponseHandler',
    'SessionFactory',
]
