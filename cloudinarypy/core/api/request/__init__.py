"""Request handling: building, sending and decoding API calls."""
from .request_builder import ApiRequest, RequestBuilder
from .request_handler import RequestHandler
from .response_handler import ApiFailure, ApiResult, ApiSuccess, ResponseHandler

__all__ = [
    'ApiRequest',
    'RequestBuilder',
    'RequestHandler',
    'ApiSuccess',
    'ApiFailure',
    'ApiResult',
    'ResponseHandler',
]
