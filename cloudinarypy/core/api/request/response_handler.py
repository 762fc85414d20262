"""Response handler for API responses."""
from dataclasses import dataclass
from typing import Any, Dict, Union

from ..errors import CloudinaryAPIError, ResponseDecodeError


@dataclass(frozen=True)
class ApiSuccess:
    """Decoded 2xx response."""
    status_code: int
    data: Dict[str, Any]


@dataclass(frozen=True)
class ApiFailure:
    """Decoded non-2xx response."""
    status_code: int
    message: str
    
    def to_exception(self) -> CloudinaryAPIError:
        return CloudinaryAPIError(self.message, self.status_code)


ApiResult = Union[ApiSuccess, ApiFailure]


class ResponseHandler:
    """Handles API responses."""
    
    @staticmethod
    def status_line(response) -> str:
        """Raw HTTP status line, e.g. ``404 Not Found``."""
        reason = response.reason or ''
        return f"{response.status_code} {reason}".strip()
    
    @staticmethod
    def load_json(response) -> Any:
        """Decodes a response body of any JSON type."""
        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"Invalid JSON response ({ResponseHandler.status_line(response)}): {e}",
                response.status_code
            ) from e
    
    @staticmethod
    def parse_response(response) -> Dict[str, Any]:
        """Parses the JSON object in a response body."""
        body = ResponseHandler.load_json(response)
        if not isinstance(body, dict):
            raise ResponseDecodeError(
                f"Expected a JSON object, got {type(body).__name__}",
                response.status_code
            )
        return body
    
    @staticmethod
    def decode(response) -> ApiResult:
        """
        Decodes a response into a success or a failure.
        
        Error bodies look like:
        {"error":{"message":"Missing required parameter - public_id"}}
        """
        if 200 <= response.status_code < 300:
            return ApiSuccess(response.status_code, ResponseHandler.parse_response(response))
        
        # Non-2xx bodies may be any JSON value; only the envelope carries a message
        body = ResponseHandler.load_json(response)
        error = body.get('error') if isinstance(body, dict) else None
        if isinstance(error, dict) and isinstance(error.get('message'), str):
            return ApiFailure(response.status_code, error['message'])
        return ApiFailure(response.status_code, ResponseHandler.status_line(response))
    
    @staticmethod
    def process_response(response) -> Dict[str, Any]:
        """Returns the decoded body or raises the API error."""
        result = ResponseHandler.decode(response)
        if isinstance(result, ApiFailure):
            raise result.to_exception()
        return result.data
