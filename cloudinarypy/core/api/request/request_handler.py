"""Request handler: sends built requests over a requests session."""
from typing import Any, Dict, Optional

import requests

from .request_builder import ApiRequest
from .response_handler import ResponseHandler
from ...exceptions import CloudinaryNetworkError
from ...logging import get_logger


class RequestHandler:
    """Sends API requests and decodes their responses. No retries."""
    
    def __init__(self, session: requests.Session, timeout: Optional[float] = None):
        """Initializes request handler."""
        self.session = session
        self.timeout = timeout
        self.logger = get_logger('request')
    
    def execute(self, request: ApiRequest) -> Dict[str, Any]:
        """
        Executes a request and returns the decoded JSON body.
        
        Raises:
            CloudinaryNetworkError: If the HTTP exchange fails
            CloudinaryAPIError: If the service answers with a non-2xx status
            ResponseDecodeError: If the body is not a JSON object
        """
        self.logger.debug("Request: %s", request.describe())
        try:
            response = self.session.request(
                request.method,
                request.url,
                timeout=self.timeout,
                **request.to_kwargs()
            )
        except requests.RequestException as e:
            raise CloudinaryNetworkError(
                f"{request.method} {request.url} failed: {e}"
            ) from e
        
        self.logger.debug("Response: %s", ResponseHandler.status_line(response))
        return ResponseHandler.process_response(response)
