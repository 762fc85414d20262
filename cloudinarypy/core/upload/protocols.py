"""
Protocol definitions for upload module.

Defines the interfaces the upload facade depends on.
"""
from typing import Any, Dict, Protocol

from ..api.request import ApiRequest


class RequestExecutorProtocol(Protocol):
    """Anything able to send an ApiRequest and return the decoded body."""
    
    def execute(self, request: ApiRequest) -> Dict[str, Any]:
        ...
