"""Request builder for API requests."""
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Dict, Optional, Tuple

from ..config import ResourceType, ServiceConfig
from ...crypto import sign_params, timestamp_now


@dataclass
class ApiRequest:
    """A single HTTP call, ready to hand to a requests session."""
    method: str
    url: str
    params: Dict[str, str] = field(default_factory=dict)  # query string
    data: Dict[str, str] = field(default_factory=dict)  # form fields
    files: Optional[Dict[str, Tuple[str, BinaryIO]]] = None
    auth: Optional[Tuple[str, str]] = None
    
    def to_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``requests.Session.request``."""
        kwargs: Dict[str, Any] = {}
        if self.params:
            kwargs['params'] = self.params
        if self.data:
            kwargs['data'] = self.data
        if self.files:
            kwargs['files'] = self.files
        if self.auth:
            kwargs['auth'] = self.auth
        return kwargs
    
    def describe(self) -> str:
        """Loggable summary; never includes credentials."""
        fields = sorted(set(self.params) | set(self.data) | set(self.files or ()))
        return f"{self.method} {self.url} fields={fields}"


class RequestBuilder:
    """Builds signed upload/destroy requests and admin requests."""
    
    def __init__(self, config: ServiceConfig):
        """Initializes request builder."""
        self.config = config
    
    def signed_fields(
        self,
        public_id: Optional[str] = None,
        timestamp: Optional[str] = None
    ) -> Dict[str, str]:
        """
        Builds the authentication form fields of an upload API call.
        
        Only public_id (when given) and timestamp are signed.
        """
        timestamp = timestamp or timestamp_now()
        fields: Dict[str, str] = {}
        if public_id:
            fields['public_id'] = public_id
        fields['api_key'] = self.config.api_key
        fields['timestamp'] = timestamp
        fields['signature'] = sign_params(
            {'public_id': public_id, 'timestamp': timestamp},
            self.config.api_secret
        )
        return fields
    
    def build_upload(
        self,
        file_name: str,
        file_obj: BinaryIO,
        public_id: Optional[str] = None,
        resource_type: ResourceType = ResourceType.IMAGE,
        timestamp: Optional[str] = None
    ) -> ApiRequest:
        """Builds a multipart upload request. public_id None lets the service pick one."""
        return ApiRequest(
            method='POST',
            url=self.config.upload_uri(resource_type),
            data=self.signed_fields(public_id, timestamp),
            files={'file': (file_name, file_obj)}
        )
    
    def build_destroy(
        self,
        public_id: str,
        resource_type: ResourceType = ResourceType.IMAGE,
        timestamp: Optional[str] = None
    ) -> ApiRequest:
        """Builds a URL-encoded destroy request."""
        if not public_id:
            raise ValueError("public_id is required to delete a resource")
        return ApiRequest(
            method='POST',
            url=self.config.destroy_uri(resource_type),
            data=self.signed_fields(public_id, timestamp)
        )
    
    def build_admin(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None
    ) -> ApiRequest:
        """Builds an admin API request authenticated with HTTP basic auth."""
        query = {k: v for k, v in (params or {}).items() if v is not None}
        return ApiRequest(
            method=method.upper(),
            url=f"{self.config.admin_uri}/{path.lstrip('/')}",
            params=query,
            auth=(self.config.api_key, self.config.api_secret)
        )
