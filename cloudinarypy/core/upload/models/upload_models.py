"""
Data models for upload module.

Uses dataclasses for immutable, type-safe data structures.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...api.config import ResourceType
from ...api.errors import ResponseDecodeError


@dataclass
class UploadConfig:
    """
    Configuration for a single file upload.
    
    Attributes:
        file_path: Path to file to upload
        resource_type: Target resource type (image or raw)
        random_public_id: Let the service generate the public id
        public_id: Explicit public id, overrides the one derived from the path
    """
    file_path: Path
    resource_type: ResourceType = ResourceType.IMAGE
    random_public_id: bool = False
    public_id: Optional[str] = None
    
    def __post_init__(self):
        """Validate and normalize config."""
        if isinstance(self.file_path, str):
            self.file_path = Path(self.file_path)
        self.resource_type = ResourceType.parse(self.resource_type)


@dataclass(frozen=True)
class UploadResult:
    """
    Result of a successful upload, as reported by the service.
    
    A typical response body:
    {"public_id":"Downloads/file","version":1369431906,"format":"png","resource_type":"image"}
    
    Attributes:
        public_id: Identifier the asset is addressable under
        version: Version number assigned by the service
        format: File format detected by the service
        resource_type: "image" or "raw"
        size: Size in bytes, when reported
        url: Remote url, when reported
        secure_url: Remote url over https, when reported
        local_path: File the result belongs to
        response: Raw API response
    """
    public_id: str
    version: int
    format: str = ''
    resource_type: str = ResourceType.IMAGE.value
    size: Optional[int] = None
    url: Optional[str] = None
    secure_url: Optional[str] = None
    local_path: Optional[Path] = None
    response: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)
    
    @classmethod
    def from_response(
        cls,
        data: Dict[str, Any],
        local_path: Optional[Union[str, Path]] = None
    ) -> 'UploadResult':
        """Create from a decoded upload response."""
        return cls(
            public_id=data.get('public_id', ''),
            version=_parse_version(data.get('version')),
            format=data.get('format') or '',
            resource_type=data.get('resource_type') or ResourceType.IMAGE.value,
            size=data.get('bytes'),
            url=data.get('url'),
            secure_url=data.get('secure_url'),
            local_path=Path(local_path) if local_path is not None else None,
            response=dict(data)
        )


@dataclass(frozen=True)
class DeleteResult:
    """Result of a destroy call; result is e.g. "ok" or "not found"."""
    public_id: str
    result: Optional[str]
    
    @property
    def ok(self) -> bool:
        return self.result == 'ok'


def _parse_version(value: Any) -> int:
    if value is None or value == '':
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ResponseDecodeError(f"Invalid version in upload response: {value!r}") from e
