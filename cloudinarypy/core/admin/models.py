"""Admin API data models."""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional


@dataclass(frozen=True)
class UploadMapping:
    """Folder-to-template routing rule."""
    folder: str
    template: str
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadMapping':
        return cls(folder=data.get('folder', ''), template=data.get('template', ''))


@dataclass
class UploadMappingList:
    """
    Upload mappings returned by the admin API.
    
    Attributes:
        mappings: Mappings on this page
        next_cursor: Cursor for the next page, None on the last one
    """
    mappings: List[UploadMapping] = field(default_factory=list)
    next_cursor: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadMappingList':
        return cls(
            mappings=[UploadMapping.from_dict(m) for m in data.get('mappings') or []],
            next_cursor=data.get('next_cursor')
        )
    
    def __iter__(self) -> Iterator[UploadMapping]:
        return iter(self.mappings)
    
    def __len__(self) -> int:
        return len(self.mappings)
