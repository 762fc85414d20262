"""Admin API: upload mappings."""
from .mapping_service import UploadMappingService
from .models import UploadMapping, UploadMappingList

__all__ = [
    'UploadMappingService',
    'UploadMapping',
    'UploadMappingList',
]
