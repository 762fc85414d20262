"""
Upload module for Cloudinary file uploads.

Single files and whole directory trees are sent as signed multipart
requests, one request per file.
"""
from .facade import UploadFacade
from .models import UploadConfig, UploadResult, DeleteResult
from .protocols import RequestExecutorProtocol
from .services import FileValidator, derive_public_id, walk_files

__all__ = [
    # Main classes
    'UploadFacade',
    
    # Models
    'UploadConfig',
    'UploadResult',
    'DeleteResult',
    
    # Helpers
    'FileValidator',
    'derive_public_id',
    'walk_files',
    
    # Protocols
    'RequestExecutorProtocol',
]
