"""Upload services."""
from .file_service import FileValidator
from .path_walker import walk_files
from .public_id import derive_public_id

__all__ = [
    'FileValidator',
    'walk_files',
    'derive_public_id',
]
