"""Upload models."""
from .upload_models import UploadConfig, UploadResult, DeleteResult

__all__ = [
    'UploadConfig',
    'UploadResult',
    'DeleteResult',
]
