"""
Upload facade.

Provides a simplified interface for file and directory uploads.
"""
from pathlib import Path
from typing import List, Optional, Union

from .models import UploadConfig, UploadResult
from .protocols import RequestExecutorProtocol
from .services import FileValidator, derive_public_id, walk_files
from ..api.config import ResourceType
from ..api.request import RequestBuilder
from ..logging import get_logger


class UploadFacade:
    """
    Uploads files through signed multipart requests, one call per file.
    
    Example:
        >>> uploader = UploadFacade(builder, handler)
        >>> results = uploader.upload("static/css", resource_type=ResourceType.RAW)
        >>> print([r.public_id for r in results])
    """
    
    def __init__(
        self,
        builder: RequestBuilder,
        executor: RequestExecutorProtocol,
        validator: Optional[FileValidator] = None
    ):
        """
        Initialize upload facade.
        
        Args:
            builder: Request builder bound to the service configuration
            executor: Sends requests, normally a RequestHandler
            validator: Optional custom file validator
        """
        self._builder = builder
        self._executor = executor
        self._validator = validator or FileValidator()
        self._logger = get_logger('upload')
    
    def upload(
        self,
        path: Union[str, Path],
        random_public_id: bool = False,
        resource_type: ResourceType = ResourceType.IMAGE
    ) -> List[UploadResult]:
        """
        Upload a file, or every file below a directory.
        
        Files found in a directory always get a public id derived from
        their path. The first failure aborts the walk.
        
        Args:
            path: File or directory to upload
            random_public_id: Let the service pick the public id (single file only)
            resource_type: Image or raw
            
        Returns:
            One UploadResult per uploaded file
            
        Raises:
            FileNotFoundError: If path doesn't exist
            ValueError: If path is neither a file nor a directory
        """
        path = Path(path)
        rtype = ResourceType.parse(resource_type)
        
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        
        if path.is_dir():
            self._logger.info("Uploading directory %s as %s", path, rtype.value)
            return [
                self.upload_with_config(UploadConfig(file_path, rtype))
                for file_path in walk_files(path)
            ]
        
        return [self.upload_with_config(UploadConfig(path, rtype, random_public_id))]
    
    def upload_with_config(self, config: UploadConfig) -> UploadResult:
        """
        Upload a single file using explicit configuration.
        
        Args:
            config: Upload configuration
            
        Returns:
            UploadResult reported by the service
        """
        path, size = self._validator.validate(config.file_path)
        
        public_id = None
        if not config.random_public_id:
            public_id = config.public_id or derive_public_id(path, config.resource_type)
        
        self._logger.debug(
            "Uploading %s (%d bytes) as %s",
            path, size, public_id or '<random>'
        )
        with open(path, 'rb') as fd:
            request = self._builder.build_upload(
                path.name,
                fd,
                public_id=public_id,
                resource_type=config.resource_type
            )
            data = self._executor.execute(request)
        
        result = UploadResult.from_response(data, local_path=path)
        self._logger.info("Uploaded %s -> %s", path, result.public_id)
        return result
