"""Upload mapping administration over the admin API."""
from typing import Optional

from .models import UploadMapping, UploadMappingList
from ..api.request import RequestBuilder
from ..logging import get_logger
from ..upload.protocols import RequestExecutorProtocol

MAPPINGS_PATH = 'upload_mappings'


class UploadMappingService:
    """CRUD calls against the upload_mappings endpoint, one round trip each."""
    
    def __init__(self, builder: RequestBuilder, executor: RequestExecutorProtocol):
        self._builder = builder
        self._executor = executor
        self._logger = get_logger('admin')
    
    def list(self, next_cursor: Optional[str] = None) -> UploadMappingList:
        """Lists upload mappings, optionally from a pagination cursor."""
        request = self._builder.build_admin(
            'GET', MAPPINGS_PATH, {'next_cursor': next_cursor}
        )
        return UploadMappingList.from_dict(self._executor.execute(request))
    
    def get(self, folder: str) -> UploadMapping:
        """Returns the mapping of one folder."""
        _require(folder=folder)
        request = self._builder.build_admin('GET', MAPPINGS_PATH, {'folder': folder})
        return UploadMapping.from_dict(self._executor.execute(request))
    
    def create(self, folder: str, template: str) -> str:
        """Creates a mapping and returns the service message."""
        _require(folder=folder, template=template)
        return self._send('POST', folder=folder, template=template)
    
    def update(self, folder: str, template: str) -> str:
        """Points an existing folder at a new template."""
        _require(folder=folder, template=template)
        return self._send('PUT', folder=folder, template=template)
    
    def delete(self, folder: str) -> str:
        """Deletes the mapping of a folder."""
        _require(folder=folder)
        return self._send('DELETE', folder=folder)
    
    def _send(self, method: str, **params) -> str:
        request = self._builder.build_admin(method, MAPPINGS_PATH, params)
        data = self._executor.execute(request)
        message = data.get('message', '')
        self._logger.info("%s upload mapping %s: %s", method, params['folder'], message)
        return message


def _require(**values):
    for name, value in values.items():
        if not value:
            raise ValueError(f"{name} is required")
