"""Public id derivation from local paths."""
from pathlib import PurePath
from typing import Union

from ...api.config import ResourceType


def derive_public_id(
    path: Union[str, PurePath],
    resource_type: ResourceType = ResourceType.IMAGE
) -> str:
    """
    Returns an asset name from the parent dirname and the file name.
    
    Images lose their extension, raw files keep it:
    
        >>> derive_public_id("/tmp/images/logo.png")
        'images/logo'
        >>> derive_public_id("/tmp/css/default.css", ResourceType.RAW)
        'css/default.css'
    """
    path = PurePath(path)
    rtype = ResourceType.parse(resource_type)
    
    name = path.name if rtype is ResourceType.RAW else path.stem
    parent = path.parent.name
    if parent:
        return f"{parent}/{name}"
    return name
