"""
Checks run on a local file before it is sent to the upload endpoint.
"""
import stat
from pathlib import Path
from typing import Tuple, Union


class FileValidator:
    """Accepts regular files only; one stat call per file."""
    
    def validate(self, file_path: Union[str, Path]) -> Tuple[Path, int]:
        """
        Check that a path can be uploaded as a single asset.
        
        Symlinks are resolved by the stat call, so a link to a regular
        file is accepted.
        
        Args:
            file_path: Local path
            
        Returns:
            Tuple of (Path, size in bytes)
            
        Raises:
            FileNotFoundError: If nothing exists at the path
            ValueError: If the path is a directory, socket, device or fifo
        """
        path = Path(file_path)
        try:
            info = path.stat()
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {path}") from None
        
        if stat.S_ISDIR(info.st_mode):
            raise ValueError(f"Path is not a file: {path} is a directory")
        if not stat.S_ISREG(info.st_mode):
            raise ValueError(f"Path is not a file: {path}")
        
        return path, info.st_size
