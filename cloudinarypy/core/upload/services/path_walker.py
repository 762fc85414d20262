"""Recursive discovery of files for bulk uploads."""
import os
from pathlib import Path
from typing import Iterator, Union


def walk_files(root: Union[str, Path]) -> Iterator[Path]:
    """
    Yield every regular file under root, depth-first in name order.
    
    Directories themselves are not yielded and symlinked directories are
    not followed. An error listing any directory propagates at once.
    
    Example:
        >>> for path in walk_files("static"):
        ...     print(path)
    """
    root = Path(root)
    with os.scandir(root) as it:
        entries = sorted(it, key=lambda e: e.name)
    
    for entry in entries:
        path = root / entry.name
        if entry.is_dir(follow_symlinks=False):
            yield from walk_files(path)
        elif entry.is_file():
            yield path
