"""Blocking file status predicates.

Status queries follow symbolic links. A path that does not exist is simply
not a file nor a directory; any other OSError (permissions, I/O errors)
propagates to the caller.
"""

import os
import stat as stat_module  # To avoid name collision with os.stat results
from typing import Optional


def safe_stat(path) -> Optional[os.stat_result]:
    """Stat a path, returning None when it does not exist."""
    try:
        return os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return None


def is_file(path) -> bool:
    """Check if a path exists and is a regular file."""
    result = safe_stat(path)
    return result is not None and stat_module.S_ISREG(result.st_mode)


def is_directory(path) -> bool:
    """Check if a path exists and is a directory."""
    result = safe_stat(path)
    return result is not None and stat_module.S_ISDIR(result.st_mode)


def path_exists(path) -> bool:
    """Check if a path exists (broken symbolic links do not)."""
    return safe_stat(path) is not None
