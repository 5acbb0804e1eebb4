"""FindFilesLib - Find files by patterns, upwards or downwards.

FindFilesLib combines path predicates (base name, extension, directory
name, path segments, matching children) with traversals (a directory, a
breadth-first subtree, an ancestor chain) and finders (first match, all
matches, exactly one match).

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from findfileslib.sync import find_file, of_basename

Asynchronous:
    from findfileslib.aio import find_file, of_basename
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both implementations share the same semantics and ordering guarantees.
Pick the one that fits your application.
"""

import logging

__version__ = "0.1.0"

# The library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export submodules for convenient access
from . import sync
from . import aio

# Users must explicitly choose their implementation
__all__ = [
    "__version__",
    "sync",
    "aio",
]
