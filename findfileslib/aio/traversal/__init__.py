"""Async downward and upward traversals."""

from .downward import AsyncBreadthFirstTraverser, downward_files, downward_directories
from .upward import upward_directories, upward_files

__all__ = [
    'AsyncBreadthFirstTraverser',
    'downward_files',
    'downward_directories',
    'upward_directories',
    'upward_files',
]
