"""Synchronous downward and upward traversals."""

from .downward import BreadthFirstTraverser, downward_files, downward_directories
from .upward import upward_directories, upward_files

__all__ = [
    'BreadthFirstTraverser',
    'downward_files',
    'downward_directories',
    'upward_directories',
    'upward_files',
]
