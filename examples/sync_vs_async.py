#!/usr/bin/env python3
"""
Finding files with the sync and async implementations.

This example demonstrates:
- Locating the nearest project root above a path
- Collecting files below a directory, breadth-first
- Searching several directory trees in parallel with asyncio
"""

import asyncio
import logging
import re
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from findfileslib import aio, sync
from findfileslib.sync import (
    ConflictError,
    does_not_have_any_path_segment,
    of_basename,
    of_extname,
)

PROJECT_MARKERS = of_basename("setup.py", "pyproject.toml", ".git")
SKIPPED = does_not_have_any_path_segment(".git", "__pycache__", re.compile(r"^\.?venv$"), "node_modules")


def nearest_project_root(start: Path) -> Optional[str]:
    """Find the nearest ancestor holding a project marker."""
    return sync.find_file(sync.upward_directories(start), sync.has_file(PROJECT_MARKERS))


def sync_python_files(root_path: Path, max_depth: int) -> Tuple[List[str], float]:
    """Collect Python sources synchronously."""
    start_time = time.perf_counter()
    directories = [str(root_path)] + list(sync.downward_directories(root_path, max_depth))
    files = sync.find_all_files(directories, SKIPPED, of_extname(".py"), sync.is_file)
    return files, time.perf_counter() - start_time


async def async_python_files(root_path: Path, max_depth: int) -> Tuple[List[str], float]:
    """Collect Python sources asynchronously."""
    start_time = time.perf_counter()
    directories = [str(root_path)] + await aio.all_elements(aio.downward_directories(root_path, max_depth))
    files = await aio.find_all_files(directories, SKIPPED, of_extname(".py"), aio.is_file)
    return files, time.perf_counter() - start_time


async def parallel_readme_search(paths: List[Path]) -> Tuple[List[Optional[str]], float]:
    """Look for the README of several directories in parallel."""
    start_time = time.perf_counter()
    readme = of_basename(re.compile(r"^readme(\.\w+)?$", re.IGNORECASE))

    async def find_readme(path: Path) -> Optional[str]:
        try:
            return await aio.strict_find_file(path, readme)
        except ConflictError as error:
            print(f"   ! {path.name}: {len(error.paths)} candidate READMEs")
            return error.paths[0]

    results = await asyncio.gather(*[find_readme(p) for p in paths])
    return list(results), time.perf_counter() - start_time


def main():
    """Run the example."""
    logging.basicConfig(level=logging.WARNING)

    # Get the root path from command line or use current directory
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()

    print("FindFilesLib - Sync and Async Finders")
    print("=" * 60)
    print(f"Directory: {root_path}")
    print("-" * 60)

    print("\n1. Nearest project root:")
    print(f"   {nearest_project_root(root_path / 'placeholder') or 'none found'}")

    print("\n2. Python sources (synchronous):")
    sync_files, sync_time = sync_python_files(root_path, max_depth=3)
    print(f"   Files: {len(sync_files):,}")
    print(f"   Time: {sync_time:.3f} seconds")

    print("\n3. Python sources (asynchronous):")
    async_files, async_time = asyncio.run(async_python_files(root_path, max_depth=3))
    print(f"   Files: {len(async_files):,}")
    print(f"   Time: {async_time:.3f} seconds")
    print(f"   Same results: {sync_files == async_files}")

    subdirs = [p for p in sorted(root_path.iterdir()) if p.is_dir()][:5]
    if subdirs:
        print("\n4. README of each subdirectory (parallel):")
        readmes, par_time = asyncio.run(parallel_readme_search(subdirs))
        for subdir, found in zip(subdirs, readmes):
            print(f"   {subdir.name}: {found or '-'}")
        print(f"   Time: {par_time:.3f} seconds")


if __name__ == "__main__":
    main()
