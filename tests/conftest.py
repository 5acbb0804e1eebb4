"""Shared fixtures for FindFilesLib tests.

The fixtures build real directory trees in a temporary directory so both
the sync and aio implementations run against the actual filesystem.
"""

import os
from pathlib import Path

import pytest


def create_user_tree(base_dir: Path) -> Path:
    """Create a test directory structure.

    Structure:
    base_dir/home/user/
    ├── files/
    │   ├── file.html
    │   └── file.md
    ├── symbolic-files/
    │   ├── file.html -> ../files/file.html
    │   └── file.json
    ├── symbolic-folder -> files/
    ├── loop/
    │   ├── file.md
    │   └── loop -> loop/  (cycle)
    ├── breadth-first/
    │   └── {1,2,3}/{1,2,3}
    └── directory/         (empty)
    """
    user = base_dir / "home" / "user"
    files = user / "files"
    files.mkdir(parents=True)
    (files / "file.md").write_text("")
    (files / "file.html").write_text("")

    symbolic_files = user / "symbolic-files"
    symbolic_files.mkdir()
    (symbolic_files / "file.json").write_text("")
    os.symlink(files / "file.html", symbolic_files / "file.html")

    os.symlink(files, user / "symbolic-folder", target_is_directory=True)

    loop = user / "loop"
    loop.mkdir()
    (loop / "file.md").write_text("")
    os.symlink(loop, loop / "loop", target_is_directory=True)

    breadth_first = user / "breadth-first"
    for parent in ("1", "2", "3"):
        for child in ("1", "2", "3"):
            (breadth_first / parent).mkdir(parents=True, exist_ok=True)
            (breadth_first / parent / child).write_text("")

    (user / "directory").mkdir()
    return user


@pytest.fixture
def user_dir(tmp_path) -> Path:
    """Real directory tree rooted at ``<tmp>/home/user``."""
    return create_user_tree(tmp_path)


@pytest.fixture
def nested_dir(tmp_path) -> Path:
    """Chain of directories ``<tmp>/a/b/c`` with one file per level.

    Structure:
    a/
    ├── a.txt
    └── b/
        ├── b.txt
        └── c/
            └── c.txt
    """
    c = tmp_path / "a" / "b" / "c"
    c.mkdir(parents=True)
    (tmp_path / "a" / "a.txt").write_text("a")
    (tmp_path / "a" / "b" / "b.txt").write_text("b")
    (c / "c.txt").write_text("c")
    return tmp_path / "a"

