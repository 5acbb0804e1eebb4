"""Tests for the finders and has_file in both implementations."""

import os
import re

import pytest

from findfileslib import aio, sync
from findfileslib.sync import (
    ConflictError,
    DirectoryNotFoundError,
    of_basename,
    of_extname,
)


class TestSyncFinders:
    """Test sync find_file, find_all_files and strict_find_file."""

    def test_find_all_files(self, user_dir):
        files = user_dir / "files"
        result = sync.find_all_files(str(files), of_basename(re.compile(r"^file")))
        assert sorted(result) == [str(files / "file.html"), str(files / "file.md")]

    def test_find_file_returns_first_in_name_order(self, user_dir):
        files = user_dir / "files"
        assert sync.find_file(files, of_basename(re.compile(r"^file"))) == str(files / "file.html")

    def test_strict_find_file_conflict(self, user_dir):
        files = user_dir / "files"
        with pytest.raises(ConflictError) as excinfo:
            sync.strict_find_file(files, of_basename(re.compile(r"^file")))
        assert excinfo.value.paths == (str(files / "file.html"), str(files / "file.md"))

    def test_strict_find_file_unique(self, user_dir):
        files = user_dir / "files"
        assert sync.strict_find_file(files, of_extname(".md")) == str(files / "file.md")
        assert sync.find_only_file(files, of_extname(".csv")) is None

    def test_strict_find_file_conflict_across_directories(self, user_dir):
        scope = [user_dir / "files", user_dir / "symbolic-files"]
        with pytest.raises(ConflictError):
            sync.strict_find_file(scope, of_basename("file.html"))

    def test_no_predicates_matches_nothing(self, user_dir):
        files = user_dir / "files"
        assert sync.find_file(files) is None
        assert sync.find_all_files(files) == []
        assert sync.strict_find_file(files) is None

    def test_predicates_are_a_conjunction(self, user_dir):
        files = user_dir / "files"
        result = sync.find_all_files(files, of_basename(re.compile(r"^file")), of_extname(".md"))
        assert result == [str(files / "file.md")]

    def test_scope_order_is_respected(self, user_dir):
        scope = [user_dir / "symbolic-files", user_dir / "files"]
        result = sync.find_all_files(scope, of_basename("file.html"))
        assert result == [
            str(user_dir / "symbolic-files" / "file.html"),
            str(user_dir / "files" / "file.html"),
        ]

    def test_default_scope_is_working_directory(self, user_dir, monkeypatch):
        monkeypatch.chdir(user_dir / "files")
        assert sync.find_file(None, of_extname(".md")) == os.path.join(os.getcwd(), "file.md")

    def test_callable_scope_is_first_predicate(self, user_dir, monkeypatch):
        monkeypatch.chdir(user_dir / "files")
        result = sync.find_all_files(of_basename(re.compile(r"^file")), of_extname(".html"))
        assert result == [os.path.join(os.getcwd(), "file.html")]

    def test_find_file_stops_reading_after_match(self, user_dir, tmp_path):
        scope = [user_dir / "files", tmp_path / "missing"]
        assert sync.find_file(scope, of_extname(".md")) == str(user_dir / "files" / "file.md")
        with pytest.raises(DirectoryNotFoundError):
            sync.find_all_files(scope, of_extname(".md"))

    def test_predicate_errors_propagate(self, user_dir):
        def failing(path):
            raise PermissionError(path)

        with pytest.raises(PermissionError):
            sync.find_file(user_dir / "files", failing)

    def test_repeated_calls_are_identical(self, user_dir):
        scope = sync.downward_directories(user_dir)
        first = sync.find_all_files(list(scope), of_extname(".md"))
        second = sync.find_all_files(list(sync.downward_directories(user_dir)), of_extname(".md"))
        assert first == second
        assert first

    def test_with_downward_scope(self, user_dir):
        result = sync.find_all_files(sync.downward_directories(user_dir), of_basename("file.json"))
        assert result == [str(user_dir / "symbolic-files" / "file.json")]

    def test_with_upward_scope(self, user_dir):
        start = user_dir / "files" / "file.md"
        assert sync.find_file(sync.upward_directories(start), of_basename("loop")) == str(user_dir / "loop")


class TestSyncHasFile:
    """Test the sync has_file predicate."""

    def test_directory_with_matching_child(self, user_dir):
        assert sync.has_file(of_extname(".md"))(user_dir / "files")
        assert not sync.has_file(of_extname(".json"))(user_dir / "files")

    def test_empty_directory_without_predicates(self, user_dir):
        assert sync.has_file()(user_dir / "directory") is False

    def test_missing_path_is_false(self, tmp_path):
        assert sync.has_file(of_basename("x"))(tmp_path / "missing") is False

    def test_file_path_is_false(self, user_dir):
        assert sync.has_file(of_basename("x"))(user_dir / "files" / "file.md") is False

    def test_as_finder_predicate(self, user_dir):
        result = sync.find_all_files(user_dir, sync.has_file(of_basename("file.md")))
        assert result == [str(user_dir / "files"), str(user_dir / "loop"), str(user_dir / "symbolic-folder")]


class TestAsyncFinders:
    """Test aio finders with sync and async scopes and predicates."""

    @pytest.mark.asyncio
    async def test_find_all_files(self, user_dir):
        files = user_dir / "files"
        result = await aio.find_all_files(files, of_basename(re.compile(r"^file")))
        assert result == [str(files / "file.html"), str(files / "file.md")]

    @pytest.mark.asyncio
    async def test_find_file(self, user_dir):
        files = user_dir / "files"
        assert await aio.find_file(files, of_basename(re.compile(r"^file"))) == str(files / "file.html")

    @pytest.mark.asyncio
    async def test_strict_find_file(self, user_dir):
        files = user_dir / "files"
        with pytest.raises(ConflictError):
            await aio.strict_find_file(files, of_basename(re.compile(r"^file")))
        assert await aio.find_only_file(files, of_extname(".md")) == str(files / "file.md")

    @pytest.mark.asyncio
    async def test_no_predicates(self, user_dir):
        assert await aio.find_file(user_dir) is None
        assert await aio.find_all_files(user_dir) == []
        assert await aio.strict_find_file(user_dir) is None

    @pytest.mark.asyncio
    async def test_async_predicate_and_async_scope(self, user_dir):
        async def is_json(path):
            return path.endswith(".json")

        result = await aio.find_all_files(aio.downward_directories(user_dir), is_json)
        assert result == [str(user_dir / "symbolic-files" / "file.json")]

    @pytest.mark.asyncio
    async def test_find_file_stops_reading_after_match(self, user_dir, tmp_path):
        scope = [user_dir / "files", tmp_path / "missing"]
        assert await aio.find_file(scope, of_extname(".md")) == str(user_dir / "files" / "file.md")
        with pytest.raises(DirectoryNotFoundError):
            await aio.find_all_files(scope, of_extname(".md"))

    @pytest.mark.asyncio
    async def test_find_file_stops_reading_async_scope(self, user_dir, tmp_path):
        async def directories():
            yield user_dir / "files"
            yield tmp_path / "missing"

        assert await aio.find_file(directories(), of_extname(".md")) == str(user_dir / "files" / "file.md")

    @pytest.mark.asyncio
    async def test_callable_scope(self, user_dir, monkeypatch):
        monkeypatch.chdir(user_dir / "files")
        assert await aio.find_file(of_extname(".md")) == os.path.join(os.getcwd(), "file.md")

    @pytest.mark.asyncio
    async def test_predicate_errors_propagate(self, user_dir):
        async def failing(path):
            raise PermissionError(path)

        with pytest.raises(PermissionError):
            await aio.find_all_files(user_dir, failing)

    @pytest.mark.asyncio
    async def test_has_file(self, user_dir, tmp_path):
        assert await aio.has_file(of_extname(".md"))(user_dir / "loop") is True
        assert await aio.has_file()(user_dir / "directory") is False
        assert await aio.has_file(of_extname(".md"))(tmp_path / "missing") is False

    @pytest.mark.asyncio
    async def test_matches_sync(self, user_dir):
        predicate = of_basename(re.compile(r"\.(md|html)$"))
        expected = sync.find_all_files(list(sync.downward_directories(user_dir)), predicate)
        result = await aio.find_all_files(aio.downward_directories(user_dir), predicate)
        assert result == expected
