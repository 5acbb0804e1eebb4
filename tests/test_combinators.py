"""Tests for predicate combinators in both implementations."""

import asyncio

import pytest

from findfileslib import aio, sync


def raise_error(element):
    raise RuntimeError(f"failed on {element}")


class Recorder:
    """Predicate returning a fixed value and recording its calls."""

    def __init__(self, value: bool):
        self.value = value
        self.calls = []

    def __call__(self, element):
        self.calls.append(element)
        return self.value


class AsyncRecorder(Recorder):
    """Coroutine predicate returning a fixed value and recording its calls."""

    async def __call__(self, element):
        await asyncio.sleep(0)
        self.calls.append(element)
        return self.value


class TestSyncCombinators:
    """Test sync conjunction and disjunction."""

    @pytest.mark.parametrize("element", ["", "/home/user", 0, None])
    def test_empty_conjunction_is_true(self, element):
        assert sync.conjunction([])(element) is True

    @pytest.mark.parametrize("element", ["", "/home/user", 0, None])
    def test_empty_disjunction_is_false(self, element):
        assert sync.disjunction([])(element) is False

    def test_conjunction_requires_every_predicate(self):
        assert sync.conjunction([lambda x: x > 0, lambda x: x < 10])(5)
        assert not sync.conjunction([lambda x: x > 0, lambda x: x < 10])(50)

    def test_disjunction_requires_any_predicate(self):
        assert sync.disjunction([lambda x: x < 0, lambda x: x > 10])(50)
        assert not sync.disjunction([lambda x: x < 0, lambda x: x > 10])(5)

    def test_conjunction_short_circuits_on_first_false(self):
        first, second = Recorder(False), Recorder(True)
        assert not sync.conjunction([first, second])("x")
        assert first.calls == ["x"]
        assert second.calls == []

    def test_disjunction_short_circuits_on_first_true(self):
        first, second = Recorder(True), Recorder(False)
        assert sync.disjunction([first, second])("x")
        assert second.calls == []

    def test_error_propagates_and_stops_evaluation(self):
        after = Recorder(True)
        with pytest.raises(RuntimeError, match="failed on x"):
            sync.conjunction([Recorder(True), raise_error, after])("x")
        with pytest.raises(RuntimeError):
            sync.disjunction([Recorder(False), raise_error, after])("x")
        assert after.calls == []


class TestAsyncCombinators:
    """Test aio conjunction and disjunction with mixed predicates."""

    @pytest.mark.asyncio
    async def test_empty_identities(self):
        assert await aio.conjunction([])("anything") is True
        assert await aio.disjunction([])("anything") is False

    @pytest.mark.asyncio
    async def test_mixes_sync_and_async_predicates(self):
        predicate = aio.conjunction([AsyncRecorder(True), Recorder(True)])
        assert await predicate("x") is True

        predicate = aio.disjunction([Recorder(False), AsyncRecorder(True)])
        assert await predicate("x") is True

    @pytest.mark.asyncio
    async def test_conjunction_short_circuits(self):
        first, second = AsyncRecorder(False), AsyncRecorder(True)
        assert await aio.conjunction([first, second])("x") is False
        assert second.calls == []

    @pytest.mark.asyncio
    async def test_disjunction_short_circuits(self):
        first, second = AsyncRecorder(True), Recorder(True)
        assert await aio.disjunction([first, second])("x") is True
        assert second.calls == []

    @pytest.mark.asyncio
    async def test_async_error_propagates(self):
        async def failing(element):
            raise PermissionError("denied")

        after = Recorder(True)
        with pytest.raises(PermissionError, match="denied"):
            await aio.conjunction([failing, after])("x")
        assert after.calls == []
