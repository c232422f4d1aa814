"""Tests for the async views: AsyncSome, AsyncNothing, AsyncOk, AsyncErr."""

import asyncio

import pytest

from fallible import (
    AsyncErr,
    AsyncNothing,
    AsyncOk,
    AsyncSome,
    Err,
    Nothing,
    Ok,
    Some,
)


async def square(n: int) -> int:
    await asyncio.sleep(0)
    return n * n


class AsyncCounter:
    """Async callable that records how often it was awaited."""

    def __init__(self, result=None):
        self.calls = 0
        self._result = result

    async def __call__(self, *args):
        self.calls += 1
        return self._result


class TestAsyncViewConstruction:
    """Tests for async_() on each variant."""

    def test_some_async(self):
        """Some.async_() holds the same value."""
        assert Some(1).async_() == AsyncSome(1)

    def test_nothing_async(self):
        """Nothing.async_() is the AsyncNothing singleton."""
        assert Nothing.async_() is AsyncNothing

    def test_result_async(self):
        """Ok and Err keep their payloads."""
        assert Ok(1).async_() == AsyncOk(1)
        assert Err("e").async_() == AsyncErr("e")


class TestAsyncOption:
    """Tests for AsyncSome and AsyncNothing combinators."""

    @pytest.mark.asyncio
    async def test_map(self):
        """map awaits the transformer."""
        assert await Some(2).async_().map(square) == Some(4)

    @pytest.mark.asyncio
    async def test_chained_map(self):
        """A second async_() chain computes over the resolved value."""
        four = await Some(2).async_().map(square)
        sixteen = await four.async_().map(square)
        assert sixteen == Some(16)

    @pytest.mark.asyncio
    async def test_nothing_map(self):
        """Nothing.async_().map() does not call the transformer."""
        fn = AsyncCounter(1)
        assert await Nothing.async_().map(fn) is Nothing
        assert fn.calls == 0

    @pytest.mark.asyncio
    async def test_map_nullable(self):
        """map_nullable collapses an awaited None to Nothing."""
        assert await Some(1).async_().map_nullable(AsyncCounter(None)) is Nothing
        assert await Some(1).async_().map_nullable(AsyncCounter(0)) == Some(0)

    @pytest.mark.asyncio
    async def test_nothing_map_nullable(self):
        """Nothing.map_nullable does not call the transformer."""
        fn = AsyncCounter(1)
        assert await AsyncNothing.map_nullable(fn) is Nothing
        assert fn.calls == 0

    @pytest.mark.asyncio
    async def test_filter(self):
        """filter awaits the predicate."""
        assert await Some(2).async_().filter(AsyncCounter(True)) == Some(2)
        assert await Some(2).async_().filter(AsyncCounter(False)) is Nothing

    @pytest.mark.asyncio
    async def test_nothing_filter(self):
        """Nothing.filter does not call the predicate."""
        fn = AsyncCounter(True)
        assert await AsyncNothing.filter(fn) is Nothing
        assert fn.calls == 0

    @pytest.mark.asyncio
    async def test_and_then(self):
        """and_then returns the awaited Option."""
        assert await Some(1).async_().and_then(AsyncCounter(Some("a"))) == Some("a")
        assert await Some(1).async_().and_then(AsyncCounter(Nothing)) is Nothing

    @pytest.mark.asyncio
    async def test_nothing_and_then(self):
        """Nothing.and_then short-circuits."""
        fn = AsyncCounter(Some(1))
        assert await AsyncNothing.and_then(fn) is Nothing
        assert fn.calls == 0

    @pytest.mark.asyncio
    async def test_or_else(self):
        """or_else only runs for Nothing."""
        fn = AsyncCounter(Some(0))
        assert await Some(1).async_().or_else(fn) == Some(1)
        assert fn.calls == 0
        assert await AsyncNothing.or_else(fn) == Some(0)
        assert await AsyncNothing.or_else(AsyncCounter(Nothing)) is Nothing

    @pytest.mark.asyncio
    async def test_ok_or_else(self):
        """ok_or_else awaits the error factory only for Nothing."""
        fn = AsyncCounter("missing")
        assert await Some(1).async_().ok_or_else(fn) == Ok(1)
        assert fn.calls == 0
        assert await AsyncNothing.ok_or_else(fn) == Err("missing")

    @pytest.mark.asyncio
    async def test_unwrap_or_else(self):
        """unwrap_or_else awaits the fallback only for Nothing."""
        fn = AsyncCounter(0)
        assert await Some(1).async_().unwrap_or_else(fn) == 1
        assert fn.calls == 0
        assert await AsyncNothing.unwrap_or_else(fn) == 0


class TestAsyncResult:
    """Tests for AsyncOk and AsyncErr combinators."""

    @pytest.mark.asyncio
    async def test_map(self):
        """map awaits the transformer for Ok only."""
        fn = AsyncCounter(1)
        assert await Ok(3).async_().map(square) == Ok(9)
        assert await Err("e").async_().map(fn) == Err("e")
        assert fn.calls == 0

    @pytest.mark.asyncio
    async def test_map_err(self):
        """map_err awaits the transformer for Err only."""
        fn = AsyncCounter("ignored")

        async def upper(e: str) -> str:
            return e.upper()

        assert await Err("e").async_().map_err(upper) == Err("E")
        assert await Ok(1).async_().map_err(fn) == Ok(1)
        assert fn.calls == 0

    @pytest.mark.asyncio
    async def test_map_or(self):
        """map_or resolves to a bare value."""
        fn = AsyncCounter(1)
        assert await Ok(3).async_().map_or(0, square) == 9
        assert await Err("e").async_().map_or(0, fn) == 0
        assert fn.calls == 0

    @pytest.mark.asyncio
    async def test_map_or_else(self):
        """map_or_else passes the error to the awaited fallback."""

        async def error_len(e: str) -> int:
            return len(e)

        assert await Ok(3).async_().map_or_else(error_len, square) == 9
        assert await Err("four").async_().map_or_else(error_len, square) == 4

    @pytest.mark.asyncio
    async def test_and_then(self):
        """and_then chains on Ok and short-circuits on Err."""
        fn = AsyncCounter(Ok("a"))
        assert await Ok(1).async_().and_then(fn) == Ok("a")
        assert await Err("e").async_().and_then(fn) == Err("e")
        assert fn.calls == 1

    @pytest.mark.asyncio
    async def test_or_else(self):
        """or_else recovers Err and leaves Ok alone."""
        fn = AsyncCounter(Ok(0))
        assert await Ok(1).async_().or_else(fn) == Ok(1)
        assert fn.calls == 0
        assert await Err("e").async_().or_else(fn) == Ok(0)

    @pytest.mark.asyncio
    async def test_unwrap_or_else(self):
        """unwrap_or_else awaits the fallback with the error."""

        async def error_len(e: str) -> int:
            return len(e)

        assert await Ok(1).async_().unwrap_or_else(error_len) == 1
        assert await Err("four").async_().unwrap_or_else(error_len) == 4

    @pytest.mark.asyncio
    async def test_transformer_exception_propagates(self):
        """An exception from the transformer propagates out of the await."""

        async def boom(_: int) -> int:
            raise LookupError("boom")

        with pytest.raises(LookupError, match="boom"):
            await Ok(1).async_().map(boom)
