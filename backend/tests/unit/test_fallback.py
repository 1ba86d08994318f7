"""Tests for primary-or-fixture reads."""

import pytest

from app.services.fallback import with_fallback


class FakeSession:
    def __init__(self):
        self.rollbacks = 0

    async def rollback(self):
        self.rollbacks += 1


def _fixture():
    return ["demo"]


class TestWithFallback:
    @pytest.mark.asyncio
    async def test_primary_rows_returned(self):
        async def primary():
            return ["live"]

        assert await with_fallback(primary, _fixture, "rows") == ["live"]

    @pytest.mark.asyncio
    async def test_empty_result_uses_fixture(self):
        async def primary():
            return []

        assert await with_fallback(primary, _fixture, "rows") == ["demo"]

    @pytest.mark.asyncio
    async def test_error_uses_fixture_and_rolls_back(self):
        session = FakeSession()

        async def primary():
            raise RuntimeError("relation does not exist")

        assert await with_fallback(primary, _fixture, "rows", session=session) == ["demo"]
        assert session.rollbacks == 1

    @pytest.mark.asyncio
    async def test_primary_called_once(self):
        calls = []

        async def primary():
            calls.append(1)
            raise ConnectionError("down")

        await with_fallback(primary, _fixture, "rows")
        assert calls == [1]
