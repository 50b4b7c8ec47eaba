"""Tests for concurrent dispatch and cancellation."""

import asyncio

import pytest

from kloudflare import Kloudflare
from kloudflare.models.envelope import Id


def _body() -> dict:
    return {"success": True, "errors": [], "messages": [], "result": {"id": "a"}}


class TestConcurrentDispatch:
    @pytest.mark.asyncio
    async def test_shared_transport_used_concurrently(self, make_transport):
        """Many in-flight calls share one transport without serializing."""
        transport = make_transport(json_body=_body(), delay=0.05)
        client = Kloudflare("tok", transport=transport)

        results = await asyncio.gather(*(client.get(f"/items/{i}", Id) for i in range(10)))

        assert [r.id for r in results] == ["a"] * 10
        assert len(transport.calls) == 10
        assert transport.max_in_flight == 10

    @pytest.mark.asyncio
    async def test_independent_failures(self, make_transport):
        """One failed call surfaces on its own without affecting the others."""
        ok_client = Kloudflare("tok", transport=make_transport(json_body=_body()))
        bad_client = Kloudflare("tok", transport=make_transport(500))

        results = await asyncio.gather(
            ok_client.get("/a", Id),
            bad_client.get("/b", Id),
            return_exceptions=True,
        )
        assert results[0] == Id(id="a")
        assert isinstance(results[1], Exception)


class TestCancellation:
    @pytest.mark.asyncio
    async def test_cancel_propagates_to_transport(self, make_transport):
        """Cancelling execute cancels the in-flight transport call."""
        transport = make_transport(json_body=_body(), delay=10)
        client = Kloudflare("tok", transport=transport)

        task = asyncio.create_task(client.get("/slow", Id))
        while not transport.calls:
            await asyncio.sleep(0)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert transport.cancelled == 1
        assert transport.in_flight == 0

    @pytest.mark.asyncio
    async def test_timeout_wrapper(self, make_transport):
        transport = make_transport(json_body=_body(), delay=10)
        client = Kloudflare("tok", transport=transport)

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(client.get("/slow", Id), timeout=0.01)
        assert transport.cancelled == 1
