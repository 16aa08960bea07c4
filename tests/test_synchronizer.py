import asyncio
import concurrent.futures
import copy

import pytest

from luxide.synchronizer import Synchronizer


async def _double(x):
    await asyncio.sleep(0)
    return x * 2


async def _fail():
    raise KeyError("missing")


def test_block_on_returns_result():
    with Synchronizer() as sync:
        assert sync.block_on(_double(21)) == _run_plain(21)


def _run_plain(x):
    return asyncio.run(_double(x))


def test_spawn_returns_future():
    with Synchronizer() as sync:
        futures = [sync.spawn(_double(n)) for n in range(5)]
        results = [f.result(timeout=2) for f in futures]
    assert results == [n * 2 for n in range(5)]


def test_block_on_propagates_exceptions():
    with Synchronizer() as sync:
        with pytest.raises(KeyError):
            sync.block_on(_fail())


def test_copy_is_independent():
    sync = Synchronizer()
    other = copy.copy(sync)
    sync.close()
    try:
        assert other.block_on(_double(3)) == 6
    finally:
        other.close()


def test_closed_synchronizer_rejects_work():
    sync = Synchronizer()
    sync.close()
    sync.close()
    with pytest.raises(RuntimeError):
        sync.block_on(_double(1))


def test_close_cancels_pending_work():
    sync = Synchronizer()
    future = sync.spawn(asyncio.sleep(60))
    sync.close()
    with pytest.raises(concurrent.futures.CancelledError):
        future.result(timeout=2)