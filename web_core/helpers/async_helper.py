"""
Run async-style APIs from synchronous test code.

The coroutine runs on a worker thread with its own event loop, so ``sync``
works whether or not the calling thread is already running a loop.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Awaitable, Callable, TypeVar


T = TypeVar("T")


async def _await(func: Callable[[], Awaitable[T]]) -> T:
    return await func()


def sync(func: Callable[[], Awaitable[T]]) -> T:
    """
    Block until the awaitable produced by ``func`` completes.

    Args:
        func: Zero-argument coroutine function

    Returns:
        The awaited result; exceptions propagate unchanged
    """
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(asyncio.run, _await(func)).result()
