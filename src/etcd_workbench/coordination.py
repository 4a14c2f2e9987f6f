"""Seam between request handlers and the etcd client.

The etcd client itself lives outside this package. Handlers run each
client call through execute_with_timeout() so that a slow cluster
surfaces as TimeoutError, which the front controller reports as a
connect error instead of hanging the request.
"""

from __future__ import annotations

__all__ = [
    "execute_with_timeout",
]

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def execute_with_timeout(call: Awaitable[T], timeout_millis: int) -> T:
    """Await one etcd client call within its time budget.

    No retries happen here; retry policy belongs to the client.

    Args:
        call: Awaitable etcd client operation.
        timeout_millis: Time budget in milliseconds (execute_timeout_millis).

    Returns:
        Result of the call.

    Raises:
        TimeoutError: If the call does not finish in time.
        EtcdExecuteError: Propagated unchanged from the client.
    """
    return await asyncio.wait_for(call, timeout=timeout_millis / 1000)
