"""
Time budget for model calls.

The operation and a timer run as two independent tasks; whichever finishes
first wins and the other one is cancelled.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from codenote.utils.exceptions import ModelTimeoutError

T = TypeVar("T")


async def with_timeout(operation: Callable[[], Awaitable[T]], seconds: float) -> T:
    """
    Race an async operation against a timer.

    Args:
        operation: Zero-argument callable returning the awaitable to run
        seconds: Time budget in seconds

    Returns:
        Result of the operation if it finished first

    Raises:
        ModelTimeoutError: If the timer finished first
        Exception: Whatever the operation raised
    """
    operation_task = asyncio.ensure_future(operation())
    timer_task = asyncio.ensure_future(asyncio.sleep(seconds))

    try:
        done, _ = await asyncio.wait(
            {operation_task, timer_task}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        # Cancelled callers must not leave either task running.
        for task in (operation_task, timer_task):
            if not task.done():
                task.cancel()

    if operation_task in done:
        return operation_task.result()

    raise ModelTimeoutError(
        f"Model call timed out after {seconds:.1f}s", context={"timeout": seconds}
    )
