"""
Sync API wrappers for async client methods.
"""

import asyncio
import concurrent.futures
from typing import Any, Callable, Coroutine


def detect_event_loop_state() -> str:
    """Detect current event loop state.

    Returns:
        - "none": No event loop running in current thread
        - "running": An event loop is running in current thread
    """
    try:
        asyncio.get_running_loop()
        return "running"
    except RuntimeError:
        return "none"


def run_in_thread_pool(coro: Coroutine[Any, Any, Any]) -> Any:
    """Run coroutine to completion on a worker thread with its own loop."""
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(asyncio.run, coro)
        return future.result()


def run_sync(coro: Coroutine[Any, Any, Any]) -> Any:
    """Block until the coroutine completes.

    Inside a running event loop the coroutine is moved to a worker thread so
    the caller's loop is not re-entered.
    """
    if detect_event_loop_state() == "running":
        return run_in_thread_pool(coro)
    return asyncio.run(coro)


def sync_method(name: str) -> Callable[..., Any]:
    """Build a blocking twin for the async method ``name`` of a client class."""

    def method(self: Any, *args: Any, **kwargs: Any) -> Any:
        return run_sync(getattr(self, name)(*args, **kwargs))

    method.__name__ = f"{name}_sync"
    method.__doc__ = f"Synchronous version of {name}."
    return method
