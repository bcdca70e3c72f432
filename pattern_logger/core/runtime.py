"""
Runtime context providers

Supplies the execution context a log event captures: elapsed time,
thread identity, the running coroutine and the caller's source location.
"""

from __future__ import annotations

import asyncio
import itertools
import sys
import threading
import time
import weakref
from typing import Callable, Optional, Tuple

_START = time.monotonic()

_fiber_ids: "weakref.WeakKeyDictionary[asyncio.Task, int]" = weakref.WeakKeyDictionary()
_fiber_counter = itertools.count(1)
_fiber_lock = threading.Lock()
_fiber_provider: Optional[Callable[[], int]] = None


def elapsed_ms() -> int:
    """Milliseconds elapsed since the logging facility was loaded."""
    return int((time.monotonic() - _START) * 1000)


def current_thread_id() -> int:
    """OS-level id of the calling thread."""
    return threading.get_native_id()


def current_thread_name() -> str:
    """Name of the calling thread."""
    return threading.current_thread().name


def _task_fiber_id() -> int:
    try:
        task = asyncio.current_task()
    except RuntimeError:
        return 0
    if task is None:
        return 0

    with _fiber_lock:
        fiber_id = _fiber_ids.get(task)
        if fiber_id is None:
            fiber_id = next(_fiber_counter)
            _fiber_ids[task] = fiber_id
        return fiber_id


def current_fiber_id() -> int:
    """
    Id of the coroutine running on the calling thread.

    By default each asyncio task gets a small stable id starting at 1,
    and code running outside any task reports 0. Other cooperative
    runtimes can plug in their own provider with set_fiber_id_provider().
    """
    provider = _fiber_provider
    if provider is not None:
        return provider()
    return _task_fiber_id()


def set_fiber_id_provider(provider: Optional[Callable[[], int]]) -> None:
    """
    Install a custom fiber id provider.

    Args:
        provider: Zero-argument callable returning the current fiber id,
                  or None to restore the asyncio task based default
    """
    global _fiber_provider
    _fiber_provider = provider


def caller_location(depth: int = 1) -> Tuple[str, int]:
    """
    Get the source location of a calling frame.

    Args:
        depth: Frames to walk up from the caller of this function

    Returns:
        Tuple of (file_name, line_number), ("", 0) if unavailable
    """
    try:
        frame = sys._getframe(depth + 1)  # +1 to skip this function itself
        return frame.f_code.co_filename, frame.f_lineno
    except (ValueError, AttributeError):
        return "", 0
