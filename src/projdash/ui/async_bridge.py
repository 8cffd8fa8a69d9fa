"""qasync event loop integration so the project load can be awaited under Qt."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any, TypeVar

from PySide6.QtWidgets import QApplication
from qasync import QEventLoop

logger = logging.getLogger(__name__)
_PENDING: set[asyncio.Task[Any]] = set()

T = TypeVar("T")


def create_event_loop(app: QApplication) -> QEventLoop:
    """Install a qasync loop that drives both Qt events and asyncio tasks."""
    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)
    return loop


def schedule(coro: Coroutine[Any, Any, T]) -> asyncio.Task[T]:
    """Run ``coro`` on the current loop, keeping a reference until it finishes."""
    task: asyncio.Task[T] = asyncio.create_task(coro)
    _PENDING.add(task)
    task.add_done_callback(_on_done)
    return task


def cancel_pending() -> None:
    """Cancel every scheduled task that has not finished yet."""
    current = asyncio.current_task()
    for task in list(_PENDING):
        if task is not current:
            task.cancel()


def _on_done(task: asyncio.Task[Any]) -> None:
    _PENDING.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Scheduled task failed", exc_info=exc)
