"""Work queue coordinating directory tasks between walker agents."""

import asyncio
import logging
from collections import deque
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Task:
    """One directory waiting to be scanned."""

    directory_path: str
    depth: int


class _Done:
    def __repr__(self) -> str:
        return "DONE"


DONE = _Done()


class WorkQueue:
    """Pending tasks plus a count of tasks that have not finished scanning.

    A task counts as in flight from ``submit`` until ``complete``, not until
    ``take``, because its scan may still submit children. The queue closes the
    first time the count drops to zero and every waiting taker gets ``DONE``.
    """

    def __init__(self) -> None:
        self._ready: deque[Task] = deque()
        self._waiters: deque[asyncio.Future] = deque()
        self._in_flight = 0
        self._closed = False

    @property
    def in_flight(self) -> int:
        return self._in_flight

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, task: Task) -> None:
        if self._closed:
            logger.debug("Queue closed, dropping task: %s", task.directory_path)
            return

        self._in_flight += 1
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_result(task)
                return
        self._ready.append(task)

    async def take(self) -> Task | _Done:
        if self._ready:
            return self._ready.popleft()
        if self._closed or self._in_flight == 0:
            return DONE

        waiter = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        return await waiter

    def complete(self, task: Task) -> None:
        if self._in_flight == 0:
            raise RuntimeError(f"Completed more tasks than were submitted: {task.directory_path}")

        self._in_flight -= 1
        if self._in_flight == 0:
            self._close()

    def _close(self) -> None:
        self._closed = True
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_result(DONE)
