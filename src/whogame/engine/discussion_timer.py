"""Discussion countdown."""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class DiscussionTimer:
    """One-second countdown for the discussion phase.

    Runs as an asyncio task on the current event loop. Each tick
    decrements `remaining` and calls `on_tick`; reaching zero calls
    `on_expire` once and stops the task. Expiry only notifies; it never
    ends the discussion by itself.
    """

    def __init__(
        self,
        length_seconds: int,
        on_tick: Optional[Callable[[int], None]] = None,
        on_expire: Optional[Callable[[], None]] = None,
        interval: float = 1.0,
    ):
        self.length_seconds = length_seconds
        self.remaining = length_seconds
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def expired(self) -> bool:
        return self.remaining <= 0

    def start(self) -> None:
        """Start ticking. Must be called from within a running event loop."""
        if self.running:
            return
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run())
        logger.debug("Discussion timer started at %ss", self.remaining)

    def stop(self) -> None:
        """Cancel the countdown. Safe to call when not running."""
        if self.running:
            self._task.cancel()
            logger.debug("Discussion timer stopped at %ss", self.remaining)
        self._task = None

    async def wait(self) -> None:
        """Wait until the countdown expires or is stopped."""
        if self._task is None:
            return
        try:
            await self._task
        except asyncio.CancelledError:
            pass

    async def _run(self) -> None:
        while self.remaining > 0:
            await asyncio.sleep(self._interval)
            self.remaining -= 1
            if self._on_tick is not None:
                self._on_tick(self.remaining)
        logger.info("Discussion time is up")
        if self._on_expire is not None:
            self._on_expire()

    @staticmethod
    def format_remaining(seconds: int) -> str:
        """Format seconds as M:SS."""
        return f"{seconds // 60}:{seconds % 60:02d}"
