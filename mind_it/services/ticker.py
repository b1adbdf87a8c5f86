"""Periodic one-second tick source for the running session"""
import asyncio
import logging
from typing import Callable, Optional

from mind_it.config.settings import settings

logger = logging.getLogger(__name__)

class SessionTicker:
    """Holds at most one live periodic task that drives a tick callback"""

    def __init__(self, interval_seconds: float = settings.TICK_INTERVAL_SECONDS):
        self.interval = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def is_active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, on_tick: Callable[[], None]) -> None:
        """Replace any live tick source with a new one; needs a running loop"""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(on_tick))
        logger.debug(f"Tick source started (interval={self.interval}s)")

    def cancel(self) -> None:
        """Release the tick source; safe to call repeatedly"""
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
            logger.debug("Tick source cancelled")
        self._task = None

    async def _run(self, on_tick: Callable[[], None]) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time() + self.interval
        while True:
            await asyncio.sleep(max(0.0, next_tick - loop.time()))
            next_tick += self.interval
            try:
                on_tick()
            except Exception as e:
                logger.error(f"Tick callback failed: {e}", exc_info=True)
