"""Injectable boundary for simulated asynchronous operations."""

import asyncio
from typing import Protocol


class Sleeper(Protocol):
    """Waits for a simulated operation to complete."""

    async def sleep(self, seconds: float) -> None:
        """Suspend for the given number of seconds."""


class AsyncioSleeper(Sleeper):
    """Sleeper backed by the running event loop."""

    async def sleep(self, seconds: float) -> None:
        """Suspend using asyncio.sleep."""
        await asyncio.sleep(seconds)
