"""
Pacing clocks.

Battle pauses are presentation pacing only; outcome ordering never depends
on them. The simulator awaits whichever clock it was given.
"""

import asyncio
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Anything that can be awaited for a number of seconds."""

    async def sleep(self, seconds: float) -> None:
        ...


class AsyncioClock:
    """Real wall-clock pauses via asyncio."""

    async def sleep(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)


class InstantClock:
    """
    Never waits. Records every requested pause so tests can check that a
    pause happened without spending real time on it.
    """

    def __init__(self) -> None:
        self.requested: List[float] = []

    @property
    def elapsed(self) -> float:
        """Total simulated seconds."""
        return sum(self.requested)

    async def sleep(self, seconds: float) -> None:
        self.requested.append(seconds)
