"""
Tests for pacing clocks.
"""
import pytest

from wallbreaker.clock import Clock, AsyncioClock, InstantClock


class TestClocks:

    def test_both_satisfy_protocol(self):
        assert isinstance(AsyncioClock(), Clock)
        assert isinstance(InstantClock(), Clock)

    @pytest.mark.asyncio
    async def test_instant_clock_records(self):
        clock = InstantClock()
        await clock.sleep(0.3)
        await clock.sleep(1.5)
        assert clock.requested == [0.3, 1.5]
        assert clock.elapsed == pytest.approx(1.8)

    @pytest.mark.asyncio
    async def test_asyncio_clock_zero(self):
        await AsyncioClock().sleep(0)
