import asyncio
from unittest.mock import MagicMock

import pytest

from doublevisuals.consent.banner import BannerPhase, ConsentBannerController
from doublevisuals.consent.store import ConsentStore
from doublevisuals.session.scheduler import AsyncioScheduler


@pytest.mark.asyncio
async def test_animation_frame_runs_after_current_callback():
    scheduler = AsyncioScheduler(frame_interval_ms=1)
    ran = asyncio.Event()
    scheduler.request_animation_frame(ran.set)
    assert not ran.is_set()
    await asyncio.wait_for(ran.wait(), timeout=1)


@pytest.mark.asyncio
async def test_cancelled_timer_never_fires():
    scheduler = AsyncioScheduler()
    callback = MagicMock()
    handle = scheduler.call_later(10, callback)
    handle.cancel()
    await asyncio.sleep(0.05)
    callback.assert_not_called()


@pytest.mark.asyncio
async def test_banner_lifecycle_on_event_loop():
    store = MagicMock(spec=ConsentStore)
    store.has_accepted.return_value = False
    controller = ConsentBannerController(
        store=store, scheduler=AsyncioScheduler(frame_interval_ms=1), close_delay_ms=20
    )

    controller.start()
    assert controller.phase is BannerPhase.ENTERING
    await asyncio.sleep(0.02)
    assert controller.phase is BannerPhase.VISIBLE

    controller.accept()
    await asyncio.sleep(0.005)
    assert controller.phase is BannerPhase.CLOSING
    store.mark_accepted.assert_not_called()

    await asyncio.sleep(0.05)
    store.mark_accepted.assert_called_once()
    assert controller.phase is BannerPhase.HIDDEN
