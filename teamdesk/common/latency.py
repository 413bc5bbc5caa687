"""Simulated round-trip latency for the in-memory data layer.

The sample repositories answer instantly; these awaits stand in for the
network hop a real backend would add. Being plain ``asyncio.sleep`` calls,
they are cancelled together with the request that awaits them.
"""

from __future__ import annotations

import asyncio

from teamdesk.config import settings


async def simulate_latency(milliseconds: int) -> None:
    """Suspend the caller for *milliseconds* (no-op when ``<= 0``)."""
    if milliseconds > 0:
        await asyncio.sleep(milliseconds / 1000)


async def load_delay() -> None:
    await simulate_latency(settings.LOAD_LATENCY_MS)


async def update_delay() -> None:
    await simulate_latency(settings.UPDATE_LATENCY_MS)


async def login_delay() -> None:
    await simulate_latency(settings.LOGIN_LATENCY_MS)
