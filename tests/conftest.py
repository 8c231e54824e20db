"""Shared fixtures for gesture_events tests."""

import asyncio

import pytest

from gesture_events.runtime import uninstall_engine


@pytest.fixture(autouse=True)
def no_engine():
    """Every test starts and ends without an installed engine."""
    uninstall_engine()
    yield
    uninstall_engine()


@pytest.fixture
def loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


async def settle(rounds: int = 5):
    """Let pending loader tasks and their callbacks run."""
    for _ in range(rounds):
        await asyncio.sleep(0)
