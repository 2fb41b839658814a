# -*- coding: utf-8 -*-
"""Location: ./ssui_e2e/utils/clock.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Injectable clocks and the refresh-window wait.

The console refuses to refresh a service description more often than once per
refresh window. Scenarios that edit a description and then check the refresh
timestamp must therefore let the window elapse first. ``RefreshWindow`` captures
the start instant and pads whatever time remains, blocking through a ``Clock``
so unit tests can substitute a fake one.

Examples:
    >>> class FakeClock:
    ...     def __init__(self):
    ...         self.now = 0.0
    ...     def monotonic(self):
    ...         return self.now
    ...     def sleep(self, seconds):
    ...         self.now += seconds
    >>> clock = FakeClock()
    >>> window = RefreshWindow(clock, floor_seconds=60)
    >>> window.start()
    >>> clock.now = 15.0
    >>> window.wait_out()
    45.0
    >>> clock.now
    60.0
"""

# Standard
import logging
import time
from typing import Optional, Protocol

# Third-Party
from playwright.sync_api import Page

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Time source that can also block the caller."""

    def monotonic(self) -> float:
        """Seconds from an arbitrary fixed origin."""

    def sleep(self, seconds: float) -> None:
        """Block for the given number of seconds."""


class SystemClock:
    """Wall clock backed by the ``time`` module."""

    def monotonic(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


class PageClock(SystemClock):
    """Wall clock that pauses through the browser page.

    ``page.wait_for_timeout`` keeps Playwright's event loop serviced while the
    scenario is blocked, unlike a bare ``time.sleep``.
    """

    def __init__(self, page: Page):
        self.page = page

    def sleep(self, seconds: float) -> None:
        self.page.wait_for_timeout(seconds * 1000)


class RefreshWindow:
    """Minimum-duration window measured from ``start()``."""

    def __init__(self, clock: Clock, floor_seconds: float = 60.0):
        if floor_seconds < 0:
            raise ValueError("floor_seconds must not be negative")
        self.clock = clock
        self.floor_seconds = floor_seconds
        self._started_at: Optional[float] = None

    @property
    def started(self) -> bool:
        """Whether ``start()`` has been called."""
        return self._started_at is not None

    def start(self) -> None:
        """Capture the start instant."""
        self._started_at = self.clock.monotonic()

    def elapsed(self) -> float:
        """Seconds since ``start()``.

        Raises:
            RuntimeError: If the window was never started.
        """
        if self._started_at is None:
            raise RuntimeError("Refresh window has not been started")
        return self.clock.monotonic() - self._started_at

    def remaining(self) -> float:
        """Seconds left until the floor is reached, never negative."""
        return max(0.0, self.floor_seconds - self.elapsed())

    def wait_out(self) -> float:
        """Block until the floor has elapsed.

        Returns:
            The number of seconds actually waited.
        """
        remaining = self.remaining()
        if remaining > 0:
            logger.info("Waiting %d ms for the refresh window to pass", int(remaining * 1000))
            self.clock.sleep(remaining)
        return remaining
