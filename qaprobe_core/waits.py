"""
Readiness waits for page objects.

Explicit condition polling replaces fixed sleeps wherever the page gives a
usable signal (ready state, visibility, element counts). Fixed delays are
kept only as the upper bound of wait_for_count_stable.
"""

import asyncio
import logging
from typing import Any, List, Optional, Union

from .errors import NotFoundError, StaleReferenceError

logger = logging.getLogger(__name__)


class WaitUtils:
    """Bounded waits over a WaitCapable + ElementQuery driver."""

    DEFAULT_TIMEOUT_MS = 15000

    def __init__(self, driver, timeout_ms: int = DEFAULT_TIMEOUT_MS, sleep=asyncio.sleep):
        self.driver = driver
        self.timeout_ms = timeout_ms
        self._sleep = sleep

    async def wait_for_page_load(self) -> None:
        """Wait for document.readyState == "complete"."""
        async def ready():
            return await self.driver.evaluate("() => document.readyState") == "complete"

        await self.driver.wait_until(ready, timeout_ms=self.timeout_ms, message="document ready state")

    async def wait_for_visible(self, target: Union[str, Any]):
        """Wait until the selector (or handle) is displayed; returns the handle."""
        async def visible():
            handle = await self._resolve(target)
            return handle if await self.driver.is_displayed(handle) else None

        return await self.driver.wait_until(visible, timeout_ms=self.timeout_ms, message=f"{target} visible")

    async def wait_for_clickable(self, target: Union[str, Any]):
        """Wait until the element is displayed and enabled; returns the handle."""
        async def clickable():
            handle = await self._resolve(target)
            if await self.driver.is_displayed(handle) and await self.driver.is_enabled(handle):
                return handle
            return None

        return await self.driver.wait_until(clickable, timeout_ms=self.timeout_ms, message=f"{target} clickable")

    async def wait_for_all_visible(self, selector: str) -> List[Any]:
        async def all_visible():
            handles = await self.driver.find_elements(selector)
            if not handles:
                return None
            for handle in handles:
                if not await self.driver.is_displayed(handle):
                    return None
            return handles

        return await self.driver.wait_until(all_visible, timeout_ms=self.timeout_ms, message=f"all {selector} visible")

    async def wait_for_count_stable(
        self,
        selector: str,
        max_wait_ms: int,
        poll_ms: int = 250,
        required_stable: int = 2,
        grow_from: Optional[int] = None,
    ) -> int:
        """
        Wait for the number of elements matching selector to settle.

        Stops early when the count has been unchanged (and non-zero) for
        ``required_stable`` consecutive polls, or, when ``grow_from`` is
        given, as soon as the count exceeds it. Never waits longer than
        ``max_wait_ms`` and never raises.

        Args:
            selector: CSS selector to count
            max_wait_ms: Upper bound, the former fixed settle delay
            poll_ms: Interval between counts
            required_stable: Consecutive equal counts needed
            grow_from: Count before an action expected to add elements

        Returns:
            Last observed count
        """
        polls = max_wait_ms // poll_ms if poll_ms > 0 else 0
        prev_count = -1
        stable = 0
        count = 0

        for _ in range(polls):
            await self._sleep(poll_ms / 1000)
            try:
                count = len(await self.driver.find_elements(selector))
            except StaleReferenceError:
                stable = 0
                continue

            if grow_from is not None and count > grow_from:
                logger.debug(f"{selector}: count grew {grow_from} -> {count}")
                return count
            if grow_from is None and count == prev_count and count > 0:
                stable += 1
                if stable >= required_stable:
                    logger.debug(f"{selector}: count stable at {count}")
                    return count
            else:
                stable = 0
                prev_count = count

        logger.debug(f"{selector}: settle bound {max_wait_ms}ms reached, count {count}")
        return count

    async def pause(self, ms: int) -> None:
        """Fixed delay for actions with no observable completion signal."""
        if ms > 0:
            await self._sleep(ms / 1000)

    async def _resolve(self, target):
        if isinstance(target, str):
            return await self.driver.find_element(target)
        if target is None:
            raise NotFoundError("No element given")
        return target
