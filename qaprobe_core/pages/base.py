import asyncio
import logging
from typing import Optional

from ..capabilities import Driver, EvidenceSink
from ..waits import WaitUtils

logger = logging.getLogger(__name__)


class BasePage:
    """Shared wiring for page objects: a driver, waits and an evidence sink.

    The driver is any object providing the Navigable, ElementQuery and
    WaitCapable capabilities; pages never touch Playwright directly.
    """

    def __init__(
        self,
        driver: Driver,
        evidence: Optional[EvidenceSink] = None,
        timeout_ms: int = WaitUtils.DEFAULT_TIMEOUT_MS,
        sleep=asyncio.sleep,
    ):
        self.driver = driver
        self.evidence = evidence
        self._sleep = sleep
        self.waits = WaitUtils(driver, timeout_ms=timeout_ms, sleep=sleep)

    async def navigate_to(self, url: str) -> None:
        await self.driver.navigate(url)
        logger.info(f"Navigating to: {url}")

    async def current_url(self) -> str:
        return await self.driver.current_url()

    async def title(self) -> str:
        return await self.driver.title()
