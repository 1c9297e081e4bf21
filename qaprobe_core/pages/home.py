import asyncio
import logging

from ..extraction.selectors import HeaderSelectors
from ..waits import WaitUtils
from .base import BasePage

logger = logging.getLogger(__name__)

HOME_URL = "https://www.americanas.com.br/"


class HomePage(BasePage):
    """Store front page: header and search box."""

    def __init__(
        self,
        driver,
        url: str = HOME_URL,
        selectors: HeaderSelectors = HeaderSelectors(),
        evidence=None,
        timeout_ms: int = WaitUtils.DEFAULT_TIMEOUT_MS,
        sleep=asyncio.sleep,
    ):
        super().__init__(driver, evidence=evidence, timeout_ms=timeout_ms, sleep=sleep)
        self.url = url
        self.selectors = selectors

    async def go_to_home_page(self) -> None:
        await self.navigate_to(self.url)
        await self.waits.wait_for_page_load()

    async def search_for(self, term: str) -> None:
        search_input = await self.waits.wait_for_clickable(self.selectors.search_input)
        await self.driver.fill(search_input, "")
        await self.driver.fill(search_input, term)
        await self.driver.press(search_input, "Enter")
        logger.info(f"Searching for: {term}")

    async def validate_header_elements(self) -> None:
        """Wait for every header element; raises WaitTimeoutError on the first missing one."""
        s = self.selectors
        for selector in (s.header, s.logo, s.search_input, s.search_button, s.login_button, s.cart_button):
            await self.waits.wait_for_visible(selector)
        logger.debug("Header elements visible")
