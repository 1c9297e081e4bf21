"""
Search results page: price filter, product grid and product scraping.
"""

import asyncio
import logging
from typing import List, Optional

from ..errors import NotFoundError, StaleReferenceError, WaitTimeoutError
from ..extraction.collector import ProductCollector
from ..extraction.filter_locator import locate_price_filter_control
from ..extraction.selectors import GridSelectors
from ..models import FilterRange, ProductRecord
from ..retry import RetryBudget, stale_retry
from ..waits import WaitUtils
from .base import BasePage

logger = logging.getLogger(__name__)

# Optional filter-panel steps tolerate these; anything else propagates
_OPTIONAL_STEP_ERRORS = (NotFoundError, StaleReferenceError, WaitTimeoutError)


class SearchResultsPage(BasePage):
    """Results grid after a search."""

    def __init__(
        self,
        driver,
        price_range: FilterRange,
        selectors: GridSelectors = GridSelectors(),
        budget: RetryBudget = RetryBudget(),
        satisfaction_target: int = 1,
        settle_delay_ms: int = 3000,
        filter_settle_ms: int = 5000,
        evidence=None,
        timeout_ms: int = WaitUtils.DEFAULT_TIMEOUT_MS,
        sleep=asyncio.sleep,
    ):
        super().__init__(driver, evidence=evidence, timeout_ms=timeout_ms, sleep=sleep)
        self.price_range = price_range
        self.selectors = selectors
        self.budget = budget
        self.satisfaction_target = satisfaction_target
        self.settle_delay_ms = settle_delay_ms
        self.filter_settle_ms = filter_settle_ms

    @property
    def expected_price(self) -> float:
        return self.price_range.expected

    async def apply_price_filter(self) -> None:
        """Open the price facet and tick the checkbox closest to the configured range."""
        await self.waits.wait_for_page_load()
        await self.waits.wait_for_count_stable(self.selectors.product_card, self.settle_delay_ms)

        await self._expand_price_accordion()
        await self._show_all_filters()

        control = await self._price_filter_control()
        control = await self.waits.wait_for_clickable(control)
        await self.driver.scroll_into_view(control)
        await self.driver.click(control)
        logger.info(f"Price filter applied: {self.price_range.value_label()}")

        await self.waits.wait_for_page_load()
        await self.waits.wait_for_count_stable(self.selectors.product_card, self.filter_settle_ms)

    async def _expand_price_accordion(self) -> None:
        try:
            accordion = await self.driver.find_element(self.selectors.price_accordion)
            if await self.driver.get_attribute(accordion, "aria-expanded") == "false":
                await self.driver.scroll_into_view(accordion)
                await self.driver.click(accordion)
                await self.waits.pause(1000)
                logger.debug("Price accordion expanded")
        except _OPTIONAL_STEP_ERRORS as e:
            logger.debug(f"Price accordion not expanded: {e}")

    async def _show_all_filters(self) -> None:
        try:
            button = await self.driver.find_element(self.selectors.show_all_filters)
            if await self.driver.is_displayed(button) and await self.driver.is_enabled(button):
                await self.driver.scroll_into_view(button)
                await self.driver.click(button)
                await self.waits.pause(1000)
                logger.debug("Show-all filters clicked")
        except _OPTIONAL_STEP_ERRORS as e:
            logger.debug(f"Show-all filters not clicked: {e}")

    async def _price_filter_control(self):
        return await locate_price_filter_control(
            self.driver, self.price_range, self.selectors, evidence=self.evidence
        )

    async def validate_product_grid_visible(self) -> None:
        await self.waits.wait_for_visible(self.selectors.product_grid)

    @stale_retry(RetryBudget(max_attempts=3, backoff_ms=1000))
    async def validate_products_in_grid(self) -> None:
        cards = await self.driver.find_elements(self.selectors.product_card)
        if not cards:
            raise AssertionError("Nenhum produto exibido no grid!")
        # Touching the first card surfaces a stale grid
        await self.driver.is_displayed(cards[0])

    async def validate_price_filter_applied(self) -> None:
        control = await self._price_filter_control()
        if not await self.driver.is_selected(control):
            raise AssertionError("Filtro de preço não está aplicado!")

    async def get_products_above_price(self, threshold: Optional[float] = None) -> List[ProductRecord]:
        """Collect products priced above threshold (defaults to the expected price)."""
        threshold = self.expected_price if threshold is None else threshold
        collector = ProductCollector(
            self.driver,
            selectors=self.selectors,
            budget=self.budget,
            satisfaction_target=self.satisfaction_target,
            settle_delay_ms=self.settle_delay_ms,
            sleep=self._sleep,
        )
        return await collector.collect_above_threshold(threshold)
