"""
Pagination-aware product collector.

Scans the rendered product grid, keeps the cards priced above a threshold
and clicks "load more" until enough products qualify, the attempt budget
runs out, or the site stops offering more results.

States:
    SCANNING  -> read every rendered card, keep those above threshold
    LOAD_MORE -> click the pagination button and wait for new cards
    DONE      -> terminal

The accumulator is never cleared between scans and records are not
de-duplicated, so a grid that re-renders earlier cards after "load more"
yields them again.

Grid reads are retried on stale handles within the budget. A stale
"load more" lookup ends the run with what was collected so far.
"""

import asyncio
import logging
from enum import Enum
from typing import List, Optional

from ..errors import NotFoundError, StaleReferenceError
from ..models import ProductRecord
from ..retry import RetryBudget, with_stale_retry
from ..waits import WaitUtils
from .record_builder import build_record
from .selectors import GridSelectors

logger = logging.getLogger(__name__)


class CollectorState(Enum):
    SCANNING = "scanning"
    LOAD_MORE = "load_more"
    DONE = "done"


class ProductCollector:
    """Collects ProductRecords priced above a threshold."""

    def __init__(
        self,
        driver,
        selectors: GridSelectors = GridSelectors(),
        budget: RetryBudget = RetryBudget(),
        satisfaction_target: int = 1,
        settle_delay_ms: int = 3000,
        sleep=asyncio.sleep,
    ):
        self.driver = driver
        self.selectors = selectors
        self.budget = budget
        self.satisfaction_target = satisfaction_target
        self.settle_delay_ms = settle_delay_ms
        self._sleep = sleep
        self.waits = WaitUtils(driver, sleep=sleep)

        self.state = CollectorState.SCANNING
        self.scans = 0
        self.load_more_clicks = 0
        self.skipped_cards = 0
        self.history: List[CollectorState] = []

    async def collect_above_threshold(self, threshold: float) -> List[ProductRecord]:
        """
        Run the state machine to completion.

        Args:
            threshold: Keep products with price strictly above this

        Returns:
            Qualifying records in scan order (duplicates possible across scans)
        """
        self._reset()
        products: List[ProductRecord] = []

        logger.info(f"Collecting products above {threshold}")
        await self.waits.wait_for_count_stable(self.selectors.product_card, self.settle_delay_ms)

        while self.state is not CollectorState.DONE:
            self.history.append(self.state)
            if self.state is CollectorState.SCANNING:
                products.extend(await self._scan(threshold))
                self.scans += 1
                self.state = self._after_scan(len(products))
            elif self.state is CollectorState.LOAD_MORE:
                self.state = await self._load_more()

        self.history.append(self.state)
        logger.info(
            f"Collected {len(products)} products above {threshold} "
            f"({self.scans} scans, {self.load_more_clicks} load-more clicks, {self.skipped_cards} skipped)"
        )
        return products

    def _reset(self) -> None:
        self.state = CollectorState.SCANNING
        self.scans = 0
        self.load_more_clicks = 0
        self.skipped_cards = 0
        self.history = []

    def _after_scan(self, qualifying: int) -> CollectorState:
        if qualifying >= self.satisfaction_target:
            logger.debug(f"Satisfaction target {self.satisfaction_target} met with {qualifying}")
            return CollectorState.DONE
        if self.scans >= self.budget.max_attempts:
            logger.debug(f"Scan budget {self.budget.max_attempts} exhausted")
            return CollectorState.DONE
        return CollectorState.LOAD_MORE

    async def _scan(self, threshold: float) -> List[ProductRecord]:
        cards = await self._read_cards()
        logger.debug(f"Scan {self.scans + 1}: {len(cards)} cards rendered")

        kept = []
        for index, card in enumerate(cards):
            try:
                record = await build_record(self.driver, card, self.selectors)
            except Exception as e:
                self.skipped_cards += 1
                logger.error(f"Skipping card {index}: {e}")
                continue

            if record.price > threshold:
                logger.debug(f"Kept: {record.name} ({record.price})")
                kept.append(record)
        return kept

    async def _load_more(self) -> CollectorState:
        button = await self._clickable_load_more()
        if button is None:
            logger.debug("No clickable load-more button; stopping")
            return CollectorState.DONE

        try:
            before = len(await self.driver.find_elements(self.selectors.product_card))
            await self.driver.scroll_into_view(button)
            await self.driver.click(button)
        except (NotFoundError, StaleReferenceError) as e:
            logger.debug(f"Grid changed before load-more click: {e}")
            return CollectorState.DONE

        self.load_more_clicks += 1
        logger.info(f"Clicked load more ({self.load_more_clicks})")
        await self.waits.wait_for_count_stable(
            self.selectors.product_card, self.settle_delay_ms, grow_from=before
        )
        return CollectorState.SCANNING

    async def _read_cards(self) -> List[object]:
        async def read_cards():
            return await self.driver.find_elements(self.selectors.product_card)

        return await with_stale_retry(read_cards, self.budget, sleep=self._sleep)

    async def _clickable_load_more(self) -> Optional[object]:
        try:
            buttons = await self.driver.find_elements(self.selectors.load_more)
            if not buttons:
                return None
            button = buttons[0]
            if await self.driver.is_displayed(button) and await self.driver.is_enabled(button):
                return button
        except StaleReferenceError:
            return None
        return None
