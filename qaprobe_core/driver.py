"""
Browser driver adapter over a Playwright async Page.

Implements the Navigable / ElementQuery / WaitCapable capabilities. Every
call runs inside translate_driver_errors so callers only ever see the
suite's error taxonomy for timeouts and stale handles.

Usage:
    driver = BrowserDriver(page)
    cards = await driver.find_elements(".ProductCard_productCard__MwY4X")
    name = await driver.get_text(await driver.find_element(".name", root=cards[0]))
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional

from .errors import NotFoundError, StaleReferenceError, WaitTimeoutError, translate_driver_errors

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 15000


class BrowserDriver:
    """Element-level operations on one Playwright page."""

    def __init__(self, page, default_timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.page = page
        self.default_timeout_ms = default_timeout_ms

    # --- Navigable ---

    async def navigate(self, url: str) -> None:
        with translate_driver_errors(f"navigate to {url}"):
            await self.page.goto(url, timeout=self.default_timeout_ms, wait_until="domcontentloaded")
        logger.info(f"Navigated to: {url}")

    async def current_url(self) -> str:
        return self.page.url

    async def title(self) -> str:
        with translate_driver_errors("read title"):
            return await self.page.title()

    # --- ElementQuery ---

    async def find_element(self, selector: str, root: Any = None):
        """First element matching selector, searched under root when given.

        Raises:
            NotFoundError: nothing matches
        """
        scope = root if root is not None else self.page
        with translate_driver_errors(f"find {selector}"):
            handle = await scope.query_selector(selector)
        if handle is None:
            raise NotFoundError(f"No element matches selector: {selector}")
        return handle

    async def find_elements(self, selector: str, root: Any = None) -> List[Any]:
        scope = root if root is not None else self.page
        with translate_driver_errors(f"find all {selector}"):
            return list(await scope.query_selector_all(selector))

    async def get_text(self, handle) -> str:
        with translate_driver_errors("read text"):
            text = await handle.inner_text()
        return (text or "").strip()

    async def get_attribute(self, handle, name: str) -> Optional[str]:
        with translate_driver_errors(f"read attribute {name}"):
            return await handle.get_attribute(name)

    async def is_displayed(self, handle) -> bool:
        with translate_driver_errors("check visibility"):
            return await handle.is_visible()

    async def is_enabled(self, handle) -> bool:
        with translate_driver_errors("check enabled"):
            return await handle.is_enabled()

    async def is_selected(self, handle) -> bool:
        with translate_driver_errors("check selected"):
            return await handle.is_checked()

    async def click(self, handle) -> None:
        with translate_driver_errors("click"):
            await handle.click(timeout=self.default_timeout_ms)

    async def scroll_into_view(self, handle) -> None:
        with translate_driver_errors("scroll into view"):
            await handle.evaluate("el => el.scrollIntoView(true)")

    async def fill(self, handle, text: str) -> None:
        with translate_driver_errors("fill"):
            await handle.fill(text, timeout=self.default_timeout_ms)

    async def press(self, handle, key: str) -> None:
        with translate_driver_errors(f"press {key}"):
            await handle.press(key)

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        with translate_driver_errors("evaluate script"):
            if arg is None:
                return await self.page.evaluate(script)
            return await self.page.evaluate(script, arg)

    async def screenshot(self) -> bytes:
        with translate_driver_errors("screenshot"):
            return await self.page.screenshot(full_page=False)

    # --- WaitCapable ---

    async def wait_until(
        self,
        predicate: Callable[[], Awaitable[Any]],
        timeout_ms: Optional[int] = None,
        poll_ms: int = 250,
        message: str = "",
    ) -> Any:
        """
        Poll ``predicate`` until it returns a truthy value.

        Missing and stale elements count as "not yet" while polling.

        Returns:
            The first truthy value returned by the predicate

        Raises:
            WaitTimeoutError: predicate never became truthy within timeout_ms
        """
        timeout_ms = self.default_timeout_ms if timeout_ms is None else timeout_ms
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout_ms / 1000
        last_error: Optional[Exception] = None

        while True:
            try:
                value = await predicate()
                if value:
                    return value
            except (NotFoundError, StaleReferenceError) as e:
                last_error = e
            if loop.time() >= deadline:
                break
            await asyncio.sleep(poll_ms / 1000)

        detail = f" (last error: {last_error})" if last_error else ""
        raise WaitTimeoutError(f"Timed out after {timeout_ms}ms waiting for {message or 'condition'}{detail}")
