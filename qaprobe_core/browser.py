#!/usr/bin/env python3
import logging
import random
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

from playwright.async_api import async_playwright

from .driver import BrowserDriver

logger = logging.getLogger(__name__)


def _launch_args(config) -> Dict:
    return {
        "headless": bool(config.headless),
        "args": [
            "--no-sandbox",
            "--disable-dev-shm-usage",
            "--disable-blink-features=AutomationControlled",
        ],
    }


def _context_args(config) -> Dict:
    vw = 1366 + int(random.random() * 300)
    vh = 768 + int(random.random() * 200)
    return {
        "viewport": {"width": vw, "height": vh},
        "locale": config.locale,
        "extra_http_headers": {
            "Accept-Language": f"{config.locale},en;q=0.8",
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        },
    }


@asynccontextmanager
async def launch_browser(config) -> AsyncIterator[BrowserDriver]:
    """
    Start Chromium and yield a BrowserDriver on a fresh page.

    The browser and the Playwright driver process are always shut down,
    including when the body raises.

    Usage:
        async with launch_browser(config) as driver:
            await driver.navigate(config.web_base_url)
    """
    playwright = await async_playwright().start()
    browser = None
    try:
        browser = await playwright.chromium.launch(**_launch_args(config))
        context = await browser.new_context(**_context_args(config))
        page = await context.new_page()
        page.set_default_timeout(config.wait_timeout_ms)
        logger.info(f"Browser started (headless={config.headless}, locale={config.locale})")
        yield BrowserDriver(page, default_timeout_ms=config.wait_timeout_ms)
    finally:
        if browser is not None:
            await browser.close()
        await playwright.stop()
        logger.info("Browser closed")
