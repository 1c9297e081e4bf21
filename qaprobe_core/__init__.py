"""
qaprobe_core package: retail web UI suite

Browser-driver adapter, waits, price parsing, filter location, product
collection and page objects for the Smart TV search scenario.

Usage:
    from qaprobe_core import config, launch_browser, search_and_collect

    async with launch_browser(config) as driver:
        products = await search_and_collect(driver, config)
"""
from .config import Config, config
from .models import FilterRange, ProductRecord
from .errors import (
    AutomationError,
    ExtractionError,
    NotFoundError,
    StaleReferenceError,
    WaitTimeoutError,
)
from .retry import RetryBudget, retry_with_backoff, with_stale_retry
from .pricing import parse_price
from .driver import BrowserDriver
from .browser import launch_browser
from .flows import assert_products_above, search_and_collect

__all__ = [
    # Config
    "Config",
    "config",
    # Models
    "FilterRange",
    "ProductRecord",
    # Errors
    "AutomationError",
    "ExtractionError",
    "NotFoundError",
    "StaleReferenceError",
    "WaitTimeoutError",
    # Engine
    "RetryBudget",
    "retry_with_backoff",
    "with_stale_retry",
    "parse_price",
    # Browser
    "BrowserDriver",
    "launch_browser",
    # Flow
    "assert_products_above",
    "search_and_collect",
]
