"""
Error taxonomy for browser automation.

Playwright raises one generic ``Error`` type for most failures. The suite
needs to tell transient staleness (retryable) apart from missing elements
and readiness timeouts (fatal), so driver calls run inside
``translate_driver_errors`` which maps Playwright failures onto the
classes below.
"""

from contextlib import contextmanager
from typing import Any, Dict

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class AutomationError(Exception):
    """Base class for suite errors"""
    pass


class NotFoundError(AutomationError):
    """No candidate element or control exists at all"""
    pass


class StaleReferenceError(AutomationError):
    """Element handle no longer matches live DOM content"""
    pass


class WaitTimeoutError(AutomationError, TimeoutError):
    """A readiness wait exceeded its bound"""
    pass


class ExtractionError(AutomationError):
    """A required field was found but held no usable value"""
    pass


# Substrings Playwright uses when a handle outlived its DOM node
STALE_MARKERS = (
    "not attached to the dom",
    "element is detached",
    "element handle is detached",
    "node is detached",
    "execution context was destroyed",
    "cannot find context with specified id",
)


def is_stale_message(message: str) -> bool:
    lowered = (message or "").lower()
    return any(marker in lowered for marker in STALE_MARKERS)


@contextmanager
def translate_driver_errors(action: str = "driver call"):
    """Re-raise Playwright failures as suite errors.

    Timeouts become WaitTimeoutError, detached-handle failures become
    StaleReferenceError. Anything else propagates untouched.
    """
    try:
        yield
    except PlaywrightTimeoutError as e:
        raise WaitTimeoutError(f"{action} timed out: {e}") from e
    except PlaywrightError as e:
        if is_stale_message(str(e)):
            raise StaleReferenceError(f"{action} hit a stale element: {e}") from e
        raise


def describe_error(error: Exception) -> Dict[str, Any]:
    """Summarise an error for report annotations."""
    if isinstance(error, StaleReferenceError):
        category, retryable = "stale_reference", True
    elif isinstance(error, WaitTimeoutError):
        category, retryable = "timeout", False
    elif isinstance(error, NotFoundError):
        category, retryable = "not_found", False
    elif isinstance(error, ExtractionError):
        category, retryable = "extraction", False
    elif isinstance(error, AssertionError):
        category, retryable = "assertion", False
    else:
        category, retryable = "unexpected", False
    return {
        "category": category,
        "message": str(error),
        "type": type(error).__name__,
        "retryable": retryable,
    }
