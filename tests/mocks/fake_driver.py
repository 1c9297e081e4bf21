#!/usr/bin/env python3
"""
In-memory DOM for unit tests.

FakeDriver implements the driver capabilities (navigation, element
queries, waits) over FakeElement trees keyed by selector, so page objects
and the extraction engine run without a browser. Failures such as stale
handles are scripted per element or per selector.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from qaprobe_core.errors import NotFoundError, StaleReferenceError, WaitTimeoutError
from qaprobe_core.extraction.selectors import GridSelectors

GRID = GridSelectors()


@dataclass(eq=False)
class FakeElement:
    text: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    children: Dict[str, List["FakeElement"]] = field(default_factory=dict)
    visible: bool = True
    enabled: bool = True
    checked: bool = False
    stale: bool = False
    on_click: Optional[Callable[["FakeDriver", "FakeElement"], None]] = None
    value: str = ""
    clicks: int = 0


class FakeDriver:
    """Scriptable stand-in for BrowserDriver."""

    def __init__(self, elements: Optional[Dict[str, List[FakeElement]]] = None):
        self.elements: Dict[str, List[FakeElement]] = elements or {}
        self.url = "about:blank"
        self.page_title = ""
        self.ready_state = "complete"
        # selector -> errors raised by successive find_elements calls
        self.find_errors: Dict[str, List[Exception]] = {}
        self.visited: List[str] = []
        self.clicked: List[FakeElement] = []
        self.scrolled: List[FakeElement] = []
        self.filled: List[tuple] = []
        self.pressed: List[str] = []
        self.screenshots = 0

    # --- helpers ---

    def set(self, selector: str, *elements: FakeElement) -> None:
        self.elements[selector] = list(elements)

    def _check(self, element: FakeElement) -> FakeElement:
        if element is None:
            raise NotFoundError("None handle")
        if element.stale:
            raise StaleReferenceError("element is not attached to the DOM")
        return element

    def _scope(self, root) -> Dict[str, List[FakeElement]]:
        if root is None:
            return self.elements
        return self._check(root).children

    # --- Navigable ---

    async def navigate(self, url: str) -> None:
        self.url = url
        self.visited.append(url)

    async def current_url(self) -> str:
        return self.url

    async def title(self) -> str:
        return self.page_title

    # --- ElementQuery ---

    async def find_element(self, selector: str, root: Any = None):
        matches = await self.find_elements(selector, root=root)
        if not matches:
            raise NotFoundError(f"No element matches selector: {selector}")
        return matches[0]

    async def find_elements(self, selector: str, root: Any = None) -> List[FakeElement]:
        if root is None and self.find_errors.get(selector):
            raise self.find_errors[selector].pop(0)
        return list(self._scope(root).get(selector, []))

    async def get_text(self, handle) -> str:
        return self._check(handle).text.strip()

    async def get_attribute(self, handle, name: str) -> Optional[str]:
        return self._check(handle).attributes.get(name)

    async def is_displayed(self, handle) -> bool:
        return self._check(handle).visible

    async def is_enabled(self, handle) -> bool:
        return self._check(handle).enabled

    async def is_selected(self, handle) -> bool:
        return self._check(handle).checked

    async def click(self, handle) -> None:
        element = self._check(handle)
        element.clicks += 1
        self.clicked.append(element)
        if element.on_click is not None:
            element.on_click(self, element)

    async def scroll_into_view(self, handle) -> None:
        self.scrolled.append(self._check(handle))

    async def fill(self, handle, text: str) -> None:
        self._check(handle).value = text
        self.filled.append((handle, text))

    async def press(self, handle, key: str) -> None:
        self._check(handle)
        self.pressed.append(key)

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        if "readyState" in script:
            return self.ready_state
        return None

    async def screenshot(self) -> bytes:
        self.screenshots += 1
        return b"\x89PNG\r\n\x1a\nfake"

    # --- WaitCapable ---

    async def wait_until(self, predicate, timeout_ms: int = 15000, poll_ms: int = 250, message: str = ""):
        """Polls a handful of times without sleeping."""
        last_error = None
        for _ in range(3):
            try:
                value = await predicate()
                if value:
                    return value
            except (NotFoundError, StaleReferenceError) as e:
                last_error = e
        raise WaitTimeoutError(f"Timed out waiting for {message or 'condition'} ({last_error})")


def product_card(name: Optional[str], price: Optional[str], rating: Optional[str] = "4.5") -> FakeElement:
    """Card with name/price/rating children; None leaves the child out."""
    children: Dict[str, List[FakeElement]] = {}
    if name is not None:
        children[GRID.product_name] = [FakeElement(text=name)]
    if price is not None:
        children[GRID.product_price] = [FakeElement(text=price)]
    if rating is not None:
        children[GRID.product_rating] = [FakeElement(text=rating)]
    return FakeElement(children=children)


def price_filter(value: str, checked: bool = False) -> FakeElement:
    """Filter checkbox that becomes checked when clicked."""
    def tick(driver, element):
        element.checked = True

    return FakeElement(attributes={"value": value}, checked=checked, on_click=tick)


class RecordingSleep:
    """Awaitable sleep replacement that records requested delays."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
