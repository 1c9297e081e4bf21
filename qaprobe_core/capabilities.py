"""
Capability interfaces consumed by page objects and the extraction engine.

Pages are composed from these instead of inheriting a driver-owning base
class, so the engine runs against Playwright in production and against an
in-memory DOM in unit tests.
"""

from typing import Any, Awaitable, Callable, List, Optional, Protocol, Union


class Navigable(Protocol):
    async def navigate(self, url: str) -> None: ...

    async def current_url(self) -> str: ...

    async def title(self) -> str: ...


class ElementQuery(Protocol):
    async def find_element(self, selector: str, root: Any = None) -> Any: ...

    async def find_elements(self, selector: str, root: Any = None) -> List[Any]: ...

    async def get_text(self, handle: Any) -> str: ...

    async def get_attribute(self, handle: Any, name: str) -> Optional[str]: ...

    async def is_displayed(self, handle: Any) -> bool: ...

    async def is_enabled(self, handle: Any) -> bool: ...

    async def is_selected(self, handle: Any) -> bool: ...

    async def click(self, handle: Any) -> None: ...

    async def scroll_into_view(self, handle: Any) -> None: ...

    async def fill(self, handle: Any, text: str) -> None: ...

    async def press(self, handle: Any, key: str) -> None: ...

    async def evaluate(self, script: str, arg: Any = None) -> Any: ...

    async def screenshot(self) -> bytes: ...


class WaitCapable(Protocol):
    async def wait_until(
        self,
        predicate: Callable[[], Awaitable[Any]],
        timeout_ms: int = 15000,
        poll_ms: int = 250,
        message: str = "",
    ) -> Any: ...


class Driver(Navigable, ElementQuery, WaitCapable, Protocol):
    """Everything a page object needs from the browser."""


class EvidenceSink(Protocol):
    def attach(self, name: str, data: Union[str, bytes]) -> Any: ...
