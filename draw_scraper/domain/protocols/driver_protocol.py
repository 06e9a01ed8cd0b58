from __future__ import annotations

from typing import Protocol


class DriverProtocol(Protocol):
    """Browser session interface used by the page scraper.

    The protocol keeps the application layer independent of Playwright.
    The Playwright-based implementation lives in
    `draw_scraper/infrastructure/driver_adapter/driver.py`.
    """

    async def navigate(self, url: str, timeout_seconds: float, wait_until: str = "networkidle") -> None:
        """Navigate to an absolute URL.

        Returns once the page reaches `wait_until` or raises when the
        timeout (in seconds) elapses first.
        """

    async def get_inner_html_all(self, selector: str) -> list[str]:
        """Return the inner HTML of every element matching `selector`, in document order."""

    async def get_html(self) -> str:
        """Return the full rendered HTML of the current page."""

    async def stop(self) -> None:
        """Close the browser. Calling it more than once has no further effect."""
