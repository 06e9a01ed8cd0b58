import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Browser, Page, Playwright, async_playwright

from draw_scraper.domain.config import BrowserConfig

logger = logging.getLogger(__name__)

INNER_HTML_SCRIPT = "elements => elements.map(element => element.innerHTML)"


class Driver:
    def __init__(self, playwright: Playwright, browser_config: BrowserConfig):
        self.playwright = playwright
        self.config = browser_config
        self.browser: Browser | None = None
        self.page: Page | None = None

    async def start(self) -> None:
        logger.debug(f"Launching browser: {self.config.executable_path}")

        self.browser = await self.playwright.chromium.launch(
            executable_path=self.config.executable_path,
            headless=self.config.headless,
            args=list(self.config.args),
        )
        self.page = await self.browser.new_page(
            viewport={"width": self.config.viewport_width, "height": self.config.viewport_height}
        )

    async def stop(self) -> None:
        if self.browser is None:
            return
        browser, self.browser, self.page = self.browser, None, None
        await browser.close()
        logger.debug("Browser closed")

    async def navigate(self, url: str, timeout_seconds: float, wait_until: str = "networkidle") -> None:
        """Navigate to `url` and wait until the page reaches `wait_until`.

        Playwright raises its own TimeoutError when the page does not settle
        within `timeout_seconds`.
        """
        logger.debug(f"Navigating to: {url}")

        await self._require_page().goto(url, wait_until=wait_until, timeout=timeout_seconds * 1000)

    async def get_inner_html_all(self, selector: str) -> list[str]:
        return await self._require_page().eval_on_selector_all(selector, INNER_HTML_SCRIPT)

    async def get_html(self) -> str:
        return await self._require_page().content()

    def _require_page(self) -> Page:
        if self.page is None:
            raise RuntimeError("Driver is not started")
        return self.page


@asynccontextmanager
async def open_driver(browser_config: BrowserConfig) -> AsyncIterator[Driver]:
    """Start Playwright and a browser session, closing both on every exit path."""
    async with async_playwright() as playwright:
        driver = Driver(playwright=playwright, browser_config=browser_config)
        try:
            await driver.start()
            yield driver
        finally:
            await driver.stop()
