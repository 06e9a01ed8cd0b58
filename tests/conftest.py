import asyncio
from contextlib import asynccontextmanager

import pytest
from bs4 import BeautifulSoup

from draw_scraper.domain.config import BrowserConfig
from draw_scraper.domain.protocols.driver_protocol import DriverProtocol


class _FakeDriver(DriverProtocol):
    """Serves a static page; records navigation and stop calls."""

    def __init__(
        self,
        *,
        html: str = "",
        navigate_error: Exception | None = None,
        hang_on_navigate: bool = False,
    ) -> None:
        self.html = html
        self.navigate_error = navigate_error
        self.hang_on_navigate = hang_on_navigate

        # recording
        self.navigate_calls: list[tuple[str, float, str]] = []
        self.selectors: list[str] = []
        self.stop_calls = 0
        self.navigation_started = asyncio.Event()

    async def navigate(self, url: str, timeout_seconds: float, wait_until: str = "networkidle") -> None:
        self.navigate_calls.append((url, timeout_seconds, wait_until))
        self.navigation_started.set()
        if self.navigate_error is not None:
            raise self.navigate_error
        if self.hang_on_navigate:
            await asyncio.Event().wait()

    async def get_inner_html_all(self, selector: str) -> list[str]:
        self.selectors.append(selector)
        soup = BeautifulSoup(self.html, "html.parser")
        return [element.decode_contents() for element in soup.select(selector)]

    async def get_html(self) -> str:
        return self.html

    async def stop(self) -> None:
        self.stop_calls += 1


class _FakeDriverFactory:
    """Stands in for `open_driver`: hands out one fake driver and counts sessions."""

    def __init__(self, driver: _FakeDriver) -> None:
        self.driver = driver
        self.browser_configs: list[BrowserConfig] = []
        self.acquired = 0
        self.released = 0

    @asynccontextmanager
    async def __call__(self, browser_config: BrowserConfig):
        self.browser_configs.append(browser_config)
        self.acquired += 1
        try:
            yield self.driver
        finally:
            self.released += 1
            await self.driver.stop()


@pytest.fixture
def fake_driver_factory():
    """Return a factory that builds a configured fake driver and its session factory.

    Usage:
        factory = fake_driver_factory(html=HtmlUtils.load("draw_results.html"))
        scraper = DrawPageScraper(config, driver_factory=factory)
    """

    def _factory(**kwargs) -> _FakeDriverFactory:
        return _FakeDriverFactory(_FakeDriver(**kwargs))

    return _factory


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no scraper-related environment variables."""
    for name in ("CHROME_EXECUTABLE_PATH", "CONFIG_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
