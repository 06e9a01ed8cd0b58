import asyncio
import logging
from pathlib import Path
from typing import AsyncContextManager, Callable, Optional

from draw_scraper.domain.config import BrowserConfig, Config
from draw_scraper.domain.protocols.driver_protocol import DriverProtocol
from draw_scraper.domain.target import DrawTarget
from draw_scraper.scan_adapter.scanner import Scanner

logger = logging.getLogger(__name__)

DriverFactory = Callable[[BrowserConfig], AsyncContextManager[DriverProtocol]]


def _default_driver_factory() -> DriverFactory:
    # Playwright is imported only when a real browser is needed.
    from draw_scraper.infrastructure.driver_adapter.driver import open_driver

    return open_driver


class DrawPageScraper:
    """Renders a draw results page and collects its marker fragments.

    Every call to `scrape` launches its own browser session and closes it
    before returning or raising. Sessions are not pooled, so callers
    running many scrapes concurrently should bound the concurrency themselves.
    """

    def __init__(self, config: Config, driver_factory: Optional[DriverFactory] = None) -> None:
        self.config = config
        self.driver_factory = driver_factory or _default_driver_factory()

    async def scrape(self, target: DrawTarget) -> list[str]:
        scrape_config = self.config.scrape_config
        url = target.url
        logger.info(f"Scraping {url}")

        async with self.driver_factory(self.config.browser_config) as driver:
            await driver.navigate(
                url,
                timeout_seconds=scrape_config.navigation_timeout_seconds,
                wait_until=scrape_config.wait_until,
            )
            if scrape_config.snapshot_dir:
                await self._save_snapshot(driver, target, Path(scrape_config.snapshot_dir))

            fragments = await driver.get_inner_html_all(scrape_config.marker_selector)

        logger.info(f"Found {len(fragments)} '{scrape_config.marker_selector}' element(s) on {url}")
        return list(fragments)

    async def _save_snapshot(self, driver: DriverProtocol, target: DrawTarget, snapshot_dir: Path) -> None:
        html = await driver.get_html()
        path = snapshot_dir / target.snapshot_name
        await asyncio.to_thread(_write_snapshot, path, html)
        logger.debug(f"Saved page snapshot to {path}")


def _write_snapshot(path: Path, html: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding='utf-8')


async def scrape_data(
    url: str,
    slug: str,
    draw_no: str,
    config: Optional[Config] = None,
    driver_factory: Optional[DriverFactory] = None,
) -> list[str]:
    """Return the inner HTML of every marker element on `url/slug/draw_no`.

    When `config` is None it is loaded with the config loader (config.yaml,
    .env and CHROME_EXECUTABLE_PATH). Any launch, navigation or timeout
    error propagates unchanged; the browser is closed first.
    """
    if config is None:
        from draw_scraper.infrastructure.config_loader import load

        config = load()

    scraper = DrawPageScraper(config, driver_factory=driver_factory)
    return await scraper.scrape(DrawTarget(base_url=url, slug=slug, draw_no=str(draw_no)))


def scrape_snapshot(path: str | Path, selector: str = ".B") -> list[str]:
    """Extract marker fragments from a previously saved snapshot without a browser."""
    html = Path(path).read_text(encoding='utf-8')
    return Scanner().extract_fragments(html, selector)
