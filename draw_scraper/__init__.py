"""Scrape marker elements from rendered lottery draw results pages."""

from draw_scraper.application.scraper import DrawPageScraper, scrape_data, scrape_snapshot
from draw_scraper.domain.config import BrowserConfig, Config, ScrapeConfig
from draw_scraper.domain.target import DrawTarget

__all__ = [
    "BrowserConfig",
    "Config",
    "DrawPageScraper",
    "DrawTarget",
    "ScrapeConfig",
    "scrape_data",
    "scrape_snapshot",
]
