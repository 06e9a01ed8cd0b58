import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from draw_scraper.application import scraper
from draw_scraper.config.logging_config import configure_logging
from draw_scraper.domain.config import Config
from draw_scraper.infrastructure.config_loader import load

logger = logging.getLogger(__name__)


def setup_env(config_path: Optional[str] = None) -> Config:
    """Load configuration and configure logging."""
    config = load(config_path)
    configure_logging(config.log_level)
    return config


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="draw-scraper",
        description="Print the marker fragments of a rendered draw results page as JSON.",
    )
    parser.add_argument("base_url", help="Base URL of the results site")
    parser.add_argument("slug", help="Game slug")
    parser.add_argument("draw_no", help="Draw number")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--snapshot", default=None, help="Extract from a saved HTML snapshot instead of a browser")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    config = setup_env(args.config)

    try:
        if args.snapshot:
            fragments = scraper.scrape_snapshot(args.snapshot, config.scrape_config.marker_selector)
        else:
            fragments = asyncio.run(scraper.scrape_data(args.base_url, args.slug, args.draw_no, config=config))
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received, shutting down...")
        return 130
    except Exception:
        logger.exception(f"Scrape of {args.base_url}/{args.slug}/{args.draw_no} failed")
        return 1

    json.dump(fragments, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
