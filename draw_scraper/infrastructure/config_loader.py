import logging
import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from draw_scraper.domain.config import (
    DEFAULT_BROWSER_ARGS,
    DEFAULT_EXECUTABLE_PATH,
    BrowserConfig,
    Config,
    ScrapeConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"
EXECUTABLE_PATH_ENV = "CHROME_EXECUTABLE_PATH"


def find_config_path() -> Optional[str]:
    """Find the most appropriate config.yaml path.

    Order of precedence:
    1. CONFIG_PATH environment variable (must point at an existing file)
    2. ./config.yaml in current working directory
    3. Search upward from current working directory for config.yaml

    Returns None when no config file exists; defaults are used then.
    """
    env_config_path = os.getenv("CONFIG_PATH")
    if env_config_path:
        path = Path(env_config_path)
        if path.is_file():
            return str(path)
        raise FileNotFoundError(f"CONFIG_PATH is set but file not found: {env_config_path}")

    p = Path.cwd()
    for parent in (p, *p.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return str(candidate)

    return None


def load(config_path: Optional[str] = None) -> Config:
    file = _find_config(config_path)
    if file is None:
        logger.debug(f"No {CONFIG_FILENAME} found, using defaults")
        data: dict[str, Any] = {}
    else:
        data = _read_config(file)
        if data is None:
            logger.debug(f"{file} is empty, using defaults")
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Parsed config file {file} does not contain a mapping")

    return _map_to_domain(data)


def _read_config(file: Path) -> Any:
    content = file.read_text()

    # unset variables become empty, so the key falls back to its default
    def replace_env_var(match: re.Match) -> str:
        var_name = match.group(1)
        return os.getenv(var_name, "")

    content = re.sub(r'\$\{(\w+)}', replace_env_var, content)

    return yaml.safe_load(content)


def _find_config(config_path: str | None) -> Path | None:
    load_dotenv()

    if config_path:
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return path

    found = find_config_path()
    return Path(found) if found else None


def _resolve_executable_path(configured: Optional[str]) -> str:
    """CHROME_EXECUTABLE_PATH wins over the file, the file wins over the default."""
    from_env = os.getenv(EXECUTABLE_PATH_ENV)
    if from_env:
        return from_env
    return configured or DEFAULT_EXECUTABLE_PATH


def _map_to_domain(data: dict) -> Config:
    browser_data = data.get('browser') or {}
    viewport = browser_data.get('viewport') or {}
    args = browser_data.get('args')

    browser_config = BrowserConfig(
        executable_path=_resolve_executable_path(browser_data.get('executable_path')),
        headless=bool(browser_data.get('headless', True)),
        viewport_width=int(viewport.get('width', 1920)),
        viewport_height=int(viewport.get('height', 1080)),
        args=tuple(str(a) for a in args) if args is not None else DEFAULT_BROWSER_ARGS,
    )

    scrape_section = data.get('scrape') or {}
    snapshot_dir = scrape_section.get('snapshot_dir')
    scrape_config = ScrapeConfig(
        marker_selector=str(scrape_section.get('marker_selector', '.B')),
        wait_until=str(scrape_section.get('wait_until', 'networkidle')),
        navigation_timeout_seconds=float(scrape_section.get('navigation_timeout_seconds', 30)),
        snapshot_dir=str(snapshot_dir) if snapshot_dir else None,
    )

    return Config(
        log_level=os.getenv("LOG_LEVEL") or data.get('log_level', 'INFO'),
        browser_config=browser_config,
        scrape_config=scrape_config,
    )
