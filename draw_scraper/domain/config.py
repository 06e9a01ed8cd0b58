from dataclasses import dataclass, field

DEFAULT_EXECUTABLE_PATH = "/usr/bin/google-chrome-stable"

DEFAULT_BROWSER_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--disable-gpu",
    "--window-size=1920,1080",
)

WAIT_STATES = ("load", "domcontentloaded", "networkidle", "commit")


@dataclass(frozen=True)
class BrowserConfig:
    """Configuration for the headless browser launch."""
    executable_path: str = DEFAULT_EXECUTABLE_PATH
    headless: bool = True
    viewport_width: int = 1920
    viewport_height: int = 1080
    args: tuple[str, ...] = DEFAULT_BROWSER_ARGS


@dataclass(frozen=True)
class ScrapeConfig:
    """Configuration for navigation and extraction."""
    marker_selector: str = ".B"
    wait_until: str = "networkidle"
    navigation_timeout_seconds: float = 30.0
    snapshot_dir: str | None = None  # rendered pages are kept here when set

    def __post_init__(self):
        if self.wait_until not in WAIT_STATES:
            raise ValueError(f"wait_until must be one of {WAIT_STATES}, got: {self.wait_until}")
        if self.navigation_timeout_seconds <= 0:
            raise ValueError(
                f"navigation_timeout_seconds must be positive, got: {self.navigation_timeout_seconds}"
            )


@dataclass(frozen=True)
class Config:
    """Main configuration containing log level and nested config objects."""
    log_level: str = "INFO"
    browser_config: BrowserConfig = field(default_factory=BrowserConfig)
    scrape_config: ScrapeConfig = field(default_factory=ScrapeConfig)
