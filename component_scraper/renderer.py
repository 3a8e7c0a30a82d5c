"""
Playwright page renderer.

One Chromium browser per run. Every manufacturer gets a fresh browsing
context that is closed when its `open_page` block exits, however it exits.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from playwright.sync_api import Browser, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from component_scraper.errors import RenderError

logger = logging.getLogger(__name__)

USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36'
VIEWPORT = {'width': 1920, 'height': 1080}


@dataclass(frozen=True)
class RenderedPage:
    """Snapshot of a rendered page handed to the extraction oracle"""
    url: str
    title: str
    text: str


def truncate_text(text: str, limit: int) -> str:
    """Collapse whitespace runs and cut to `limit` characters"""
    collapsed = " ".join(text.split())
    if len(collapsed) <= limit:
        return collapsed
    return collapsed[:limit]


class PlaywrightRenderer:
    """
    Headless Chromium renderer.

    Usage:
        with PlaywrightRenderer(config) as renderer:
            with renderer.open_page(url) as page:
                ...
    """

    def __init__(self, config):
        self.config = config
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    def start(self) -> None:
        """Launch the browser. Launch failures are fatal for the run."""
        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(
                headless=self.config.headless,
                timeout=self.config.browser_launch_timeout_ms,
            )
        except Exception:
            self._playwright.stop()
            self._playwright = None
            raise
        logger.info(f"Browser launched (headless={self.config.headless})")

    def close(self) -> None:
        if self._browser is not None:
            self._browser.close()
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None

    def __enter__(self) -> "PlaywrightRenderer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def open_page(self, url: str) -> Iterator[RenderedPage]:
        """
        Navigate an isolated browsing context to `url`.

        Raises:
            RenderError: Navigation failed or exceeded the navigation timeout
        """
        if self._browser is None:
            raise RuntimeError("PlaywrightRenderer.open_page() called before start()")

        timeout_ms = self.config.navigation_timeout_ms
        try:
            context = self._browser.new_context(viewport=VIEWPORT, user_agent=USER_AGENT)
        except PlaywrightError as e:
            raise RenderError(f"Could not open a browsing context for {url}: {e}") from e

        try:
            try:
                page = context.new_page()
                logger.debug(f"Navigating to {url}")
                page.goto(url, timeout=timeout_ms)
                rendered = RenderedPage(
                    url=page.url,
                    title=page.title(),
                    text=truncate_text(page.inner_text("body"), self.config.page_text_limit),
                )
            except PlaywrightTimeoutError as e:
                raise RenderError(f"Timed out after {timeout_ms} ms loading {url}") from e
            except PlaywrightError as e:
                raise RenderError(f"Failed to load {url}: {e}") from e

            yield rendered
        finally:
            context.close()
