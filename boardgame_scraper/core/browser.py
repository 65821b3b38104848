"""
Browser management using Playwright
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeoutError,
)

from .errors import TransportError, TransportTimeout

logger = logging.getLogger(__name__)

USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)

class PageSession:
    """
    One browser tab, exposing the calls a game lookup needs

    Playwright timeouts are raised as TransportTimeout and every other
    Playwright failure (closed target, detached frame) as TransportError.
    """

    def __init__(self, page: Page, timeout: int = 30000):
        self.page = page
        self.timeout = timeout

    async def _guard(self, action: str, awaitable):
        try:
            return await awaitable
        except PlaywrightTimeoutError as e:
            raise TransportTimeout(f"Timed out during {action}: {e}") from e
        except PlaywrightError as e:
            raise TransportError(f"Browser failure during {action}: {e}") from e

    async def navigate(self, url: str):
        """Load a page with the given URL"""
        logger.info(f"Loading page: {url}")
        response = await self._guard(
            f"navigate to {url}",
            self.page.goto(url, wait_until='domcontentloaded'),
        )
        if response and response.status >= 400:
            logger.warning(f"Page loaded with status {response.status}: {url}")

    async def type_into(self, selector: str, text: str):
        await self._guard(f"typing into {selector}", self.page.fill(selector, text))

    async def press_enter(self):
        await self._guard("pressing Enter", self.page.keyboard.press('Enter'))

    async def wait_for_selector(self, selector: str, timeout: Optional[int] = None):
        await self._guard(
            f"waiting for {selector}",
            self.page.wait_for_selector(selector, timeout=timeout or self.timeout),
        )

    async def has_element(self, selector: str) -> bool:
        element = await self._guard(f"querying {selector}", self.page.query_selector(selector))
        return element is not None

    async def click(self, selector: str, wait_for_navigation: bool = False):
        """Click an element, optionally waiting for the navigation it triggers"""
        if not wait_for_navigation:
            await self._guard(f"clicking {selector}", self.page.click(selector))
            return

        await self._guard(f"clicking {selector}", self._click_and_wait(selector))

    async def _click_and_wait(self, selector: str):
        async with self.page.expect_navigation(wait_until='domcontentloaded', timeout=self.timeout):
            await self.page.click(selector)

    async def content(self) -> str:
        """Rendered HTML of the current page"""
        return await self._guard("reading page content", self.page.content())

    async def close(self):
        try:
            await self.page.close()
        except PlaywrightError as e:
            logger.warning(f"Error closing page: {e}")

class BrowserManager:
    """Manage the Playwright browser for one sync run"""

    def __init__(self, headless: bool = True, timeout: int = 30000):
        self.headless = headless
        self.timeout = timeout
        self.playwright = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None

    async def start(self):
        """Start the browser"""
        try:
            self.playwright = await async_playwright().start()

            self.browser = await self.playwright.chromium.launch(
                headless=self.headless,
                args=[
                    '--no-sandbox',
                    '--disable-dev-shm-usage',
                    '--disable-blink-features=AutomationControlled',
                    '--disable-extensions',
                ]
            )

            # Create context with realistic settings
            self.context = await self.browser.new_context(
                viewport={'width': 1920, 'height': 1080},
                user_agent=USER_AGENT
            )

            self.context.set_default_timeout(self.timeout)

            logger.info("Browser started successfully")

        except PlaywrightError as e:
            logger.error(f"Failed to start browser: {e}")
            raise TransportError(f"Failed to start browser: {e}") from e

    async def new_page(self) -> PageSession:
        """Create a new page"""
        if not self.context:
            await self.start()

        try:
            page = await self.context.new_page()

            # Hide the webdriver flag
            await page.add_init_script("""
                Object.defineProperty(navigator, 'webdriver', {
                    get: () => undefined,
                });
            """)
        except PlaywrightError as e:
            raise TransportError(f"Failed to open page: {e}") from e

        return PageSession(page, timeout=self.timeout)

    @asynccontextmanager
    async def page(self) -> AsyncIterator[PageSession]:
        """Open a page for the duration of one lookup, always closing it"""
        session = await self.new_page()
        try:
            yield session
        finally:
            await session.close()

    async def close(self):
        """Close the browser"""
        try:
            if self.context:
                await self.context.close()
            if self.browser:
                await self.browser.close()
            if self.playwright:
                await self.playwright.stop()

            logger.info("Browser closed successfully")

        except PlaywrightError as e:
            logger.error(f"Error closing browser: {e}")
        finally:
            self.context = None
            self.browser = None
            self.playwright = None

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
