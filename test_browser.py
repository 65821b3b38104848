"""
Test PageSession and BrowserManager against stand-in Playwright objects
"""
import asyncio
from contextlib import asynccontextmanager
from types import SimpleNamespace

import pytest
from playwright.async_api import Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError

from boardgame_scraper.core.browser import BrowserManager, PageSession
from boardgame_scraper.core.errors import NavigationError, TransportError, TransportTimeout

class StubKeyboard:
    def __init__(self, page):
        self.page = page

    async def press(self, key):
        self.page.calls.append(('press', key))

class StubPlaywrightPage:
    def __init__(self, fail_with=None, status=200):
        self.fail_with = fail_with
        self.status = status
        self.calls = []
        self.keyboard = StubKeyboard(self)
        self.url = "https://boardgamegeek.com"

    async def _maybe_fail(self):
        if self.fail_with:
            raise self.fail_with

    async def goto(self, url, wait_until=None):
        self.calls.append(('goto', url, wait_until))
        await self._maybe_fail()
        return SimpleNamespace(status=self.status)

    async def fill(self, selector, text):
        self.calls.append(('fill', selector, text))

    async def wait_for_selector(self, selector, timeout=None):
        self.calls.append(('wait_for_selector', selector, timeout))
        await self._maybe_fail()

    async def query_selector(self, selector):
        return None if selector == '.missing' else object()

    async def click(self, selector):
        self.calls.append(('click', selector))
        await self._maybe_fail()

    @asynccontextmanager
    async def expect_navigation(self, wait_until=None, timeout=None):
        self.calls.append(('expect_navigation', wait_until, timeout))
        yield

    async def content(self):
        return "<html></html>"

    async def close(self):
        self.calls.append(('close',))
        await self._maybe_fail()

def test_search_steps_pass_through():
    stub = StubPlaywrightPage()
    session = PageSession(stub, timeout=5000)

    async def steps():
        await session.navigate("https://boardgamegeek.com")
        await session.type_into('input[placeholder="Search"]', "Azul")
        await session.press_enter()
        await session.wait_for_selector('.collection_table')
        await session.click('.collection_table .primary', wait_for_navigation=True)
        return await session.content()

    assert asyncio.run(steps()) == "<html></html>"
    assert stub.calls == [
        ('goto', "https://boardgamegeek.com", 'domcontentloaded'),
        ('fill', 'input[placeholder="Search"]', "Azul"),
        ('press', 'Enter'),
        ('wait_for_selector', '.collection_table', 5000),
        ('expect_navigation', 'domcontentloaded', 5000),
        ('click', '.collection_table .primary'),
    ]

def test_has_element():
    session = PageSession(StubPlaywrightPage())

    assert asyncio.run(session.has_element('.collection_table .primary')) is True
    assert asyncio.run(session.has_element('.missing')) is False

def test_timeout_becomes_transport_timeout():
    session = PageSession(StubPlaywrightPage(fail_with=PlaywrightTimeoutError("Timeout 30000ms exceeded")))

    with pytest.raises(TransportTimeout, match="waiting for .collection_table"):
        asyncio.run(session.wait_for_selector('.collection_table'))

def test_browser_failure_becomes_transport_error():
    session = PageSession(StubPlaywrightPage(fail_with=PlaywrightError("Target closed")))

    with pytest.raises(TransportError) as exc_info:
        asyncio.run(session.navigate("https://boardgamegeek.com"))

    assert not isinstance(exc_info.value, TransportTimeout)

def test_close_errors_are_not_raised():
    stub = StubPlaywrightPage(fail_with=PlaywrightError("Target closed"))

    asyncio.run(PageSession(stub).close())

    assert ('close',) in stub.calls

class StubClosable:
    """Stands in for a Playwright context, browser or driver handle"""

    def __init__(self, name, calls, fail_with=None):
        self.name = name
        self.calls = calls
        self.fail_with = fail_with

    async def close(self):
        self.calls.append(self.name)
        if self.fail_with:
            raise self.fail_with

    async def stop(self):
        await self.close()

def make_manager_with_stub_page(stub):
    manager = BrowserManager(timeout=5000)

    async def new_page():
        return PageSession(stub, timeout=manager.timeout)

    manager.new_page = new_page
    return manager

def test_page_is_closed_when_lookup_fails():
    """Test the per-lookup page is closed even when the body raises"""
    stub = StubPlaywrightPage()
    manager = make_manager_with_stub_page(stub)

    async def failing_lookup():
        async with manager.page() as page:
            await page.navigate("https://boardgamegeek.com")
            raise NavigationError("No search results for 'Nonexistent'")

    with pytest.raises(NavigationError):
        asyncio.run(failing_lookup())

    assert stub.calls[-1] == ('close',)

def test_page_is_closed_after_success():
    stub = StubPlaywrightPage()
    manager = make_manager_with_stub_page(stub)

    async def read_page():
        async with manager.page() as page:
            return await page.content()

    assert asyncio.run(read_page()) == "<html></html>"
    assert stub.calls == [('close',)]

def test_close_releases_everything():
    calls = []
    manager = BrowserManager()
    manager.context = StubClosable('context', calls)
    manager.browser = StubClosable('browser', calls)
    manager.playwright = StubClosable('playwright', calls)

    asyncio.run(manager.close())

    assert calls == ['context', 'browser', 'playwright']
    assert manager.context is None
    assert manager.browser is None
    assert manager.playwright is None

def test_close_resets_handles_when_browser_already_gone():
    """Test a failing close still clears every handle so a restart is clean"""
    calls = []
    manager = BrowserManager()
    manager.context = StubClosable('context', calls,
                                   fail_with=PlaywrightError("Target page, context or browser has been closed"))
    manager.browser = StubClosable('browser', calls)
    manager.playwright = StubClosable('playwright', calls)

    asyncio.run(manager.close())

    assert calls == ['context']
    assert manager.context is None
    assert manager.browser is None
    assert manager.playwright is None
