"""
In-memory stand-ins for the browser page and the spreadsheet used by tests
"""
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from boardgame_scraper.config.schema import GameRecord, SpreadsheetRow, SyncConfig
from boardgame_scraper.core.errors import DataStoreError, TransportError, TransportTimeout

DETAIL_PAGE_HTML = """
<html><body>
<div class="game-header-ranks">
  <a class="rank-value">
     12
  </a>
</div>
<div class="rating-overall"><span class="ng-binding">8.1</span></div>
<ul class="gameplay">
  <li class="gameplay-item" itemprop="numberOfPlayers">
    <div class="gameplay-item-primary">
      <span>1-4 Players</span>
      <meta itemprop="minValue" content="1">
      <meta itemprop="maxValue" content="4">
    </div>
    <div class="gameplay-item-secondary">
      <span>Community:</span>
      <span class="ng-binding">1-4</span>
      <span class="ng-binding">Best: 3</span>
    </div>
  </li>
  <li class="gameplay-item">
    <div class="gameplay-item-primary"><span>60-120 Min</span></div>
  </li>
  <li class="gameplay-item">
    <div class="gameplay-item-primary">
      <span>Weight:</span>
      <span class="gameplay-weight-medium">3.24 / 5</span>
    </div>
  </li>
</ul>
<div class="summary summary-condensed summary-border summary-sale">
  <ul>
    <li><div class="summary-sale-item-price"><strong>$49.99</strong></div></li>
    <li><div class="summary-sale-item-price"><strong>$35.00</strong></div></li>
    <li><div class="summary-sale-item-price"><strong>N/A</strong></div></li>
  </ul>
</div>
</body></html>
"""

EMPTY_PAGE_HTML = "<html><body><h1>Nothing here</h1></body></html>"

DETAIL_PAGE_RECORD = GameRecord(
    rank="12",
    rating="8.1",
    players="1, 2, 3, 4",
    best_players="3",
    playing_time="60-120 Min",
    weight="3.24 / 5",
    suggested_retail=35.0,
    used_buy_price="8.75",
    used_sell_price="17.50",
)

def make_config(**overrides) -> SyncConfig:
    values = dict(
        spreadsheet_id="test-sheet",
        service_account_file="unused.json",
        sheet_name="Sheet5",
    )
    values.update(overrides)
    return SyncConfig(**values)

class FakePage:
    """
    Mimics PageSession against a title -> detail HTML mapping

    A title mapped to None has no search results; titles listed in
    `slow_titles` time out while the detail page loads.
    """

    def __init__(self, pages: Dict[str, Optional[str]], config: SyncConfig,
                 slow_titles=(), broken_titles=()):
        self.pages = pages
        self.config = config
        self.slow_titles = set(slow_titles)
        self.broken_titles = set(broken_titles)
        self.calls: List[str] = []
        self.title = None
        self.closed = False

    async def navigate(self, url):
        self.calls.append(f"navigate:{url}")

    async def type_into(self, selector, text):
        self.calls.append(f"type:{text}")
        self.title = text

    async def press_enter(self):
        self.calls.append("enter")
        if self.title in self.broken_titles:
            raise TransportError("Target page, context or browser has been closed")

    async def wait_for_selector(self, selector, timeout=None):
        self.calls.append(f"wait:{selector}")
        if self.pages.get(self.title) is None:
            raise TransportTimeout(f"Timeout waiting for {selector}")

    async def has_element(self, selector):
        return self.pages.get(self.title) is not None

    async def click(self, selector, wait_for_navigation=False):
        self.calls.append(f"click:{selector}")
        if self.title in self.slow_titles:
            raise TransportTimeout("Timeout waiting for navigation")

    async def content(self):
        self.calls.append("content")
        return self.pages[self.title]

    async def close(self):
        self.closed = True

class FakeBrowser:
    """Hands out FakePages through the same page() context manager as BrowserManager"""

    def __init__(self, pages: Dict[str, Optional[str]], config: SyncConfig = None,
                 slow_titles=(), broken_titles=()):
        self.pages = pages
        self.config = config or make_config()
        self.slow_titles = slow_titles
        self.broken_titles = broken_titles
        self.opened: List[FakePage] = []

    @asynccontextmanager
    async def page(self):
        page = FakePage(self.pages, self.config, self.slow_titles, self.broken_titles)
        self.opened.append(page)
        try:
            yield page
        finally:
            await page.close()

class FakeLookup:
    """Returns canned records, or raises the canned exception, per title"""

    def __init__(self, outcomes: Dict[str, object]):
        self.outcomes = outcomes
        self.titles: List[str] = []

    async def lookup(self, title):
        self.titles.append(title)
        outcome = self.outcomes[title]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

class FakeSheet:
    """Title column source and record sink backed by a dict of written ranges"""

    def __init__(self, titles: List[str], sheet_name: str = "Sheet5",
                 failing_rows=(), read_error: bool = False):
        self.titles = titles
        self.sheet_name = sheet_name
        self.failing_rows = set(failing_rows)
        self.read_error = read_error
        self.cells: Dict[str, list] = {}
        self.write_log: List[str] = []
        self.reads = 0

    def read_title_rows(self) -> List[SpreadsheetRow]:
        self.reads += 1
        if self.read_error:
            raise DataStoreError("Failed to read Sheet5!A2:A: quota exceeded")
        return [SpreadsheetRow(row_index=i + 2, title=title) for i, title in enumerate(self.titles)]

    def write_record(self, row: SpreadsheetRow, record: GameRecord):
        range_ref = f"{self.sheet_name}!{row.range_ref()}"
        self.write_log.append(range_ref)
        if row.row_index in self.failing_rows:
            raise DataStoreError(f"Failed to write {range_ref}: permission denied")
        self.cells[range_ref] = record.to_row()
