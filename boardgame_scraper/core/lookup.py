"""
Game lookup: search BoardGameGeek for a title and scrape its detail page
"""
import logging
from typing import Dict, Set

from ..config.enums import LookupState
from ..config.schema import GameRecord, PartialFields, PriceSummary, SyncConfig
from ..extractors.field_extractor import FieldExtractor
from ..extractors.locator import parse_document
from ..extractors.player_range import PlayerRangeFormatter
from ..extractors.price_deriver import PriceDeriver
from .errors import NavigationError, TransportTimeout

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: Dict[LookupState, Set[LookupState]] = {
    LookupState.IDLE: {LookupState.SEARCHING},
    LookupState.SEARCHING: {LookupState.RESULTS_LOADED, LookupState.FAILED},
    LookupState.RESULTS_LOADED: {LookupState.DETAIL_LOADED, LookupState.FAILED},
    LookupState.DETAIL_LOADED: {LookupState.EXTRACTED, LookupState.FAILED},
    LookupState.EXTRACTED: {LookupState.IDLE},
    LookupState.FAILED: {LookupState.IDLE},
}

def build_record(fields: PartialFields, players: str, prices: PriceSummary) -> GameRecord:
    """Assemble the final record from extracted and derived values"""
    return GameRecord(
        rank=fields.rank,
        rating=fields.rating,
        players=players,
        best_players=fields.best_players,
        playing_time=fields.playing_time,
        weight=fields.weight,
        suggested_retail=prices.suggested_retail,
        used_buy_price=prices.used_buy_price,
        used_sell_price=prices.used_sell_price,
    )

class GameLookup:
    """
    Look up one title at a time on a shared browser

    Each lookup walks IDLE -> SEARCHING -> RESULTS_LOADED -> DETAIL_LOADED
    -> EXTRACTED, or ends in FAILED when a page does not load in time.
    The browser is expected to provide a page() async context manager
    yielding a PageSession.
    """

    def __init__(self, browser, config: SyncConfig,
                 field_extractor: FieldExtractor = None,
                 range_formatter: PlayerRangeFormatter = None,
                 price_deriver: PriceDeriver = None):
        self.browser = browser
        self.config = config
        self.field_extractor = field_extractor or FieldExtractor()
        self.range_formatter = range_formatter or PlayerRangeFormatter(config.max_player_span)
        self.price_deriver = price_deriver or PriceDeriver()
        self.state = LookupState.IDLE

    def _transition(self, new_state: LookupState):
        if new_state not in ALLOWED_TRANSITIONS[self.state]:
            raise RuntimeError(f"Invalid lookup transition {self.state.value} -> {new_state.value}")
        logger.debug(f"Lookup state {self.state.value} -> {new_state.value}")
        self.state = new_state

    def _fail(self):
        # FAILED is resettable, so the next title can still be looked up
        if LookupState.FAILED in ALLOWED_TRANSITIONS[self.state]:
            self._transition(LookupState.FAILED)

    def _reset(self):
        if self.state not in (LookupState.IDLE, LookupState.EXTRACTED, LookupState.FAILED):
            raise RuntimeError(f"Lookup already in progress (state {self.state.value})")
        if self.state != LookupState.IDLE:
            self._transition(LookupState.IDLE)

    async def lookup(self, title: str) -> GameRecord:
        """
        Search for a title, open the first result and scrape it

        Raises:
            NavigationError: no search results, or a page did not load in time
            TransportError: the browser session itself failed
        """
        self._reset()
        logger.info(f"Looking up game: {title}")

        async with self.browser.page() as page:
            try:
                await self._search(page, title)
                await self._open_first_result(page, title)
                record = await self._extract(page)
            except TransportTimeout as e:
                self._fail()
                raise NavigationError(f"Page did not load for '{title}': {e}") from e
            except Exception:
                self._fail()
                raise

        logger.info(f"Lookup completed for {title}")
        logger.debug(f"Record for {title}: {record.to_dict()}")
        return record

    async def _search(self, page, title: str):
        self._transition(LookupState.SEARCHING)

        await page.navigate(self.config.base_url)
        await page.type_into(self.config.search_input_selector, title)
        await page.press_enter()

        try:
            await page.wait_for_selector(self.config.results_selector)
        except TransportTimeout as e:
            raise NavigationError(f"No search results for '{title}'") from e

        self._transition(LookupState.RESULTS_LOADED)

    async def _open_first_result(self, page, title: str):
        if not await page.has_element(self.config.first_result_selector):
            raise NavigationError(f"No search results for '{title}'")

        try:
            await page.click(self.config.first_result_selector, wait_for_navigation=True)
        except TransportTimeout as e:
            raise NavigationError(f"Detail page did not load for '{title}'") from e

        self._transition(LookupState.DETAIL_LOADED)

    async def _extract(self, page) -> GameRecord:
        # All fields are read from this single snapshot of the detail page
        document = parse_document(await page.content())

        fields = self.field_extractor.extract(document)
        players = self.range_formatter.format(fields.min_players, fields.max_players)
        prices = self.price_deriver.derive(self.field_extractor.price_samples(document))

        record = build_record(fields, players, prices)
        self._transition(LookupState.EXTRACTED)
        return record
