"""
Field extractor for BoardGameGeek game detail pages
"""
import logging
from typing import Any, Callable, Dict, List, Union

from bs4 import BeautifulSoup

from ..config.schema import (
    PartialFields,
    RANK_NOT_FOUND,
    RATING_NOT_FOUND,
    BEST_PLAYERS_NOT_FOUND,
    PLAYING_TIME_NOT_FOUND,
    WEIGHT_NOT_FOUND,
)
from ..core.errors import FieldNotFound
from ..core.utils import parse_int
from .locator import Locator, parse_document

logger = logging.getLogger(__name__)

BEST_PLAYERS_MARKER = "Best: "

# Field name -> where it lives on the detail page
FIELD_LOCATORS: Dict[str, Locator] = {
    'rank': Locator('.game-header-ranks .rank-value'),
    'rating': Locator('.rating-overall .ng-binding'),
    'min_players': Locator('.gameplay-item-primary meta[itemprop="minValue"]', attribute='content'),
    'max_players': Locator('.gameplay-item-primary meta[itemprop="maxValue"]', attribute='content'),
    'best_players': Locator('.gameplay-item-secondary span.ng-binding:nth-child(3)'),
    'playing_time': Locator(
        '.gameplay-item[itemprop="numberOfPlayers"] + .gameplay-item .gameplay-item-primary span'
    ),
    'weight': Locator(
        '.gameplay-item-primary .gameplay-weight-medium, '
        '.gameplay-item-primary .gameplay-weight-light, '
        '.gameplay-item-primary .gameplay-weight-heavy'
    ),
}

PRICE_LOCATOR = Locator(
    '.summary.summary-condensed.summary-border.summary-sale li .summary-sale-item-price strong'
)

FIELD_SENTINELS: Dict[str, Any] = {
    'rank': RANK_NOT_FOUND,
    'rating': RATING_NOT_FOUND,
    'min_players': 0,
    'max_players': 0,
    'best_players': BEST_PLAYERS_NOT_FOUND,
    'playing_time': PLAYING_TIME_NOT_FOUND,
    'weight': WEIGHT_NOT_FOUND,
}

def _parse_best_players(text: str) -> str:
    # e.g. "Community: 1-4 Best: 3"
    if BEST_PLAYERS_MARKER not in text:
        raise ValueError(f"no '{BEST_PLAYERS_MARKER.strip()}' marker in {text!r}")
    return text.split(BEST_PLAYERS_MARKER)[1].strip()

FIELD_PARSERS: Dict[str, Callable[[str], Any]] = {
    'min_players': parse_int,
    'max_players': parse_int,
    'best_players': _parse_best_players,
}

class FieldExtractor:
    """Read each detail-page field independently, falling back to its sentinel"""

    def __init__(self, locators: Dict[str, Locator] = None, price_locator: Locator = None):
        self.locators = locators or FIELD_LOCATORS
        self.price_locator = price_locator or PRICE_LOCATOR

    @staticmethod
    def _as_document(page: Union[str, BeautifulSoup]) -> BeautifulSoup:
        if isinstance(page, BeautifulSoup):
            return page
        return parse_document(page)

    def read_field(self, document: BeautifulSoup, field_name: str) -> Any:
        """
        Read one field, raising FieldNotFound when its element is absent
        or its text does not hold the expected value
        """
        locator = self.locators[field_name]
        raw = locator.read(document)
        if raw is None:
            raise FieldNotFound(field_name, locator.selector)

        parser = FIELD_PARSERS.get(field_name)
        if parser is None:
            return raw

        try:
            return parser(raw)
        except ValueError as e:
            raise FieldNotFound(field_name, locator.selector) from e

    def extract(self, page: Union[str, BeautifulSoup]) -> PartialFields:
        """
        Extract all fields from a loaded detail page

        Missing fields never abort extraction; each resolves to its sentinel.
        """
        document = self._as_document(page)
        values = {}

        for field_name in FIELD_SENTINELS:
            try:
                values[field_name] = self.read_field(document, field_name)
            except FieldNotFound as e:
                logger.debug(f"Using sentinel for {e}")
                values[field_name] = FIELD_SENTINELS[field_name]

        return PartialFields(**values)

    def price_samples(self, page: Union[str, BeautifulSoup]) -> List[str]:
        """Raw text of every sale price listed on the page"""
        return self.price_locator.read_all(self._as_document(page))
