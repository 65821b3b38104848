"""
Derives retail and used-market prices from listed sale prices
"""
import logging
from typing import Callable, Iterable, List, Optional, Sequence, Union

from ..config.schema import PriceSummary
from ..core.utils import parse_price_token, format_money

logger = logging.getLogger(__name__)

PriceToken = Union[str, int, float]

# Used copies are bought at a quarter of retail and sold at half
USED_BUY_DIVISOR = 4
USED_SELL_DIVISOR = 2

class PriceDeriver:
    """Turn raw price tokens into a PriceSummary"""
    
    def __init__(self, baseline: Optional[Callable[[Sequence[float]], float]] = None):
        # Lowest listing approximates retail value among resale listings
        self.baseline = baseline or min
    
    def parse_samples(self, samples: Iterable[PriceToken]) -> List[float]:
        """Parse every token, silently dropping the ones that are not numeric"""
        prices = []
        for token in samples:
            price = parse_price_token(token)
            if price is None:
                logger.debug(f"Discarding non-numeric price token: {token!r}")
                continue
            prices.append(price)
        return prices
    
    def derive(self, samples: Iterable[PriceToken]) -> PriceSummary:
        """
        Derive prices from listed samples
        
        Examples:
        - ["$19.99", "N/A", "12.50"] -> 12.5, "3.12", "6.25"
        - [] -> 0, "0.00", "0.00"
        """
        prices = self.parse_samples(samples)
        suggested_retail = self.baseline(prices) if prices else 0
        
        return PriceSummary(
            suggested_retail=suggested_retail,
            used_buy_price=format_money(suggested_retail / USED_BUY_DIVISOR),
            used_sell_price=format_money(suggested_retail / USED_SELL_DIVISOR),
        )
