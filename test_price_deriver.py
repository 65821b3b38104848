"""
Tests for retail and used-market price derivation
"""
from boardgame_scraper.config.schema import PriceSummary
from boardgame_scraper.core.utils import parse_price_token
from boardgame_scraper.extractors.price_deriver import PriceDeriver

def test_malformed_tokens_are_discarded():
    """Test the lowest parsable price becomes suggested retail"""
    summary = PriceDeriver().derive(["$19.99", "N/A", "12.50"])

    assert summary.suggested_retail == 12.5
    assert summary.used_buy_price == "3.12"
    assert summary.used_sell_price == "6.25"

def test_no_prices():
    expected = PriceSummary(suggested_retail=0, used_buy_price="0.00", used_sell_price="0.00")

    assert PriceDeriver().derive([]) == expected
    assert PriceDeriver().derive(["abc"]) == expected

def test_numeric_tokens():
    summary = PriceDeriver().derive([40, 30.0, "$55"])

    assert summary.suggested_retail == 30.0
    assert summary.used_buy_price == "7.50"
    assert summary.used_sell_price == "15.00"

def test_currency_and_thousands_separators():
    summary = PriceDeriver().derive(["US$1,299.00", "€ 1,450.50"])

    assert summary.suggested_retail == 1299.0
    assert summary.used_buy_price == "324.75"
    assert summary.used_sell_price == "649.50"

def test_swappable_baseline():
    """Test a different baseline strategy can replace the minimum"""
    average = lambda prices: sum(prices) / len(prices)
    summary = PriceDeriver(baseline=average).derive(["$10.00", "$30.00", "junk"])

    assert summary.suggested_retail == 20.0
    assert summary.used_buy_price == "5.00"
    assert summary.used_sell_price == "10.00"

def test_parse_price_token():
    assert parse_price_token("$19.99") == 19.99
    assert parse_price_token("12.50 USD") == 12.5
    assert parse_price_token("1.2.3") == 1.2
    assert parse_price_token(".75") == 0.75
    assert parse_price_token("N/A") is None
    assert parse_price_token(".") is None
    assert parse_price_token("") is None
    assert parse_price_token(None) is None
    assert parse_price_token(float("nan")) is None
