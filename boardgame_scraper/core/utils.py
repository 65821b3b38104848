"""
Utility functions for parsing scraped text
"""
import math
import re
from typing import Optional, Union

_NON_PRICE_CHARS = re.compile(r'[^0-9.]')
_LEADING_DECIMAL = re.compile(r'[0-9]*\.?[0-9]+|[0-9]+\.?')
_LEADING_INT = re.compile(r'[+-]?[0-9]+')

def normalize_text(text: Optional[str]) -> str:
    """
    Collapse runs of whitespace and trim
    
    Examples:
    - "  #12 \n" -> "#12"
    - "Best:\n 3" -> "Best: 3"
    """
    if not text:
        return ""
    
    return " ".join(str(text).split())

def parse_int(text: Optional[str]) -> int:
    """
    Parse the leading integer of a string, 0 when there is none
    
    Examples:
    - "3" -> 3
    - " 4 players" -> 4
    - "abc" -> 0
    """
    if text is None:
        return 0
    
    match = _LEADING_INT.match(str(text).strip())
    if not match:
        return 0
    
    return int(match.group(0))

def parse_price_token(token: Union[str, int, float, None]) -> Optional[float]:
    """
    Clean a listed price down to digits and dots, then parse its leading number
    
    Examples:
    - "$19.99" -> 19.99
    - "12.50 USD" -> 12.5
    - "1.2.3" -> 1.2
    - "N/A" -> None
    """
    if token is None or isinstance(token, bool):
        return None

    if isinstance(token, (int, float)):
        value = abs(float(token))
        return value if math.isfinite(value) else None

    cleaned = _NON_PRICE_CHARS.sub('', str(token))
    match = _LEADING_DECIMAL.match(cleaned)
    if not match:
        return None
    
    try:
        return float(match.group(0))
    except ValueError:
        return None

def format_money(amount: float) -> str:
    """Format an amount with exactly two decimals"""
    return f"{amount:.2f}"

def range_start_row(range_ref: str) -> int:
    """
    First row number of an A1 range, 1 when none is given

    Examples:
    - "A2:A" -> 2
    - "Sheet5!A10:A" -> 10
    - "A:A" -> 1
    """
    cell = range_ref.split('!')[-1].split(':')[0]
    match = re.search(r'([0-9]+)$', cell)
    return int(match.group(1)) if match else 1
