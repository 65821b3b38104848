"""
CSS locators that read one optional value out of a parsed page
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from bs4 import BeautifulSoup

from ..core.utils import normalize_text

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Locator:
    """
    A CSS selector plus an optional attribute name
    
    read() returns the element's trimmed text, or the attribute value when
    an attribute is set, and None when the element (or attribute) is absent.
    """
    selector: str
    attribute: Optional[str] = None

    def read(self, document: BeautifulSoup) -> Optional[str]:
        element = document.select_one(self.selector)
        if element is None:
            return None
        
        if self.attribute:
            value = element.get(self.attribute)
            if value is None:
                return None
            return str(value).strip()
        
        return normalize_text(element.get_text())

    def read_all(self, document: BeautifulSoup) -> List[str]:
        """Trimmed text of every matching element, in document order"""
        return [normalize_text(element.get_text()) for element in document.select(self.selector)]

def parse_document(html: str) -> BeautifulSoup:
    """Parse page HTML using BeautifulSoup with built-in parser"""
    return BeautifulSoup(html or "", 'html.parser')
