"""
Exception hierarchy for the sync pipeline
"""

class ScraperError(Exception):
    """Base class for all sync errors"""

class FieldNotFound(ScraperError):
    """A detail-page field could not be located (resolved to its sentinel)"""

    def __init__(self, field_name: str, selector: str):
        super().__init__(f"{field_name} not found ({selector})")
        self.field_name = field_name
        self.selector = selector

class NavigationError(ScraperError):
    """Search or detail-page navigation failed for a single title"""

class TransportError(ScraperError):
    """The browser session itself failed"""

class TransportTimeout(TransportError):
    """A browser call timed out"""

class DataStoreError(ScraperError):
    """Reading from or writing to the spreadsheet failed"""
