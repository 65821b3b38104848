"""
Data schema definitions for game lookup and spreadsheet sync
"""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from ..core.utils import range_start_row

# Placeholders written when a field cannot be located on the detail page
RANK_NOT_FOUND = "Rank not found"
RATING_NOT_FOUND = "Rating not found"
PLAYERS_NOT_FOUND = "Players not found"
BEST_PLAYERS_NOT_FOUND = "Best players not found"
PLAYING_TIME_NOT_FOUND = "Playing time not found"
WEIGHT_NOT_FOUND = "Weight not found"

@dataclass(frozen=True)
class GameRecord:
    """Complete metadata for one game title"""

    rank: str = RANK_NOT_FOUND
    rating: str = RATING_NOT_FOUND
    players: str = PLAYERS_NOT_FOUND
    best_players: str = BEST_PLAYERS_NOT_FOUND
    playing_time: str = PLAYING_TIME_NOT_FOUND
    weight: str = WEIGHT_NOT_FOUND

    # Pricing
    suggested_retail: float = 0
    used_buy_price: str = "0.00"
    used_sell_price: str = "0.00"

    def to_row(self) -> List[Any]:
        """Values written to columns B..H, in column order"""
        # used_buy_price / used_sell_price are intentionally not part of the row
        return [
            self.rank,
            self.rating,
            self.players,
            self.best_players,
            self.playing_time,
            self.weight,
            self.suggested_retail,
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging"""
        return {
            'Rank': self.rank,
            'Rating': self.rating,
            'Players': self.players,
            'Best Players': self.best_players,
            'Playing Time': self.playing_time,
            'Weight': self.weight,
            'Suggested Retail': self.suggested_retail,
            'Used Buy Price': self.used_buy_price,
            'Used Sell Price': self.used_sell_price,
        }

@dataclass(frozen=True)
class PartialFields:
    """Raw fields read from a detail page before derivation"""
    rank: str = RANK_NOT_FOUND
    rating: str = RATING_NOT_FOUND
    min_players: int = 0
    max_players: int = 0
    best_players: str = BEST_PLAYERS_NOT_FOUND
    playing_time: str = PLAYING_TIME_NOT_FOUND
    weight: str = WEIGHT_NOT_FOUND

@dataclass(frozen=True)
class PriceSummary:
    suggested_retail: float = 0
    used_buy_price: str = "0.00"
    used_sell_price: str = "0.00"

@dataclass
class SpreadsheetRow:
    """One physical row of the title column (display row, 1-based)"""
    row_index: int
    title: str
    record: Optional[GameRecord] = None

    def __post_init__(self):
        if self.row_index < 2:
            raise ValueError(f"Row index must be >= 2, got {self.row_index}")

    @property
    def is_blank(self) -> bool:
        return not (self.title or "").strip()

    def range_ref(self, first_column: str = "B", last_column: str = "K") -> str:
        """A1 range this row's record is written to, e.g. B3:K3"""
        return f"{first_column}{self.row_index}:{last_column}{self.row_index}"

@dataclass
class RowFailure:
    row_index: int
    title: str
    reason: str

@dataclass
class SyncSummary:
    """Outcome counts for one sync run"""
    processed: int = 0
    skipped: int = 0
    failed: int = 0
    failures: List[RowFailure] = field(default_factory=list)

    def record_failure(self, row: SpreadsheetRow, reason: str):
        self.failed += 1
        self.failures.append(RowFailure(row.row_index, row.title, reason))

    @property
    def total(self) -> int:
        return self.processed + self.skipped + self.failed

@dataclass
class SyncConfig:
    """Run configuration loaded from settings.yaml"""
    spreadsheet_id: str
    service_account_file: str
    sheet_name: str = "Sheet1"
    title_range: str = "A2:A"
    first_write_column: str = "B"
    last_write_column: str = "K"
    base_url: str = "https://boardgamegeek.com"
    search_input_selector: str = 'input[placeholder="Search"]'
    results_selector: str = ".collection_table"
    first_result_selector: str = ".collection_table .primary"
    headless: bool = True
    page_timeout: int = 30000
    max_player_span: int = 100
    log_level: str = "INFO"

    def __post_init__(self):
        if range_start_row(self.title_range) < 2:
            raise ValueError(
                f"title_range must start at row 2 or later (row 1 is the header), got {self.title_range!r}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SyncConfig":
        """Build config from the parsed YAML mapping"""
        spreadsheet = data.get('spreadsheet', {})
        browser = data.get('browser', {})
        site = data.get('site', {})
        settings = data.get('settings', {})

        return cls(
            spreadsheet_id=spreadsheet['id'],
            service_account_file=spreadsheet['service_account_file'],
            sheet_name=spreadsheet.get('sheet_name', "Sheet1"),
            title_range=spreadsheet.get('title_range', "A2:A"),
            first_write_column=spreadsheet.get('first_write_column', "B"),
            last_write_column=spreadsheet.get('last_write_column', "K"),
            base_url=site.get('base_url', "https://boardgamegeek.com"),
            search_input_selector=site.get('search_input_selector', 'input[placeholder="Search"]'),
            results_selector=site.get('results_selector', ".collection_table"),
            first_result_selector=site.get('first_result_selector', ".collection_table .primary"),
            headless=browser.get('headless', True),
            page_timeout=browser.get('page_timeout', 30000),
            max_player_span=settings.get('max_player_span', 100),
            log_level=settings.get('log_level', "INFO"),
        )
