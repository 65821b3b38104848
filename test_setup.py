"""
Test that the package imports and the bundled configuration loads
"""
import logging

import pytest
import yaml

from boardgame_scraper.config.schema import SyncConfig, SpreadsheetRow
from boardgame_scraper.core.logger import setup_logger
from boardgame_scraper.core.utils import normalize_text, parse_int
from boardgame_scraper.main import DEFAULT_CONFIG_PATH, load_config

def test_imports():
    """Test that all modules can be imported"""
    from boardgame_scraper.core.browser import BrowserManager, PageSession
    from boardgame_scraper.core.lookup import GameLookup
    from boardgame_scraper.core.orchestrator import SyncOrchestrator
    from boardgame_scraper.exporters.google_sheets import GoogleSheetsStore
    from boardgame_scraper.extractors.field_extractor import FieldExtractor

    assert BrowserManager and PageSession and GameLookup and SyncOrchestrator
    assert GoogleSheetsStore and FieldExtractor

def test_default_config_loads():
    """Test the bundled settings.yaml"""
    config = load_config(DEFAULT_CONFIG_PATH)

    assert config.sheet_name == "Sheet5"
    assert config.title_range == "A2:A"
    assert (config.first_write_column, config.last_write_column) == ("B", "K")
    assert config.base_url == "https://boardgamegeek.com"
    assert config.headless is True
    assert config.max_player_span == 100

def test_config_defaults(tmp_path):
    config_file = tmp_path / "settings.yaml"
    config_file.write_text(yaml.safe_dump({
        'spreadsheet': {'id': 'abc', 'service_account_file': 'creds.json'},
        'browser': {'headless': False},
    }))

    config = load_config(config_file)

    assert config == SyncConfig(spreadsheet_id='abc', service_account_file='creds.json', headless=False)

def test_config_requires_spreadsheet_id():
    with pytest.raises(KeyError):
        SyncConfig.from_dict({'spreadsheet': {'service_account_file': 'creds.json'}})

@pytest.mark.parametrize("title_range", ["A1:A", "A:A", "Sheet5!A1:A"])
def test_config_rejects_title_range_covering_header(title_range):
    """Test a title range that includes the header row is refused at load time"""
    with pytest.raises(ValueError, match="title_range must start at row 2"):
        SyncConfig.from_dict({'spreadsheet': {
            'id': 'abc', 'service_account_file': 'creds.json', 'title_range': title_range,
        }})

def test_config_accepts_title_range_below_header():
    config = SyncConfig.from_dict({'spreadsheet': {
        'id': 'abc', 'service_account_file': 'creds.json', 'title_range': 'A5:A',
    }})

    assert config.title_range == 'A5:A'

def test_setup_logger(tmp_path):
    logger = setup_logger(name="boardgame_scraper.test_setup", log_dir=str(tmp_path / "logs"))

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2
    assert list((tmp_path / "logs").glob("sync_*.log"))

    # Second call reuses the configured logger
    assert setup_logger(name="boardgame_scraper.test_setup", log_dir=str(tmp_path / "logs")) is logger
    assert len(logger.handlers) == 2

def test_utils():
    assert normalize_text("  #12 \n") == "#12"
    assert normalize_text("Best:\n   3") == "Best: 3"
    assert normalize_text(None) == ""
    assert parse_int("3") == 3
    assert parse_int(" 4 players") == 4
    assert parse_int("abc") == 0
    assert parse_int(None) == 0

def test_spreadsheet_row():
    row = SpreadsheetRow(row_index=3, title="Azul")

    assert row.range_ref() == "B3:K3"
    assert not row.is_blank
    with pytest.raises(ValueError):
        SpreadsheetRow(row_index=1, title="Header")
