"""
Main execution script for the board game sheet sync
"""
import argparse
import asyncio
import logging
from pathlib import Path
from typing import Optional

import yaml

from .core.logger import setup_logger
from .core.browser import BrowserManager
from .core.lookup import GameLookup
from .core.orchestrator import SyncOrchestrator
from .config.schema import SyncConfig, SyncSummary
from .exporters.google_sheets import GoogleSheetsStore

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / "settings.yaml"

def load_config(config_path: Path = DEFAULT_CONFIG_PATH) -> SyncConfig:
    """Load run configuration from YAML file"""
    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return SyncConfig.from_dict(data)

class BoardGameSync:
    """Wire the sheet, the browser and the orchestrator for one run"""

    def __init__(self, config: SyncConfig, logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

    def create_store(self) -> GoogleSheetsStore:
        store = GoogleSheetsStore(
            sheet_id=self.config.spreadsheet_id,
            service_account_file=self.config.service_account_file,
            sheet_name=self.config.sheet_name,
            title_range=self.config.title_range,
            first_write_column=self.config.first_write_column,
            last_write_column=self.config.last_write_column,
        )

        sheet_info = store.get_sheet_info()
        if sheet_info:
            self.logger.info(f"Connected to sheet: {sheet_info['title']} ({sheet_info['url']})")

        return store

    async def run(self) -> SyncSummary:
        """Main execution method"""
        self.logger.info("=== BOARD GAME SYNC STARTED ===")

        try:
            store = self.create_store()

            async with BrowserManager(headless=self.config.headless,
                                      timeout=self.config.page_timeout) as browser:
                lookup = GameLookup(browser, self.config)
                orchestrator = SyncOrchestrator(lookup, logger=self.logger)
                summary = await orchestrator.run(store, store)

        except Exception as e:
            self.logger.error(f"Sync failed: {e}")
            raise

        self.logger.info("=== SYNC COMPLETED ===")
        return summary

async def main(argv=None) -> SyncSummary:
    """Entry point"""
    parser = argparse.ArgumentParser(description="Sync BoardGameGeek metadata into a Google Sheet")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH,
                        help="Path to settings.yaml")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logger = setup_logger(log_level=config.log_level)

    return await BoardGameSync(config, logger=logger).run()

def cli():
    summary = asyncio.run(main())
    raise SystemExit(1 if summary.failed else 0)

if __name__ == "__main__":
    cli()
