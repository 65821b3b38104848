"""
Board Game Sheet Sync

A Playwright-based scraper that looks up board game metadata on BoardGameGeek
and writes it back to a Google Sheet keyed by game title.
"""

__version__ = "1.0.0"
__author__ = "Board Game Sync Team"
