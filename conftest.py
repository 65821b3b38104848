"""
Pytest conftest: path setup so tests can import the package and fakes
"""
import sys
from pathlib import Path

import pytest

# Add the project root to Python path
PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fakes import DETAIL_PAGE_HTML, EMPTY_PAGE_HTML

@pytest.fixture
def detail_html():
    return DETAIL_PAGE_HTML

@pytest.fixture
def empty_html():
    return EMPTY_PAGE_HTML
