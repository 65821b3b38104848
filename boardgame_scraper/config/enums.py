"""
Enum definitions for lookup state
"""
from enum import Enum

class LookupState(Enum):
    IDLE = "IDLE"
    SEARCHING = "SEARCHING"
    RESULTS_LOADED = "RESULTS_LOADED"
    DETAIL_LOADED = "DETAIL_LOADED"
    EXTRACTED = "EXTRACTED"
    FAILED = "FAILED"
