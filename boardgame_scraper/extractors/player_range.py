"""
Expands a min/max player count into a display string
"""
import logging

from ..config.schema import PLAYERS_NOT_FOUND

logger = logging.getLogger(__name__)

DEFAULT_MAX_SPAN = 100

class PlayerRangeFormatter:
    """Formats player counts as "2, 3, 4" """
    
    def __init__(self, max_span: int = DEFAULT_MAX_SPAN):
        self.max_span = max_span
    
    def format(self, min_players: int, max_players: int) -> str:
        """
        Enumerate every player count between min and max inclusive
        
        Examples:
        - (2, 4) -> "2, 3, 4"
        - (1, 1) -> "1"
        - (0, 5) -> "Players not found"
        - (5, 2) -> "Players not found" (inverted range, never an empty string)
        """
        if min_players <= 0 or max_players <= 0:
            return PLAYERS_NOT_FOUND
        
        if min_players > max_players:
            logger.warning(f"Inverted player range {min_players}-{max_players}")
            return PLAYERS_NOT_FOUND
        
        if max_players - min_players > self.max_span:
            logger.warning(
                f"Player range {min_players}-{max_players} exceeds span limit of {self.max_span}"
            )
            return PLAYERS_NOT_FOUND
        
        return ", ".join(str(count) for count in range(min_players, max_players + 1))
