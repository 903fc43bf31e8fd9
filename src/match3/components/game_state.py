"""Game state resource tracking whether the session has ended."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameOutcome(Enum):
    """How a finished session ended."""
    WON = auto()
    LOST = auto()


@dataclass
class GameState:
    """Singleton component; once game_over is set no swap is accepted until restart."""
    game_over: bool = False
    outcome: Optional[GameOutcome] = None
