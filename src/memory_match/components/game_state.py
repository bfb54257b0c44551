"""Game state resource describing the active screen."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """High-level screens; decides which systems draw and accept input."""
    MENU = auto()
    NAME_ENTRY = auto()
    GAME = auto()
    LEADERBOARD = auto()


@dataclass
class GameState:
    """Singleton component storing the currently active screen."""
    mode: GameMode = GameMode.MENU
