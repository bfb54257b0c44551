"""Components used by the menu screens (home, name entry, leaderboard)."""
from dataclasses import dataclass
from enum import Enum, auto

from memory_match.constants import COLOR_BACKGROUND, PLAYER_NAME_MAX_LENGTH


class MenuAction(Enum):
    """Actions that a menu button can trigger."""
    START_GAME = auto()
    SHOW_LEADERBOARD = auto()
    SUBMIT_NAME = auto()
    PLAY_AGAIN = auto()
    BACK_HOME = auto()


@dataclass
class MenuButton:
    """Interactive button displayed on a menu screen."""
    label: str
    action: MenuAction
    x: float
    y: float
    width: float = 280.0
    height: float = 56.0
    enabled: bool = True
    primary: bool = True


@dataclass
class MenuTitle:
    text: str
    x: float
    y: float
    size: int = 36
    bold: bool = True


@dataclass
class NameEntry:
    """Text field collecting the player name."""
    x: float
    y: float
    text: str = ""
    max_length: int = PLAYER_NAME_MAX_LENGTH
    width: float = 320.0
    height: float = 52.0
    placeholder: str = "Enter username"


@dataclass
class LeaderboardRow:
    rank: int
    name: str
    score: int
    x: float
    y: float
    width: float = 360.0
    height: float = 48.0


@dataclass
class MenuBackground:
    """Background styling data for menu screens."""
    color: tuple[int, int, int] = COLOR_BACKGROUND


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass
