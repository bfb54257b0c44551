"""Session state shared by the match engine, round timer and progression."""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


class RoundPhase(Enum):
    PREVIEWING = auto()
    PLAYING = auto()
    ROUND_COMPLETE = auto()
    TIME_UP = auto()
    GAME_COMPLETE = auto()


@dataclass(slots=True)
class SessionState:
    """Singleton component owning one game from first round to completion.

    ``card_entities`` keeps deck order. ``pending_flips`` holds the ids of the
    face-up unmatched cards awaiting resolution (at most two). ``generation``
    increases on every round start; delayed callbacks compare against it.
    """

    player_name: str
    level: int = 1
    round: int = 1
    score: int = 0
    matched_pairs: int = 0
    time_remaining: int = 0
    phase: RoundPhase = RoundPhase.PREVIEWING
    card_entities: List[int] = field(default_factory=list)
    pending_flips: List[int] = field(default_factory=list)
    generation: int = 0
