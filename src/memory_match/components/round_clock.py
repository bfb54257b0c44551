from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class RoundClock:
    """Countdown bookkeeping for the round timer.

    ``step_entity`` is the scheduled action for the next one-second step.
    """

    running: bool = False
    duration: int = 0
    step_entity: Optional[int] = None
