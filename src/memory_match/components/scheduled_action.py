from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(slots=True)
class ScheduledAction:
    """One-shot delayed event; emitted once ``remaining`` reaches zero."""

    event_name: str
    remaining: float
    generation: int
    payload: Dict[str, Any] = field(default_factory=dict)
