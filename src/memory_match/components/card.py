from dataclasses import dataclass

@dataclass(slots=True)
class Card:
    """One card of the active round.

    ``card_id`` is unique and stable for the round; any two cards sharing
    ``symbol`` form a pair. Only the match engine mutates the flags.
    """
    card_id: int
    symbol: str
    face_up: bool = True
    matched: bool = False


@dataclass(slots=True, frozen=True)
class CardView:
    """Renderer-facing snapshot; ``symbol`` is None while the card is hidden."""
    card_id: int
    symbol: str | None
    face_up: bool
    matched: bool
