"""Lookup helpers around the SessionState singleton and its cards."""
from __future__ import annotations

import logging

from esper import World

from memory_match.components.card import Card, CardView
from memory_match.components.session import RoundPhase, SessionState
from memory_match.events.bus import EVENT_PHASE_CHANGED, EventBus

logger = logging.getLogger(__name__)


def get_session(world: World) -> SessionState | None:
    for _, session in world.get_component(SessionState):
        return session
    return None


def session_entity(world: World) -> int | None:
    for entity, _ in world.get_component(SessionState):
        return entity
    return None


def session_cards(world: World, session: SessionState) -> list[Card]:
    """Cards of the active round in deck order."""
    cards: list[Card] = []
    for entity in session.card_entities:
        try:
            cards.append(world.component_for_entity(entity, Card))
        except KeyError:
            continue
    return cards


def find_card(world: World, session: SessionState, card_id: int) -> Card | None:
    for card in session_cards(world, session):
        if card.card_id == card_id:
            return card
    return None


def card_view(card: Card) -> CardView:
    visible = card.face_up or card.matched
    return CardView(
        card_id=card.card_id,
        symbol=card.symbol if visible else None,
        face_up=card.face_up,
        matched=card.matched,
    )


def visible_cards(world: World) -> list[CardView]:
    session = get_session(world)
    if session is None:
        return []
    return [card_view(card) for card in session_cards(world, session)]


def face_up_unmatched(world: World, session: SessionState) -> int:
    return sum(1 for card in session_cards(world, session) if card.face_up and not card.matched)


def set_phase(event_bus: EventBus, session: SessionState, phase: RoundPhase) -> None:
    """Move the session to ``phase`` and announce the change."""
    previous = session.phase
    if previous == phase:
        return
    session.phase = phase
    logger.info(
        "Level %d round %d: %s -> %s",
        session.level,
        session.round,
        previous.name,
        phase.name,
    )
    event_bus.emit(
        EVENT_PHASE_CHANGED,
        previous_phase=previous,
        new_phase=phase,
        generation=session.generation,
    )
