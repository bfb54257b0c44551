"""Flip selection and pair resolution for the active round."""
from __future__ import annotations

import logging
from enum import Enum, auto

from esper import World

from memory_match.components.session import RoundPhase, SessionState
from memory_match.constants import MATCH_REVEAL_SECONDS, MISMATCH_REVEAL_SECONDS, SCORE_PER_LEVEL
from memory_match.events.bus import (
    EVENT_CARD_FLIP_REQUEST,
    EVENT_CARD_FLIPPED,
    EVENT_PAIR_MATCHED,
    EVENT_PAIR_MISMATCHED,
    EVENT_PAIR_RESOLVE,
    EventBus,
)
from memory_match.systems.scheduler_system import SchedulerSystem
from memory_match.utils.session import find_card, get_session, session_cards

logger = logging.getLogger(__name__)


class FlipResult(Enum):
    REJECTED = auto()
    FLIPPED = auto()
    MATCHED = auto()
    MISMATCHED = auto()


class MatchEngineSystem:
    """Owns card flips, the pending pair and match scoring.

    Flow:
      - ``flip`` turns a card face up and records it in ``pending_flips``.
      - The second card of a pair schedules ``EVENT_PAIR_RESOLVE``; both
        cards stay face up until it fires, which blocks further flips.
      - Resolution marks a match (score and ``matched_pairs``) or turns a
        mismatch back face down, then clears the pending pair.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        scheduler: SchedulerSystem,
        *,
        match_delay: float = MATCH_REVEAL_SECONDS,
        mismatch_delay: float = MISMATCH_REVEAL_SECONDS,
    ):
        self.world = world
        self.event_bus = event_bus
        self.scheduler = scheduler
        self.match_delay = match_delay
        self.mismatch_delay = mismatch_delay
        self.event_bus.subscribe(EVENT_CARD_FLIP_REQUEST, self.on_flip_request)
        self.event_bus.subscribe(EVENT_PAIR_RESOLVE, self.on_pair_resolve)

    # ------------------------------------------------------------------
    # Preview
    # ------------------------------------------------------------------

    def begin_preview(self) -> None:
        session = get_session(self.world)
        if session is None:
            return
        for card in session_cards(self.world, session):
            card.face_up = True

    def end_preview(self) -> None:
        session = get_session(self.world)
        if session is None:
            return
        for card in session_cards(self.world, session):
            if not card.matched:
                card.face_up = False
        session.pending_flips.clear()

    # ------------------------------------------------------------------
    # Flipping
    # ------------------------------------------------------------------

    def on_flip_request(self, sender, **payload) -> None:
        card_id = payload.get('card_id')
        if card_id is None:
            return
        self.flip(card_id)

    def flip(self, card_id: int) -> FlipResult:
        session = get_session(self.world)
        if session is None or session.phase is not RoundPhase.PLAYING:
            return self._reject(card_id, "not playing")
        if session.time_remaining <= 0:
            return self._reject(card_id, "out of time")
        if len(session.pending_flips) >= 2:
            return self._reject(card_id, "pair pending")
        card = find_card(self.world, session, card_id)
        if card is None:
            return self._reject(card_id, "unknown card")
        if card.matched or card.face_up:
            return self._reject(card_id, "already visible")

        card.face_up = True
        session.pending_flips.append(card.card_id)
        self.event_bus.emit(EVENT_CARD_FLIPPED, card_id=card.card_id, generation=session.generation)
        if len(session.pending_flips) < 2:
            return FlipResult.FLIPPED

        first_id, second_id = session.pending_flips
        first = find_card(self.world, session, first_id)
        matched = first is not None and first.symbol == card.symbol
        self.scheduler.schedule(
            EVENT_PAIR_RESOLVE,
            self.match_delay if matched else self.mismatch_delay,
            generation=session.generation,
            card_ids=(first_id, second_id),
            matched=matched,
        )
        return FlipResult.MATCHED if matched else FlipResult.MISMATCHED

    def _reject(self, card_id, reason: str) -> FlipResult:
        logger.debug("Flip of card %r rejected: %s", card_id, reason)
        return FlipResult.REJECTED

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def on_pair_resolve(self, sender, **payload) -> None:
        session = get_session(self.world)
        if session is None:
            return
        if payload.get('generation') != session.generation:
            return
        card_ids = tuple(payload.get('card_ids') or ())
        if len(card_ids) != 2 or tuple(session.pending_flips) != card_ids:
            return
        # A pair still pending when the clock ran out is dropped with the round.
        if session.phase is not RoundPhase.PLAYING:
            return
        if payload.get('matched'):
            self._apply_match(session, card_ids)
        else:
            self._apply_mismatch(session, card_ids)

    def _apply_match(self, session: SessionState, card_ids: tuple[int, int]) -> None:
        for card_id in card_ids:
            card = find_card(self.world, session, card_id)
            if card is not None:
                card.matched = True
                card.face_up = True
        session.pending_flips.clear()
        session.matched_pairs += 1
        session.score += session.level * SCORE_PER_LEVEL
        self.event_bus.emit(
            EVENT_PAIR_MATCHED,
            card_ids=card_ids,
            matched_pairs=session.matched_pairs,
            score=session.score,
            generation=session.generation,
        )

    def _apply_mismatch(self, session: SessionState, card_ids: tuple[int, int]) -> None:
        for card_id in card_ids:
            card = find_card(self.world, session, card_id)
            if card is not None and not card.matched:
                card.face_up = False
        session.pending_flips.clear()
        self.event_bus.emit(
            EVENT_PAIR_MISMATCHED,
            card_ids=card_ids,
            generation=session.generation,
        )
