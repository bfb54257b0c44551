"""Round, level and game-completion flow for one player's session."""
from __future__ import annotations

import logging
import random

from esper import World

from memory_match.components.session import RoundPhase, SessionState
from memory_match.constants import PREVIEW_SECONDS, ROUNDS_PER_LEVEL
from memory_match.errors import InvalidRound
from memory_match.events.bus import (
    EVENT_ADVANCE_REQUEST,
    EVENT_EXIT_REQUEST,
    EVENT_GAME_COMPLETE,
    EVENT_GAME_STARTED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_PAIR_MATCHED,
    EVENT_PLAYER_REQUIRED,
    EVENT_PREVIEW_ENDED,
    EVENT_RESTART_REQUEST,
    EVENT_RETRY_REQUEST,
    EVENT_ROUND_COMPLETE,
    EVENT_ROUND_STARTED,
    EVENT_SESSION_ABANDONED,
    EventBus,
)
from memory_match.factories.deck import clear_deck, generate_deck, spawn_deck
from memory_match.factories.levels import config_for, max_level
from memory_match.systems.match_engine import MatchEngineSystem
from memory_match.systems.round_timer_system import RoundTimerSystem
from memory_match.systems.scheduler_system import SchedulerSystem
from memory_match.systems.session_bridge import SessionBridge
from memory_match.utils.session import get_session, session_entity, set_phase

logger = logging.getLogger(__name__)


class ProgressionSystem:
    """Drives the phase machine of a game session.

    PREVIEWING -> PLAYING after the preview delay; PLAYING -> ROUND_COMPLETE
    once every pair of the level is matched (TIME_UP is set by the round
    timer). ``advance`` moves on from ROUND_COMPLETE to the next round, the
    next level, or GAME_COMPLETE; ``retry`` replays a timed-out round. Score
    carries over across every transition.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        match_engine: MatchEngineSystem,
        round_timer: RoundTimerSystem,
        scheduler: SchedulerSystem,
        session_bridge: SessionBridge,
        rng: random.Random | None = None,
        preview_seconds: float = PREVIEW_SECONDS,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.match_engine = match_engine
        self.round_timer = round_timer
        self.scheduler = scheduler
        self.session_bridge = session_bridge
        self.preview_seconds = preview_seconds
        self._rng = rng or getattr(world, "random", None) or random.Random()

        self.event_bus.subscribe(EVENT_PREVIEW_ENDED, self._on_preview_ended)
        self.event_bus.subscribe(EVENT_PAIR_MATCHED, self._on_pair_matched)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self._on_new_game_request)
        self.event_bus.subscribe(EVENT_ADVANCE_REQUEST, self._on_advance_request)
        self.event_bus.subscribe(EVENT_RETRY_REQUEST, self._on_retry_request)
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self._on_restart_request)
        self.event_bus.subscribe(EVENT_EXIT_REQUEST, self._on_exit_request)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_new_game(self, level: int = 1, round_number: int = 1, score: int = 0) -> bool:
        """Begin a session for the stored player; False when nobody is signed in."""
        player_name = self.session_bridge.current_player_name()
        if player_name is None:
            logger.info("No current player; session not started")
            self.event_bus.emit(EVENT_PLAYER_REQUIRED)
            return False
        config_for(level)
        if isinstance(round_number, bool) or not isinstance(round_number, int) or not 1 <= round_number <= ROUNDS_PER_LEVEL:
            raise InvalidRound(f"round {round_number!r} is not in 1..{ROUNDS_PER_LEVEL}")
        if score < 0:
            raise ValueError("score cannot be negative")

        session = get_session(self.world)
        if session is None:
            session = SessionState(player_name=player_name)
            self.world.create_entity(session)
        session.player_name = player_name
        session.level = level
        session.round = round_number
        session.score = int(score)
        self.event_bus.emit(
            EVENT_GAME_STARTED,
            player_name=player_name,
            level=level,
            round=round_number,
            score=session.score,
        )
        self._start_round(session)
        return True

    def advance(self) -> bool:
        session = get_session(self.world)
        if session is None or session.phase is not RoundPhase.ROUND_COMPLETE:
            return False
        if session.round < ROUNDS_PER_LEVEL:
            session.round += 1
        elif session.level < max_level():
            session.level += 1
            session.round = 1
        else:
            self._complete_game(session)
            return True
        self._start_round(session)
        return True

    def retry(self) -> bool:
        session = get_session(self.world)
        if session is None or session.phase is not RoundPhase.TIME_UP:
            return False
        self._start_round(session)
        return True

    def restart(self) -> bool:
        """Replay the current round with a fresh deck while it is still in progress."""
        session = get_session(self.world)
        if session is None or session.phase not in (RoundPhase.PREVIEWING, RoundPhase.PLAYING):
            return False
        self._start_round(session)
        return True

    def abandon(self) -> None:
        """Drop the session without recording a score."""
        session = get_session(self.world)
        if session is None:
            return
        self._discard_round(session)
        entity = session_entity(self.world)
        if entity is not None:
            self.world.delete_entity(entity, immediate=True)
        logger.info("Session abandoned at level %d round %d", session.level, session.round)
        self.event_bus.emit(
            EVENT_SESSION_ABANDONED,
            level=session.level,
            round=session.round,
            score=session.score,
        )

    # ------------------------------------------------------------------
    # Round lifecycle
    # ------------------------------------------------------------------

    def _start_round(self, session: SessionState) -> None:
        config = config_for(session.level)
        # Build the deck before touching state so a bad config leaves the session intact.
        cards = generate_deck(config, self._rng)
        self._discard_round(session)
        session.card_entities = spawn_deck(self.world, cards)
        session.matched_pairs = 0
        session.pending_flips = []
        self.round_timer.reset(config.round_seconds)
        set_phase(self.event_bus, session, RoundPhase.PREVIEWING)
        self.match_engine.begin_preview()
        self.scheduler.schedule(
            EVENT_PREVIEW_ENDED,
            self.preview_seconds,
            generation=session.generation,
        )
        logger.info(
            "Started level %d round %d (%d pairs, %ds) for %r",
            session.level,
            session.round,
            config.pair_count,
            config.round_seconds,
            session.player_name,
        )
        self.event_bus.emit(
            EVENT_ROUND_STARTED,
            level=session.level,
            round=session.round,
            score=session.score,
            generation=session.generation,
        )

    def _discard_round(self, session: SessionState) -> None:
        """Invalidate every callback of the current round and drop its cards."""
        session.generation += 1
        self.scheduler.cancel_all()
        self.round_timer.stop()
        clear_deck(self.world, session.card_entities)
        session.card_entities = []
        session.pending_flips = []

    def _complete_game(self, session: SessionState) -> None:
        self.scheduler.cancel_all()
        self.round_timer.stop()
        set_phase(self.event_bus, session, RoundPhase.GAME_COMPLETE)
        entries = self.session_bridge.append_score(session.player_name, session.score)
        self.session_bridge.clear_current_player()
        logger.info("Game complete for %r with %d points", session.player_name, session.score)
        self.event_bus.emit(
            EVENT_GAME_COMPLETE,
            player_name=session.player_name,
            score=session.score,
            leaderboard=entries,
        )

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_preview_ended(self, sender, **payload) -> None:
        session = get_session(self.world)
        if session is None or payload.get("generation") != session.generation:
            return
        if session.phase is not RoundPhase.PREVIEWING:
            return
        self.match_engine.end_preview()
        set_phase(self.event_bus, session, RoundPhase.PLAYING)
        self.round_timer.start()

    def _on_pair_matched(self, sender, **payload) -> None:
        session = get_session(self.world)
        if session is None or payload.get("generation") != session.generation:
            return
        if session.phase is not RoundPhase.PLAYING:
            return
        config = config_for(session.level)
        if session.matched_pairs < config.pair_count:
            return
        self.round_timer.stop()
        set_phase(self.event_bus, session, RoundPhase.ROUND_COMPLETE)
        self.event_bus.emit(
            EVENT_ROUND_COMPLETE,
            level=session.level,
            round=session.round,
            score=session.score,
            generation=session.generation,
        )

    def _on_new_game_request(self, sender, **payload) -> None:
        self.start_new_game(
            level=payload.get("level", 1),
            round_number=payload.get("round", 1),
            score=payload.get("score", 0),
        )

    def _on_advance_request(self, sender, **payload) -> None:
        self.advance()

    def _on_retry_request(self, sender, **payload) -> None:
        self.retry()

    def _on_restart_request(self, sender, **payload) -> None:
        self.restart()

    def _on_exit_request(self, sender, **payload) -> None:
        self.abandon()
