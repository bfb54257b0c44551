from __future__ import annotations

import logging

from esper import World

from memory_match.components.round_clock import RoundClock
from memory_match.components.session import RoundPhase
from memory_match.constants import TIMER_STEP_SECONDS
from memory_match.events.bus import EVENT_TIME_UP, EVENT_TIMER_STEP, EVENT_TIMER_TICKED, EventBus
from memory_match.systems.scheduler_system import SchedulerSystem
from memory_match.utils.session import get_session, set_phase

logger = logging.getLogger(__name__)


class RoundTimerSystem:
    """Counts the round clock down in whole seconds while the phase is PLAYING.

    Each second is a ``EVENT_TIMER_STEP`` action on the scheduler, so the
    clock shares one frame-time source with every other delayed callback and
    a step scheduled on a tick only starts counting on the next one. Every
    step decrements ``SessionState.time_remaining``; reaching zero moves the
    session to TIME_UP and stops the clock.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        scheduler: SchedulerSystem,
        *,
        step: float = TIMER_STEP_SECONDS,
    ):
        self.world = world
        self.event_bus = event_bus
        self.scheduler = scheduler
        self.step = step
        self._clock_entity = self._ensure_clock_entity()
        self.event_bus.subscribe(EVENT_TIMER_STEP, self.on_step)

    def _ensure_clock_entity(self) -> int:
        existing = list(self.world.get_component(RoundClock))
        if existing:
            return existing[0][0]
        return self.world.create_entity(RoundClock())

    def _clock(self) -> RoundClock:
        return self.world.component_for_entity(self._clock_entity, RoundClock)

    @property
    def running(self) -> bool:
        return self._clock().running

    def reset(self, seconds: int) -> None:
        self.stop()
        self._clock().duration = int(seconds)
        session = get_session(self.world)
        if session is not None:
            session.time_remaining = int(seconds)

    def start(self) -> None:
        self.stop()
        self._clock().running = True
        self._schedule_step(self.step)

    def stop(self) -> None:
        clock = self._clock()
        clock.running = False
        if clock.step_entity is not None and self.world.entity_exists(clock.step_entity):
            self.world.delete_entity(clock.step_entity, immediate=True)
        clock.step_entity = None

    def _schedule_step(self, delay: float) -> None:
        session = get_session(self.world)
        generation = session.generation if session is not None else 0
        self._clock().step_entity = self.scheduler.schedule(EVENT_TIMER_STEP, delay, generation=generation)

    def on_step(self, sender, **payload):
        clock = self._clock()
        if not clock.running:
            return
        session = get_session(self.world)
        if session is None or payload.get('generation') != session.generation:
            return
        clock.step_entity = None
        if session.phase is not RoundPhase.PLAYING:
            return
        session.time_remaining = max(0, session.time_remaining - 1)
        self.event_bus.emit(
            EVENT_TIMER_TICKED,
            time_remaining=session.time_remaining,
            generation=session.generation,
        )
        if session.time_remaining > 0:
            # Carry the late part of this frame so steps do not drift.
            overdue = float(payload.get('overdue', 0.0))
            self._schedule_step(max(0.0, self.step - overdue))
            return
        self.stop()
        logger.info("Time up at level %d round %d", session.level, session.round)
        set_phase(self.event_bus, session, RoundPhase.TIME_UP)
        self.event_bus.emit(
            EVENT_TIME_UP,
            level=session.level,
            round=session.round,
            generation=session.generation,
        )
