from __future__ import annotations

from typing import Any

from esper import World

from memory_match.components.scheduled_action import ScheduledAction
from memory_match.events.bus import EVENT_TICK, EventBus


class SchedulerSystem:
    """One-shot delayed events driven by the frame tick.

    Each scheduled action is its own entity carrying a ``ScheduledAction``.
    When its delay runs out the entity is removed and ``event_name`` is
    emitted with ``generation``, ``overdue`` (how far past the delay the
    firing tick ran) and the stored payload; receivers decide whether that
    generation is still current.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def schedule(self, event_name: str, delay: float, *, generation: int, **payload: Any) -> int:
        return self.world.create_entity(
            ScheduledAction(
                event_name=event_name,
                remaining=max(0.0, float(delay)),
                generation=generation,
                payload=dict(payload),
            )
        )

    def cancel_all(self) -> int:
        entities = [ent for ent, _ in self.world.get_component(ScheduledAction)]
        for ent in entities:
            self.world.delete_entity(ent, immediate=True)
        return len(entities)

    def pending(self) -> list[ScheduledAction]:
        return [action for _, action in self.world.get_component(ScheduledAction)]

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            return
        if dt <= 0.0:
            return
        due: list[tuple[int, ScheduledAction]] = []
        for ent, action in list(self.world.get_component(ScheduledAction)):
            action.remaining -= dt
            if action.remaining <= 1e-9:
                due.append((ent, action))
        # Fire in scheduling order; an earlier callback may cancel later ones.
        due.sort(key=lambda item: item[0])
        for ent, action in due:
            if not self.world.entity_exists(ent):
                continue
            self.world.delete_entity(ent, immediate=True)
            self.event_bus.emit(
                action.event_name,
                generation=action.generation,
                overdue=max(0.0, -action.remaining),
                **action.payload,
            )
