from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from esper import World

from memory_match.components.card import Card
from memory_match.components.session import SessionState
from memory_match.events.bus import EVENT_TICK, EventBus
from memory_match.systems.match_engine import MatchEngineSystem
from memory_match.systems.progression_system import ProgressionSystem
from memory_match.systems.round_timer_system import RoundTimerSystem
from memory_match.systems.scheduler_system import SchedulerSystem
from memory_match.systems.session_bridge import SessionBridge
from memory_match.utils.session import get_session, session_cards
from memory_match.utils.store import InMemoryStore
from memory_match.world import create_world


@dataclass
class Game:
    world: World
    bus: EventBus
    store: InMemoryStore
    bridge: SessionBridge
    scheduler: SchedulerSystem
    timer: RoundTimerSystem
    engine: MatchEngineSystem
    progression: ProgressionSystem

    @property
    def session(self) -> SessionState:
        session = get_session(self.world)
        assert session is not None, "SessionState component expected"
        return session

    def cards(self) -> list[Card]:
        return session_cards(self.world, self.session)

    def pair_ids(self) -> list[tuple[int, int]]:
        """Card id pairs sharing a symbol, in first-seen order."""
        by_symbol: dict[str, list[int]] = {}
        for card in self.cards():
            by_symbol.setdefault(card.symbol, []).append(card.card_id)
        return [(ids[0], ids[1]) for ids in by_symbol.values()]

    def mismatched_ids(self) -> tuple[int, int]:
        pairs = self.pair_ids()
        return pairs[0][0], pairs[1][0]


def build_game(
    *,
    player: str | None = "Yuko",
    seed: int = 0,
    store: InMemoryStore | None = None,
) -> Game:
    """Wire the core systems against an in-memory store, without a window."""
    bus = EventBus()
    rng = random.Random(seed)
    world = create_world(bus, rng=rng)
    store = store or InMemoryStore()
    bridge = SessionBridge(store, bus)
    if player is not None:
        bridge.set_current_player(player)
    scheduler = SchedulerSystem(world, bus)
    timer = RoundTimerSystem(world, bus, scheduler)
    engine = MatchEngineSystem(world, bus, scheduler)
    progression = ProgressionSystem(
        world,
        bus,
        match_engine=engine,
        round_timer=timer,
        scheduler=scheduler,
        session_bridge=bridge,
        rng=rng,
    )
    return Game(world, bus, store, bridge, scheduler, timer, engine, progression)


def run_for(bus: EventBus, seconds: float, step: float = 0.1) -> None:
    """Emit frame ticks totalling ``seconds``."""
    steps = int(round(seconds / step))
    for _ in range(steps):
        bus.emit(EVENT_TICK, dt=step)


def start_playing(game: Game, **kwargs) -> None:
    """Start a game and let the preview run out."""
    assert game.progression.start_new_game(**kwargs)
    run_for(game.bus, 3.0, step=0.5)


def match_all(game: Game, pairs: Sequence[tuple[int, int]] | None = None) -> None:
    for first, second in pairs if pairs is not None else game.pair_ids():
        game.engine.flip(first)
        game.engine.flip(second)
        run_for(game.bus, 0.5, step=0.5)
