import random

from esper import World

from memory_match.components.game_state import GameMode, GameState
from memory_match.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.MENU,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create the world with its GameState singleton.

    The session, deck and clock entities are created later by the systems that
    own them. ``world.random`` is the shared RNG systems fall back to.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    world.create_entity(GameState(mode=initial_mode))
    return world
