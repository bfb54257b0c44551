"""Deck generation and card entity helpers."""
from __future__ import annotations

import random
from typing import Iterable, Sequence

from esper import World

from memory_match.components.card import Card
from memory_match.components.level_config import LevelConfig
from memory_match.errors import InsufficientSymbols

SYMBOL_POOL: tuple[str, ...] = (
    '🌸', '🍵', '🏺', '👘', '🐠', '🍱', '🍜', '🍙', '⛰️', '🏯',
    '🎌', '🦊', '🐰', '🦢', '🐦', '🦋', '🌺', '🌷', '🌈', '☁️',
    '🌙', '⭐', '🌊', '💮',
)


def generate_deck(
    config: LevelConfig,
    rng: random.Random | None = None,
    symbols: Sequence[str] = SYMBOL_POOL,
) -> list[Card]:
    """Build a shuffled, face-up deck holding ``config.pair_count`` pairs.

    Ids are assigned before shuffling, so a card's id says nothing about its
    position in the returned sequence.
    """
    rng = rng or random.Random()
    pool = list(dict.fromkeys(symbols))
    if len(pool) < config.pair_count:
        raise InsufficientSymbols(config.pair_count, len(pool))
    chosen = rng.sample(pool, config.pair_count)
    cards = [
        Card(card_id=index, symbol=symbol, face_up=True, matched=False)
        for index, symbol in enumerate(chosen + chosen)
    ]
    rng.shuffle(cards)
    return cards


def spawn_deck(world: World, cards: Iterable[Card]) -> list[int]:
    """Create one entity per card, returning entity ids in deck order."""
    return [world.create_entity(card) for card in cards]


def clear_deck(world: World, entities: Iterable[int]) -> None:
    for entity in list(entities):
        if world.entity_exists(entity):
            world.delete_entity(entity, immediate=True)
