import pytest

from memory_match.components.session import RoundPhase
from memory_match.events.bus import (
    EVENT_CARD_FLIP_REQUEST,
    EVENT_CARD_FLIPPED,
    EVENT_PAIR_MATCHED,
    EVENT_PAIR_MISMATCHED,
    EVENT_PAIR_RESOLVE,
)
from memory_match.systems.match_engine import FlipResult
from memory_match.utils.session import face_up_unmatched, find_card, visible_cards
from tests.helpers import build_game, run_for, start_playing


@pytest.fixture
def game():
    g = build_game(seed=7)
    start_playing(g)
    return g


def _record(bus, name):
    seen = []

    def handler(sender, **payload):
        seen.append(payload)

    bus.subscribe(name, handler)
    return seen


def test_preview_shows_every_card_then_hides_them():
    g = build_game(seed=1)
    g.progression.start_new_game()

    assert g.session.phase is RoundPhase.PREVIEWING
    assert all(card.face_up for card in g.cards())

    run_for(g.bus, 3.0, step=0.5)

    assert g.session.phase is RoundPhase.PLAYING
    assert not any(card.face_up for card in g.cards())


def test_flip_during_preview_is_rejected():
    g = build_game(seed=1)
    g.progression.start_new_game()
    card_id = g.cards()[0].card_id

    assert g.engine.flip(card_id) is FlipResult.REJECTED
    assert g.session.pending_flips == []


def test_matching_pair_scores_after_match_delay(game):
    first, second = game.pair_ids()[0]
    matched = _record(game.bus, EVENT_PAIR_MATCHED)

    assert game.engine.flip(first) is FlipResult.FLIPPED
    assert game.engine.flip(second) is FlipResult.MATCHED
    assert game.session.score == 0

    run_for(game.bus, 0.4)
    assert game.session.matched_pairs == 0

    run_for(game.bus, 0.1)
    assert game.session.matched_pairs == 1
    assert game.session.score == 100
    assert game.session.pending_flips == []
    assert find_card(game.world, game.session, first).matched
    assert find_card(game.world, game.session, second).matched
    assert matched[0]["card_ids"] == (first, second)


def test_match_score_scales_with_level():
    g = build_game(seed=3)
    start_playing(g, level=2)
    first, second = g.pair_ids()[0]

    g.engine.flip(first)
    g.engine.flip(second)
    run_for(g.bus, 0.5, step=0.5)

    assert g.session.score == 200


def test_mismatched_pair_turns_back_after_delay(game):
    first, second = game.mismatched_ids()
    mismatched = _record(game.bus, EVENT_PAIR_MISMATCHED)

    game.engine.flip(first)
    assert game.engine.flip(second) is FlipResult.MISMATCHED

    run_for(game.bus, 0.5, step=0.5)
    assert find_card(game.world, game.session, first).face_up
    assert find_card(game.world, game.session, second).face_up

    run_for(game.bus, 0.5, step=0.5)
    assert not find_card(game.world, game.session, first).face_up
    assert not find_card(game.world, game.session, second).face_up
    assert game.session.score == 0
    assert game.session.matched_pairs == 0
    assert game.session.pending_flips == []
    assert len(mismatched) == 1


def test_third_flip_rejected_while_pair_pending(game):
    first, second = game.mismatched_ids()
    third = next(
        card.card_id for card in game.cards() if card.card_id not in (first, second)
    )

    game.engine.flip(first)
    game.engine.flip(second)

    assert game.engine.flip(third) is FlipResult.REJECTED
    assert not find_card(game.world, game.session, third).face_up
    assert face_up_unmatched(game.world, game.session) == 2


def test_flipping_same_card_twice_is_rejected(game):
    card_id = game.cards()[0].card_id

    assert game.engine.flip(card_id) is FlipResult.FLIPPED
    assert game.engine.flip(card_id) is FlipResult.REJECTED
    assert game.session.pending_flips == [card_id]


def test_matched_card_cannot_be_flipped(game):
    first, second = game.pair_ids()[0]
    game.engine.flip(first)
    game.engine.flip(second)
    run_for(game.bus, 0.5, step=0.5)

    assert game.engine.flip(first) is FlipResult.REJECTED
    assert game.session.pending_flips == []


def test_unknown_card_is_rejected(game):
    assert game.engine.flip(999) is FlipResult.REJECTED


def test_flip_request_event_flips_card(game):
    flipped = _record(game.bus, EVENT_CARD_FLIPPED)
    card_id = game.cards()[2].card_id

    game.bus.emit(EVENT_CARD_FLIP_REQUEST, card_id=card_id)

    assert find_card(game.world, game.session, card_id).face_up
    assert flipped == [{"card_id": card_id, "generation": game.session.generation}]


def test_never_more_than_two_unmatched_cards_face_up(game):
    ids = [card.card_id for card in game.cards()]
    for card_id in ids * 2:
        game.engine.flip(card_id)
        assert face_up_unmatched(game.world, game.session) <= 2
        run_for(game.bus, 0.2)
        assert face_up_unmatched(game.world, game.session) <= 2


def test_stale_resolution_from_previous_round_is_ignored(game):
    first, second = game.pair_ids()[0]
    old_generation = game.session.generation
    game.engine.flip(first)
    game.engine.flip(second)

    assert game.progression.restart()
    run_for(game.bus, 3.0, step=0.5)
    game.bus.emit(
        EVENT_PAIR_RESOLVE,
        generation=old_generation,
        card_ids=(first, second),
        matched=True,
    )

    assert game.session.score == 0
    assert game.session.matched_pairs == 0
    assert not any(card.matched for card in game.cards())


def test_visible_cards_hide_symbols_of_face_down_cards(game):
    first, _ = game.pair_ids()[0]
    game.engine.flip(first)

    views = {view.card_id: view for view in visible_cards(game.world)}

    assert views[first].symbol is not None
    assert all(view.symbol is None for view in views.values() if view.card_id != first)
