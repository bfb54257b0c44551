from memory_match.components.game_state import GameMode
from memory_match.components.session import RoundPhase
from memory_match.rendering.overlay_renderer import _overlay_copy
from memory_match.systems.render import RenderSystem
from memory_match.utils.game_state import set_game_mode

from tests.helpers import build_game, start_playing


class DummyWindow:
    width = 800
    height = 700


def _setup(**kwargs):
    game = build_game()
    set_game_mode(game.world, game.bus, GameMode.GAME)
    render = RenderSystem(game.world, game.bus, DummyWindow())
    start_playing(game, **kwargs)
    return game, render


def test_headless_render_caches_board_for_level():
    game, render = _setup(level=2)

    render.process()  # headless layout only

    assert (render.last_geometry.rows, render.last_geometry.cols) == (3, 4)
    assert len(render.last_cards) == 12
    assert all(view.symbol is None for view in render.last_cards)


def test_render_hides_only_unflipped_symbols():
    game, render = _setup()
    first, _ = game.pair_ids()[0]
    game.engine.flip(first)

    render.process()

    shown = [view.card_id for view in render.last_cards if view.symbol is not None]
    assert shown == [first]


def test_render_skips_menu_modes():
    game, render = _setup()
    set_game_mode(game.world, game.bus, GameMode.MENU)

    render.process()

    assert render.last_geometry is None


def test_overlay_copy_per_phase():
    assert _overlay_copy(RoundPhase.ROUND_COMPLETE, 6)[1] == "You found all 6 pairs!"
    assert _overlay_copy(RoundPhase.TIME_UP, 6)[0] == "Time's Up!"
    assert _overlay_copy(RoundPhase.GAME_COMPLETE, 10)[2] == "Final Score"
    assert _overlay_copy(RoundPhase.PLAYING, 6) is None
