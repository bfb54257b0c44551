from memory_match.components.game_state import GameMode
from memory_match.components.session import RoundPhase
from memory_match.events.bus import EVENT_MENU_ACTION, EVENT_MOUSE_PRESS
from memory_match.factories.levels import config_for
from memory_match.menu.components import MenuAction
from memory_match.systems.input import InputSystem
from memory_match.ui.layout import GameCommand, compute_board_geometry, phase_buttons
from memory_match.utils.session import get_session
from tests.helpers import build_game, match_all, start_playing


class DummyWindow:
    width = 800
    height = 700


def _click(game, x, y, *, mode=GameMode.GAME, button=1):
    game.bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=0, mode=mode)


def _card_centre(game, index):
    config = config_for(game.session.level)
    geometry = compute_board_geometry(DummyWindow.width, DummyWindow.height, config.rows, config.cols)
    left, bottom, width, height = geometry.card_rect(index)
    return left + width / 2, bottom + height / 2


def _button(phase, command):
    return next(b for b in phase_buttons(phase, DummyWindow.width, DummyWindow.height) if b.command == command)


def _setup():
    game = build_game()
    InputSystem(game.bus, DummyWindow(), game.world)
    start_playing(game)
    return game


def test_click_on_card_flips_it():
    game = _setup()

    _click(game, *_card_centre(game, 4))

    card = game.cards()[4]
    assert card.face_up
    assert game.session.pending_flips == [card.card_id]


def test_click_ignored_outside_game_mode_and_for_other_buttons():
    game = _setup()

    _click(game, *_card_centre(game, 0), mode=GameMode.MENU)
    _click(game, *_card_centre(game, 0), button=4)

    assert game.session.pending_flips == []


def test_footer_restart_button_restarts_round():
    game = _setup()
    generation = game.session.generation
    restart = _button(RoundPhase.PLAYING, GameCommand.RESTART)

    _click(game, restart.x, restart.y)

    assert game.session.phase is RoundPhase.PREVIEWING
    assert game.session.generation > generation


def test_next_round_button_advances():
    game = _setup()
    match_all(game)
    assert game.session.phase is RoundPhase.ROUND_COMPLETE
    next_round = _button(RoundPhase.ROUND_COMPLETE, GameCommand.ADVANCE)

    _click(game, next_round.x, next_round.y)

    assert game.session.round == 2


def test_view_leaderboard_button_requests_leaderboard_screen():
    game = build_game()
    InputSystem(game.bus, DummyWindow(), game.world)
    start_playing(game, level=3, round_number=3)
    match_all(game)
    game.progression.advance()
    assert game.session.phase is RoundPhase.GAME_COMPLETE
    actions = []
    game.bus.subscribe(EVENT_MENU_ACTION, lambda sender, **p: actions.append(p["action"]))
    view = _button(RoundPhase.GAME_COMPLETE, GameCommand.VIEW_LEADERBOARD)

    _click(game, view.x, view.y)

    assert actions == [MenuAction.SHOW_LEADERBOARD]


def test_exit_button_abandons_session():
    game = _setup()
    exit_button = _button(RoundPhase.PLAYING, GameCommand.EXIT)

    _click(game, exit_button.x, exit_button.y)

    assert get_session(game.world) is None
    assert game.scheduler.pending() == []
