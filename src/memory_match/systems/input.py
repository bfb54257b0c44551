from esper import World

from memory_match.components.card import Card
from memory_match.components.game_state import GameMode
from memory_match.components.session import RoundPhase
from memory_match.events.bus import (
    EventBus,
    EVENT_ADVANCE_REQUEST,
    EVENT_CARD_FLIP_REQUEST,
    EVENT_EXIT_REQUEST,
    EVENT_MENU_ACTION,
    EVENT_MOUSE_PRESS,
    EVENT_RESTART_REQUEST,
    EVENT_RETRY_REQUEST,
)
from memory_match.factories.levels import config_for
from memory_match.menu.components import MenuAction
from memory_match.ui.layout import GameCommand, compute_board_geometry, phase_buttons
from memory_match.utils.game_state import get_game_state
from memory_match.utils.session import get_session

_COMMAND_EVENTS = {
    GameCommand.ADVANCE: EVENT_ADVANCE_REQUEST,
    GameCommand.RETRY: EVENT_RETRY_REQUEST,
    GameCommand.RESTART: EVENT_RESTART_REQUEST,
    GameCommand.EXIT: EVENT_EXIT_REQUEST,
}


class InputSystem:
    """Maps clicks on the game screen to card flips and phase commands."""

    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None or button != 1:
            return
        mode = kwargs.get('mode')
        if not isinstance(mode, GameMode):
            state = get_game_state(self.world)
            mode = state.mode if state else None
        if mode != GameMode.GAME:
            return
        session = get_session(self.world)
        if session is None:
            return
        for ui_button in phase_buttons(session.phase, self.window.width, self.window.height):
            if ui_button.contains(x, y):
                self._dispatch(ui_button.command)
                return
        if session.phase is not RoundPhase.PLAYING:
            return
        config = config_for(session.level)
        geometry = compute_board_geometry(self.window.width, self.window.height, config.rows, config.cols)
        index = geometry.index_at(x, y)
        if index is None or index >= len(session.card_entities):
            return
        try:
            card = self.world.component_for_entity(session.card_entities[index], Card)
        except KeyError:
            return
        self.event_bus.emit(EVENT_CARD_FLIP_REQUEST, card_id=card.card_id)

    def _dispatch(self, command: GameCommand) -> None:
        if command == GameCommand.VIEW_LEADERBOARD:
            self.event_bus.emit(EVENT_MENU_ACTION, action=MenuAction.SHOW_LEADERBOARD)
            return
        self.event_bus.emit(_COMMAND_EVENTS[command])
