"""Input handling for the menu screens."""
from esper import World

from memory_match.components.game_state import GameMode
from memory_match.events.bus import (
    EVENT_KEY_PRESS,
    EVENT_MENU_ACTION,
    EVENT_MOUSE_PRESS,
    EVENT_TEXT_INPUT,
    EventBus,
)
from memory_match.menu.components import MenuAction, MenuButton, NameEntry
from memory_match.utils.game_state import get_game_state

# Key codes mirror arcade.key without importing arcade here.
KEY_RETURN = 65293
KEY_ENTER = 65421
KEY_BACKSPACE = 65288
KEY_ESCAPE = 65307

_MENU_MODES = (GameMode.MENU, GameMode.NAME_ENTRY, GameMode.LEADERBOARD)


class MenuInputSystem:
    """Turns clicks and keys on menu screens into ``EVENT_MENU_ACTION``."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        event_bus.subscribe(EVENT_TEXT_INPUT, self.on_text_input)

    def _mode(self, payload: dict) -> GameMode | None:
        mode = payload.get("mode")
        if isinstance(mode, GameMode):
            return mode
        state = get_game_state(self.world)
        return state.mode if state else None

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button != 1:
            return
        if self._mode(payload) not in _MENU_MODES:
            return
        for _, menu_button in list(self.world.get_component(MenuButton)):
            if not menu_button.enabled:
                continue
            if self._point_inside_button(float(x), float(y), menu_button):
                self._activate(menu_button.action)
                return

    def on_key_press(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        mode = self._mode(payload)
        if mode == GameMode.MENU:
            if symbol in (KEY_RETURN, KEY_ENTER):
                self._activate(MenuAction.START_GAME)
        elif mode == GameMode.NAME_ENTRY:
            if symbol in (KEY_RETURN, KEY_ENTER):
                self._activate(MenuAction.SUBMIT_NAME)
            elif symbol == KEY_BACKSPACE:
                entry = self._name_entry()
                if entry is not None:
                    entry.text = entry.text[:-1]
            elif symbol == KEY_ESCAPE:
                self._activate(MenuAction.BACK_HOME)
        elif mode == GameMode.LEADERBOARD:
            if symbol == KEY_ESCAPE:
                self._activate(MenuAction.BACK_HOME)

    def on_text_input(self, sender, **payload) -> None:
        if self._mode(payload) != GameMode.NAME_ENTRY:
            return
        text = payload.get("text")
        entry = self._name_entry()
        if not isinstance(text, str) or entry is None:
            return
        printable = "".join(ch for ch in text if ch.isprintable())
        if not printable:
            return
        room = entry.max_length - len(entry.text)
        if room > 0:
            entry.text += printable[:room]

    def _name_entry(self) -> NameEntry | None:
        for _, entry in self.world.get_component(NameEntry):
            return entry
        return None

    def _activate(self, action: MenuAction) -> None:
        self.event_bus.emit(EVENT_MENU_ACTION, action=action)

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )
