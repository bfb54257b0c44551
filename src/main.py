"""Entry point for the Memory Match card game.

Sets up the ECS world, event bus, systems and the Arcade window.
"""
import logging

from arcade import Window, run, set_background_color

from memory_match.components.game_state import GameMode
from memory_match.constants import COLOR_BACKGROUND, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from memory_match.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TEXT_INPUT, EVENT_TICK, EventBus
from memory_match.menu.input_system import MenuInputSystem
from memory_match.menu.render_system import MenuRenderSystem
from memory_match.systems.input import InputSystem
from memory_match.systems.match_engine import MatchEngineSystem
from memory_match.systems.progression_system import ProgressionSystem
from memory_match.systems.render import RenderSystem
from memory_match.systems.round_timer_system import RoundTimerSystem
from memory_match.systems.scheduler_system import SchedulerSystem
from memory_match.systems.screen_flow_system import ScreenFlowSystem
from memory_match.systems.session_bridge import SessionBridge
from memory_match.utils.game_state import get_game_state
from memory_match.utils.store import JsonFileStore
from memory_match.world import create_world


class MemoryMatchWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, initial_mode=GameMode.MENU)

        # Persistence
        self.store = JsonFileStore(JsonFileStore.default_path())
        self.session_bridge = SessionBridge(self.store, self.event_bus)

        # Core game systems
        self.scheduler_system = SchedulerSystem(self.world, self.event_bus)
        self.round_timer_system = RoundTimerSystem(self.world, self.event_bus, self.scheduler_system)
        self.match_engine = MatchEngineSystem(self.world, self.event_bus, self.scheduler_system)
        self.progression_system = ProgressionSystem(
            self.world,
            self.event_bus,
            match_engine=self.match_engine,
            round_timer=self.round_timer_system,
            scheduler=self.scheduler_system,
            session_bridge=self.session_bridge,
        )

        # Input systems
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)

        # Screens and rendering
        self.screen_flow_system = ScreenFlowSystem(
            self.world,
            self.event_bus,
            self.session_bridge,
            screen_size=lambda: (self.width, self.height),
        )
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.menu_render_system = MenuRenderSystem(self.world, self)

        self.screen_flow_system.show_home()
        set_background_color(COLOR_BACKGROUND)

    def on_draw(self):
        self.clear()
        if self._mode() == GameMode.GAME:
            self.render_system.process()
        else:
            self.menu_render_system.process()

    def on_update(self, delta_time: float):
        if self._mode() == GameMode.GAME:
            self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        # Receivers use the screen the press happened on, even if an earlier
        # receiver already switched screens.
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers, mode=self._mode())

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers, mode=self._mode())

    def on_text(self, text: str):
        self.event_bus.emit(EVENT_TEXT_INPUT, text=text, mode=self._mode())

    def _mode(self) -> GameMode | None:
        state = get_game_state(self.world)
        return state.mode if state else None


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - [%(name)s] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    window = MemoryMatchWindow()
    run()

if __name__ == "__main__":
    main()
