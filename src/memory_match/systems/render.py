from esper import World

from memory_match.components.card import CardView
from memory_match.components.game_state import GameMode
from memory_match.constants import COLOR_BACKGROUND
from memory_match.events.bus import EventBus
from memory_match.factories.levels import config_for
from memory_match.rendering.card_renderer import CardRenderer
from memory_match.rendering.hud_renderer import HudRenderer
from memory_match.rendering.overlay_renderer import OverlayRenderer
from memory_match.ui.layout import BoardGeometry, compute_board_geometry, phase_buttons
from memory_match.utils.game_state import get_game_state
from memory_match.utils.session import get_session, visible_cards


class RenderSystem:
    """Draws the game screen: HUD, card grid and the phase overlay."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._card_renderer = CardRenderer()
        self._hud_renderer = HudRenderer()
        self._overlay_renderer = OverlayRenderer()
        self.last_geometry: BoardGeometry | None = None
        self.last_cards: list[CardView] = []

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        state = get_game_state(self.world)
        if state is None or state.mode != GameMode.GAME:
            return
        session = get_session(self.world)
        if session is None:
            return
        config = config_for(session.level)
        width, height = self.window.width, self.window.height
        geometry = compute_board_geometry(width, height, config.rows, config.cols)
        cards = visible_cards(self.world)
        self.last_geometry = geometry
        self.last_cards = cards
        if headless:
            return
        arcade.draw_lbwh_rectangle_filled(0, 0, width, height, COLOR_BACKGROUND)
        self._hud_renderer.render(arcade, width, height, session, config.round_seconds)
        self._card_renderer.render(arcade, geometry, cards)
        self._overlay_renderer.render(
            arcade,
            width,
            height,
            session,
            config.pair_count,
            phase_buttons(session.phase, width, height),
        )
