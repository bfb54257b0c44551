"""Switches between menu screens and the game."""
from __future__ import annotations

import logging
from typing import Callable

from esper import World

from memory_match.components.game_state import GameMode
from memory_match.events.bus import (
    EVENT_MENU_ACTION,
    EVENT_NEW_GAME_REQUEST,
    EVENT_PLAYER_NAME_SUBMITTED,
    EVENT_PLAYER_REQUIRED,
    EVENT_SESSION_ABANDONED,
    EventBus,
)
from memory_match.menu.components import MenuAction, NameEntry
from memory_match.menu.factory import (
    clear_menu,
    spawn_home_menu,
    spawn_leaderboard_screen,
    spawn_name_entry,
)
from memory_match.systems.session_bridge import SessionBridge
from memory_match.utils.game_state import set_game_mode

logger = logging.getLogger(__name__)


class ScreenFlowSystem:
    """Routes menu actions to screens and hands signed-in players to the game."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        session_bridge: SessionBridge,
        *,
        screen_size: Callable[[], tuple[int, int]],
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.session_bridge = session_bridge
        self._screen_size = screen_size
        self.event_bus.subscribe(EVENT_MENU_ACTION, self._on_menu_action)
        self.event_bus.subscribe(EVENT_PLAYER_REQUIRED, self._on_player_required)
        self.event_bus.subscribe(EVENT_SESSION_ABANDONED, self._on_session_abandoned)

    def show_home(self) -> None:
        width, height = self._screen_size()
        spawn_home_menu(self.world, width, height)
        set_game_mode(self.world, self.event_bus, GameMode.MENU)

    def show_name_entry(self) -> None:
        width, height = self._screen_size()
        spawn_name_entry(self.world, width, height)
        set_game_mode(self.world, self.event_bus, GameMode.NAME_ENTRY)

    def show_leaderboard(self) -> None:
        width, height = self._screen_size()
        spawn_leaderboard_screen(self.world, width, height, self.session_bridge.leaderboard())
        set_game_mode(self.world, self.event_bus, GameMode.LEADERBOARD)

    def _on_menu_action(self, sender, **payload) -> None:
        action = payload.get("action")
        if action in (MenuAction.START_GAME, MenuAction.PLAY_AGAIN):
            self.show_name_entry()
        elif action == MenuAction.SHOW_LEADERBOARD:
            self.show_leaderboard()
        elif action == MenuAction.BACK_HOME:
            self.show_home()
        elif action == MenuAction.SUBMIT_NAME:
            self._submit_name()

    def _submit_name(self) -> None:
        text = ""
        for _, entry in self.world.get_component(NameEntry):
            text = entry.text
            break
        if not text.strip():
            logger.debug("Name entry submitted without a usable name")
            return
        self.event_bus.emit(EVENT_PLAYER_NAME_SUBMITTED, name=text)
        if self.session_bridge.current_player_name() is None:
            return
        clear_menu(self.world)
        set_game_mode(self.world, self.event_bus, GameMode.GAME)
        self.event_bus.emit(EVENT_NEW_GAME_REQUEST)

    def _on_player_required(self, sender, **payload) -> None:
        self.show_name_entry()

    def _on_session_abandoned(self, sender, **payload) -> None:
        self.show_home()
