"""Rendering system for the menu screens."""
import arcade
from esper import World

from memory_match.components.game_state import GameMode
from memory_match.constants import COLOR_ACCENT, COLOR_TEXT
from memory_match.menu.components import LeaderboardRow, MenuBackground, MenuButton, MenuTitle, NameEntry
from memory_match.utils.game_state import get_game_state


class MenuRenderSystem:
    """Renders menu entities on every screen except the game itself."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        state = get_game_state(self.world)
        if not state or state.mode == GameMode.GAME:
            return

        for _, background in self.world.get_component(MenuBackground):
            arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, self.window.height, background.color)

        for _, title in self.world.get_component(MenuTitle):
            arcade.draw_text(
                title.text,
                title.x,
                title.y,
                COLOR_TEXT,
                title.size,
                anchor_x="center",
                anchor_y="center",
                bold=title.bold,
            )

        for _, entry in self.world.get_component(NameEntry):
            left = entry.x - entry.width / 2
            bottom = entry.y - entry.height / 2
            arcade.draw_lbwh_rectangle_filled(left, bottom, entry.width, entry.height, arcade.color.WHITE)
            arcade.draw_lbwh_rectangle_outline(left, bottom, entry.width, entry.height, COLOR_ACCENT, border_width=2)
            text = entry.text or entry.placeholder
            color = COLOR_TEXT if entry.text else arcade.color.GRAY
            arcade.draw_text(text, left + 16, entry.y, color, 18, anchor_x="left", anchor_y="center")

        for _, row in self.world.get_component(LeaderboardRow):
            left = row.x - row.width / 2
            bottom = row.y - row.height / 2
            arcade.draw_lbwh_rectangle_filled(left, bottom, row.width, row.height, arcade.color.WHITE)
            arcade.draw_text(str(row.rank), left + 20, row.y, COLOR_TEXT, 16, anchor_x="center", anchor_y="center")
            arcade.draw_text(row.name, left + 48, row.y, COLOR_TEXT, 16, anchor_x="left", anchor_y="center")
            arcade.draw_text(
                str(row.score), left + row.width - 16, row.y, COLOR_TEXT, 16, anchor_x="right", anchor_y="center", bold=True
            )

        for _, button in self.world.get_component(MenuButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            fill_color = COLOR_ACCENT if button.primary else arcade.color.WHITE
            text_color = arcade.color.WHITE if button.primary else COLOR_TEXT
            if not button.enabled:
                fill_color = arcade.color.LIGHT_GRAY
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                text_color,
                20,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
