from __future__ import annotations

from typing import TYPE_CHECKING

from memory_match.components.card import CardView
from memory_match.constants import (
    COLOR_ACCENT,
    COLOR_CARD_BACK,
    COLOR_CARD_DOT,
    COLOR_CARD_FRONT,
    COLOR_CARD_MATCHED,
)

if TYPE_CHECKING:
    from memory_match.ui.layout import BoardGeometry


class CardRenderer:
    """Draws the card grid; hidden cards show only their back."""

    def render(self, arcade, geometry: BoardGeometry, cards: list[CardView]) -> None:
        for index, view in enumerate(cards):
            left, bottom, width, height = geometry.card_rect(index)
            center_x = left + width / 2
            center_y = bottom + height / 2
            if view.symbol is None:
                arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, COLOR_CARD_BACK)
                arcade.draw_circle_filled(center_x, center_y, min(width, height) * 0.12, COLOR_CARD_DOT)
                continue
            fill = COLOR_CARD_MATCHED if view.matched else COLOR_CARD_FRONT
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, fill)
            if not view.matched:
                arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, COLOR_ACCENT, border_width=2)
            arcade.draw_text(
                view.symbol,
                center_x,
                center_y,
                (0, 0, 0),
                int(min(width, height) * 0.45),
                anchor_x="center",
                anchor_y="center",
            )
