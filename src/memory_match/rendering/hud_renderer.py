from __future__ import annotations

from memory_match.components.session import SessionState
from memory_match.constants import COLOR_ACCENT, COLOR_TEXT, HUD_HEIGHT
from memory_match.ui.layout import format_time


class HudRenderer:
    """Level/round line, score, timer bar and MM:SS clock above the grid."""

    def __init__(self, bar_height: int = 8):
        self._bar_height = bar_height

    def render(self, arcade, window_width: float, window_height: float, session: SessionState, round_seconds: int) -> None:
        margin = window_width * 0.125
        header_y = window_height - 36
        arcade.draw_text(
            f"Level {session.level} · Round {session.round}",
            margin,
            header_y,
            COLOR_TEXT,
            22,
            anchor_x="left",
            anchor_y="center",
            bold=True,
        )
        arcade.draw_text(
            f"Score: {session.score}",
            window_width - margin,
            header_y,
            COLOR_TEXT,
            22,
            anchor_x="right",
            anchor_y="center",
            bold=True,
        )
        bar_width = window_width - 2 * margin
        bar_bottom = window_height - HUD_HEIGHT / 2 - self._bar_height
        arcade.draw_lbwh_rectangle_filled(margin, bar_bottom, bar_width, self._bar_height, (255, 255, 255))
        fraction = session.time_remaining / round_seconds if round_seconds > 0 else 0.0
        fraction = max(0.0, min(1.0, fraction))
        if fraction > 0.0:
            arcade.draw_lbwh_rectangle_filled(margin, bar_bottom, bar_width * fraction, self._bar_height, COLOR_ACCENT)
        arcade.draw_text(
            format_time(session.time_remaining),
            window_width / 2,
            bar_bottom - 24,
            COLOR_TEXT,
            20,
            anchor_x="center",
            anchor_y="center",
        )
