from __future__ import annotations

from memory_match.components.session import RoundPhase, SessionState
from memory_match.constants import COLOR_ACCENT, COLOR_TEXT, OVERLAY_HEIGHT, OVERLAY_WIDTH
from memory_match.ui.layout import UiButton


def _overlay_copy(phase: RoundPhase, pair_count: int) -> tuple[str, str, str] | None:
    if phase is RoundPhase.ROUND_COMPLETE:
        return "Round Complete!", f"You found all {pair_count} pairs!", "Score"
    if phase is RoundPhase.TIME_UP:
        return "Time's Up!", "You ran out of time.", "Score"
    if phase is RoundPhase.GAME_COMPLETE:
        return "Congratulations! 🎉", "You've completed all levels!", "Final Score"
    return None


class OverlayRenderer:
    """Modal boxes for round complete, time up and game complete, plus the footer."""

    def render(
        self,
        arcade,
        window_width: float,
        window_height: float,
        session: SessionState,
        pair_count: int,
        buttons: list[UiButton],
    ) -> None:
        copy = _overlay_copy(session.phase, pair_count)
        if copy is not None:
            title, subtitle, score_label = copy
            arcade.draw_lbwh_rectangle_filled(0, 0, window_width, window_height, (0, 0, 0, 128))
            left = (window_width - OVERLAY_WIDTH) / 2
            bottom = (window_height - OVERLAY_HEIGHT) / 2
            top = bottom + OVERLAY_HEIGHT
            center_x = window_width / 2
            arcade.draw_lbwh_rectangle_filled(left, bottom, OVERLAY_WIDTH, OVERLAY_HEIGHT, (255, 255, 255))
            arcade.draw_text(title, center_x, top - 34, COLOR_TEXT, 22, anchor_x="center", anchor_y="center", bold=True)
            arcade.draw_text(subtitle, center_x, top - 64, COLOR_ACCENT, 14, anchor_x="center", anchor_y="center")
            arcade.draw_text(score_label, center_x, top - 94, COLOR_TEXT, 12, anchor_x="center", anchor_y="center")
            arcade.draw_text(
                str(session.score), center_x, top - 124, COLOR_TEXT, 30, anchor_x="center", anchor_y="center", bold=True
            )
        for button in buttons:
            self._draw_button(arcade, button)

    @staticmethod
    def _draw_button(arcade, button: UiButton) -> None:
        left = button.x - button.width / 2
        bottom = button.y - button.height / 2
        if button.primary:
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, COLOR_ACCENT)
            text_color = (255, 255, 255)
        else:
            text_color = COLOR_TEXT
        arcade.draw_text(
            button.label,
            button.x,
            button.y,
            text_color,
            16,
            anchor_x="center",
            anchor_y="center",
        )
