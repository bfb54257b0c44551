"""Screen geometry shared by the renderer and the input system.

Arcade's origin is the bottom-left corner; card index 0 sits top-left and
indices run row by row.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from memory_match.components.session import RoundPhase
from memory_match.constants import (
    BOARD_MAX_WIDTH_PCT,
    CARD_ASPECT,
    CARD_GAP,
    CARD_MIN_WIDTH,
    FOOTER_BUTTON_HEIGHT,
    FOOTER_BUTTON_WIDTH,
    FOOTER_HEIGHT,
    HUD_HEIGHT,
    OVERLAY_BUTTON_HEIGHT,
    OVERLAY_BUTTON_WIDTH,
    OVERLAY_HEIGHT,
)

Rect = tuple[float, float, float, float]  # left, bottom, width, height


class GameCommand(Enum):
    ADVANCE = auto()
    RETRY = auto()
    RESTART = auto()
    EXIT = auto()
    VIEW_LEADERBOARD = auto()


@dataclass(slots=True, frozen=True)
class UiButton:
    label: str
    command: GameCommand
    x: float
    y: float
    width: float
    height: float
    primary: bool = True

    def contains(self, px: float, py: float) -> bool:
        half_w = self.width / 2
        half_h = self.height / 2
        return self.x - half_w <= px <= self.x + half_w and self.y - half_h <= py <= self.y + half_h


@dataclass(slots=True, frozen=True)
class BoardGeometry:
    rows: int
    cols: int
    card_width: float
    card_height: float
    gap: float
    left: float
    bottom: float

    @property
    def width(self) -> float:
        return self.cols * self.card_width + (self.cols - 1) * self.gap

    @property
    def height(self) -> float:
        return self.rows * self.card_height + (self.rows - 1) * self.gap

    def card_rect(self, index: int) -> Rect:
        row, col = divmod(index, self.cols)
        left = self.left + col * (self.card_width + self.gap)
        top = self.bottom + self.height - row * (self.card_height + self.gap)
        return left, top - self.card_height, self.card_width, self.card_height

    def index_at(self, x: float, y: float) -> int | None:
        """Card index under the point, or None for gaps and outside clicks."""
        for index in range(self.rows * self.cols):
            left, bottom, width, height = self.card_rect(index)
            if left <= x <= left + width and bottom <= y <= bottom + height:
                return index
        return None


def compute_board_geometry(window_width: float, window_height: float, rows: int, cols: int) -> BoardGeometry:
    avail_w = window_width * BOARD_MAX_WIDTH_PCT
    avail_h = max(window_height - HUD_HEIGHT - FOOTER_HEIGHT, 0)
    by_width = (avail_w - CARD_GAP * (cols - 1)) / cols
    by_height = (avail_h - CARD_GAP * (rows - 1)) / rows / CARD_ASPECT
    card_width = max(min(by_width, by_height), CARD_MIN_WIDTH)
    card_height = card_width * CARD_ASPECT
    total_w = cols * card_width + CARD_GAP * (cols - 1)
    total_h = rows * card_height + CARD_GAP * (rows - 1)
    left = (window_width - total_w) / 2
    bottom = FOOTER_HEIGHT + max(avail_h - total_h, 0) / 2
    return BoardGeometry(
        rows=rows,
        cols=cols,
        card_width=card_width,
        card_height=card_height,
        gap=CARD_GAP,
        left=left,
        bottom=bottom,
    )


_OVERLAY_COMMANDS: dict[RoundPhase, tuple[tuple[str, GameCommand], ...]] = {
    RoundPhase.ROUND_COMPLETE: (("Next Round", GameCommand.ADVANCE), ("Back to Home", GameCommand.EXIT)),
    RoundPhase.TIME_UP: (("Try Again", GameCommand.RETRY), ("Back to Home", GameCommand.EXIT)),
    RoundPhase.GAME_COMPLETE: (("View Leaderboard", GameCommand.VIEW_LEADERBOARD), ("Back to Home", GameCommand.EXIT)),
}


def overlay_buttons(phase: RoundPhase, window_width: float, window_height: float) -> list[UiButton]:
    commands = _OVERLAY_COMMANDS.get(phase, ())
    center_x = window_width / 2
    first_y = window_height / 2 - OVERLAY_HEIGHT / 2 + 40 + OVERLAY_BUTTON_HEIGHT * 1.5
    buttons = []
    for order, (label, command) in enumerate(commands):
        buttons.append(
            UiButton(
                label=label,
                command=command,
                x=center_x,
                y=first_y - order * (OVERLAY_BUTTON_HEIGHT + 12),
                width=OVERLAY_BUTTON_WIDTH,
                height=OVERLAY_BUTTON_HEIGHT,
                primary=order == 0,
            )
        )
    return buttons


def footer_buttons(window_width: float) -> list[UiButton]:
    y = FOOTER_HEIGHT / 2
    center_x = window_width / 2
    offset = FOOTER_BUTTON_WIDTH / 2 + 12
    return [
        UiButton("Restart", GameCommand.RESTART, center_x - offset, y, FOOTER_BUTTON_WIDTH, FOOTER_BUTTON_HEIGHT, False),
        UiButton("Exit", GameCommand.EXIT, center_x + offset, y, FOOTER_BUTTON_WIDTH, FOOTER_BUTTON_HEIGHT, False),
    ]


def phase_buttons(phase: RoundPhase, window_width: float, window_height: float) -> list[UiButton]:
    """Buttons clickable in ``phase``: the overlay when one is shown, else the footer."""
    if phase in _OVERLAY_COMMANDS:
        return overlay_buttons(phase, window_width, window_height)
    return footer_buttons(window_width)


def format_time(seconds: int) -> str:
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"
