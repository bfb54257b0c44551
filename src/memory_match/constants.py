# ============================================================================
# ROUND TIMING (seconds)
# ============================================================================
PREVIEW_SECONDS = 3.0          # cards shown face up before play starts
MATCH_REVEAL_SECONDS = 0.5     # both faces stay visible before a match is applied
MISMATCH_REVEAL_SECONDS = 1.0  # both faces stay visible before flipping back
TIMER_STEP_SECONDS = 1.0       # round clock granularity


# ============================================================================
# PROGRESSION & SCORING
# ============================================================================
ROUNDS_PER_LEVEL = 3
SCORE_PER_LEVEL = 100          # a match awards level * SCORE_PER_LEVEL
LEADERBOARD_SIZE = 5


# ============================================================================
# PERSISTENCE
# ============================================================================
STORE_KEY_CURRENT_PLAYER = "currentPlayer"
STORE_KEY_LEADERBOARD = "leaderboard"
PLAYER_NAME_MAX_LENGTH = 20


# ============================================================================
# WINDOW & LAYOUT
# ============================================================================
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 700
WINDOW_TITLE = "Memory Match"

# Vertical space reserved for the HUD (level/score line, timer bar, clock).
HUD_HEIGHT = 130
# Space kept free below the grid for the restart/exit footer.
FOOTER_HEIGHT = 80
# Grid may not exceed this share of the window width.
BOARD_MAX_WIDTH_PCT = 0.75
CARD_GAP = 12
# Cards are taller than wide (4:5).
CARD_ASPECT = 1.25
CARD_MIN_WIDTH = 24

OVERLAY_WIDTH = 360
OVERLAY_HEIGHT = 300
OVERLAY_BUTTON_WIDTH = 260
OVERLAY_BUTTON_HEIGHT = 48

FOOTER_BUTTON_WIDTH = 120
FOOTER_BUTTON_HEIGHT = 36

# Palette
COLOR_BACKGROUND = (255, 245, 245)
COLOR_TEXT = (139, 110, 94)
COLOR_ACCENT = (212, 165, 165)
COLOR_CARD_BACK = (255, 255, 255)
COLOR_CARD_FRONT = (255, 245, 245)
COLOR_CARD_DOT = (245, 230, 230)
COLOR_CARD_MATCHED = (232, 245, 232)
