from blinker import Signal
from typing import Dict

class EventBus:
    """Named-event hub; each event name maps to one blinker Signal."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods alive for systems nobody holds a reference to.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, /, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button, modifiers, mode=GameMode|None
EVENT_KEY_PRESS = "key_press"              # payload: symbol, modifiers, mode=GameMode|None
EVENT_TEXT_INPUT = "text_input"            # payload: text=str, mode=GameMode|None


# ============================================================================
# CARDS & MATCHING
# ============================================================================
EVENT_CARD_FLIP_REQUEST = "card_flip_request"  # payload: card_id=int
EVENT_CARD_FLIPPED = "card_flipped"            # payload: card_id=int, generation=int
EVENT_PAIR_RESOLVE = "pair_resolve"            # payload: generation=int, card_ids=(int,int), matched=bool
EVENT_PAIR_MATCHED = "pair_matched"            # payload: card_ids=(int,int), matched_pairs=int, score=int, generation=int
EVENT_PAIR_MISMATCHED = "pair_mismatched"      # payload: card_ids=(int,int), generation=int


# ============================================================================
# ROUND LIFECYCLE
# ============================================================================
EVENT_PREVIEW_ENDED = "preview_ended"      # payload: generation=int
EVENT_TIMER_STEP = "timer_step"            # payload: generation=int, overdue=float
EVENT_TIMER_TICKED = "timer_ticked"        # payload: time_remaining=int, generation=int
EVENT_TIME_UP = "time_up"                  # payload: level=int, round=int, generation=int
EVENT_PHASE_CHANGED = "phase_changed"      # payload: previous_phase=RoundPhase|None, new_phase=RoundPhase, generation=int
EVENT_ROUND_STARTED = "round_started"      # payload: level=int, round=int, score=int, generation=int
EVENT_ROUND_COMPLETE = "round_complete"    # payload: level=int, round=int, score=int, generation=int


# ============================================================================
# GAME FLOW & COMMANDS
# ============================================================================
EVENT_NEW_GAME_REQUEST = "new_game_request"    # payload: level=int, round=int, score=int (all optional)
EVENT_ADVANCE_REQUEST = "advance_request"      # payload: None
EVENT_RETRY_REQUEST = "retry_request"          # payload: None
EVENT_RESTART_REQUEST = "restart_request"      # payload: None
EVENT_EXIT_REQUEST = "exit_request"            # payload: None
EVENT_GAME_STARTED = "game_started"            # payload: player_name=str, level=int, round=int, score=int
EVENT_GAME_COMPLETE = "game_complete"          # payload: player_name=str, score=int, leaderboard=list[LeaderboardEntry]
EVENT_SESSION_ABANDONED = "session_abandoned"  # payload: level=int, round=int, score=int
EVENT_PLAYER_REQUIRED = "player_required"      # payload: None
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode


# ============================================================================
# SESSION & LEADERBOARD
# ============================================================================
EVENT_PLAYER_NAME_SUBMITTED = "player_name_submitted"  # payload: name=str
EVENT_PLAYER_CHANGED = "player_changed"                # payload: name=str|None
EVENT_LEADERBOARD_UPDATED = "leaderboard_updated"      # payload: entries=list[LeaderboardEntry]


# ============================================================================
# MENU & UI
# ============================================================================
EVENT_MENU_ACTION = "menu_action"          # payload: action=MenuAction
