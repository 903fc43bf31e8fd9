from blinker import Signal
from typing import Dict

class EventBus:
    """Publish/subscribe hub built on blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not stored anywhere still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
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
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"            # payload: row, col
EVENT_RESTART_REQUEST = "restart_request"  # payload: None


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_TILE_SELECTED = "tile_selected"              # payload: row, col
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: reason=str, prev_row, prev_col
EVENT_TILE_SWAP_VALID = "tile_swap_valid"          # payload: src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"      # payload: src=(r,c), dst=(r,c)
EVENT_MATCH_FOUND = "match_found"                  # payload: positions=[(r,c),...], size=int, runs=list
EVENT_MATCH_CLEARED = "match_cleared"              # payload: positions=[(r,c),...]
EVENT_GRAVITY_APPLIED = "gravity_applied"          # payload: moves=list[GravityMove]
EVENT_REFILL_COMPLETED = "refill_completed"        # payload: new_tiles=[(r,c),...]
EVENT_CASCADE_STEP = "cascade_step"                # payload: depth=int, positions=[(r,c),...]
EVENT_CASCADE_COMPLETE = "cascade_complete"        # payload: depth=int
EVENT_BOARD_RESET = "board_reset"                  # payload: reason=str
EVENT_BOARD_RESHUFFLED = "board_reshuffled"        # payload: attempts=int


# ============================================================================
# SCORE & GAME FLOW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int, target=int
EVENT_GAME_OVER = "game_over"                      # payload: outcome=GameOutcome, score=int
EVENT_SESSION_RESTARTED = "session_restarted"      # payload: None


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, items=list
