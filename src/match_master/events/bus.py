from blinker import Signal
from typing import Callable, Dict, List, Tuple

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}
        self._connections: List[Tuple[str, Callable]] = []

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)
        self._connections.append((name, fn))

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)
        self._connections = [(n, f) for n, f in self._connections if not (n == name and f == fn)]

    def unsubscribe_owner(self, owner):
        """Disconnect every bound method of owner; used when a system is torn down."""
        for name, fn in list(self._connections):
            if getattr(fn, "__self__", None) is owner:
                self.unsubscribe(name, fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                            # payload: dt=float
EVENT_SETTLE_COMPLETE = "settle_complete"      # payload: entity=int, indices=list[int]
EVENT_TIMER_CHANGED = "timer_changed"          # payload: remaining=int


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"              # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"                # payload: index=int
EVENT_STAR_REQUEST = "star_request"            # payload: None
EVENT_LEVEL_ADVANCE_REQUEST = "level_advance_request"  # payload: None
EVENT_THEME_TOGGLE_REQUEST = "theme_toggle_request"    # payload: None
EVENT_HINT_REQUEST = "hint_request"            # payload: None
EVENT_RESULTS_REQUEST = "results_request"      # payload: None


# ============================================================================
# SELECTION & MATCHING
# ============================================================================
EVENT_TILE_SELECTED = "tile_selected"              # payload: index, row, col, size
EVENT_SELECTION_REJECTED = "selection_rejected"    # payload: index, reason=SelectionRejection
EVENT_SELECTION_READY = "selection_ready"          # payload: indices=list[int]
EVENT_SELECTION_CLEARED = "selection_cleared"      # payload: indices=list[int], reason=str
EVENT_MATCH_EVALUATED = "match_evaluated"          # payload: indices, reference=str, match_count=int
EVENT_MATCH_SETTLED = "match_settled"              # payload: indices=list[int], matched=bool


# ============================================================================
# BOARD & SPECIALS
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, indices=list[int]
EVENT_BOOSTER_ACTIVATED = "booster_activated"      # payload: match_count=int
EVENT_BOOSTER_CHANGED = "booster_changed"          # payload: progress=int, star_available=bool
EVENT_BOMB_PLACED = "bomb_placed"                  # payload: index=int
EVENT_BOMB_TRIGGERED = "bomb_triggered"            # payload: index=int
EVENT_STAR_USED = "star_used"                      # payload: forfeited_score=int


# ============================================================================
# SCORING & LEVELS
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_MOVES_CHANGED = "moves_changed"              # payload: moves=int, delta=int
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_LEVEL_COMPLETE = "level_complete"            # payload: level, score, moves, timer, reason=str
EVENT_LEVEL_ADVANCED = "level_advanced"            # payload: level=int, result=LevelResult


# ============================================================================
# PRESENTATION
# ============================================================================
EVENT_THEME_CHANGED = "theme_changed"              # payload: theme=str
EVENT_NOTIFICATION = "notification"                # payload: kind=str, message=str
