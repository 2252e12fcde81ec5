from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SESSION & REELS
# ============================================================================
EVENT_SESSION_START_REQUEST = "session_start_request"  # payload: grid_size=int|None
EVENT_SESSION_STARTED = "session_started"              # payload: grid_size=int, pool_size=int, degraded=bool
EVENT_POOL_DEGRADED = "pool_degraded"                  # payload: grid_size=int, attempts=int
EVENT_SPIN_REQUEST = "spin_request"                    # payload: none
EVENT_SPIN_RESULT = "spin_result"                      # payload: offsets=tuple[int,...], spin_count=int


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_TILE_SWAP_REQUEST = "tile_swap_request"      # payload: src=(r,c), dst=(r,c)
EVENT_TILE_SWAP_INVALID = "tile_swap_invalid"      # payload: src=(r,c), dst=(r,c), reason=str
EVENT_TILE_SWAP_FINALIZE = "tile_swap_finalize"    # payload: src=(r,c), dst=(r,c)
EVENT_MATCH_FOUND = "match_found"                  # payload: positions=[(r,c),...], size=int
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, positions=list[(r,c)]


# ============================================================================
# MOVE BUDGET & OUTCOME
# ============================================================================
EVENT_MOVES_COMPUTED = "moves_computed"    # payload: moves=int|None
EVENT_MOVES_CHANGED = "moves_changed"      # payload: remaining=int
EVENT_GAME_WON = "game_won"                # payload: remaining=int|None
EVENT_GAME_OVER = "game_over"              # payload: reason=str
