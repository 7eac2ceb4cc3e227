from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not stored anywhere keep receiving events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"  # payload: x, y, button, modifiers
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button, press_id
EVENT_KEY_PRESS = "key_press"              # payload: symbol, modifiers


# ============================================================================
# PUZZLE EDITING
# ============================================================================
EVENT_SLOT_ADD_REQUEST = "slot_add_request"          # payload: color=str|None
EVENT_SLOT_REMOVE_REQUEST = "slot_remove_request"    # payload: None
EVENT_SLOT_COLOR_SET = "slot_color_set"              # payload: index=int, color=str
EVENT_SLOT_COLOR_CYCLE = "slot_color_cycle"          # payload: index=int, step=int
EVENT_TARGET_COLOR_SET = "target_color_set"          # payload: color=str
EVENT_TARGET_COLOR_CYCLE = "target_color_cycle"      # payload: step=int
EVENT_INVENTORY_SET = "inventory_set"                # payload: color_value=int, count=Any
EVENT_PUZZLE_RANDOMIZE = "puzzle_randomize"          # payload: None
EVENT_PUZZLE_CHANGED = "puzzle_changed"              # payload: reason=str, target=str, slots=list[str], inventory=dict[int,int]


# ============================================================================
# SOLVING
# ============================================================================
EVENT_SOLVE_REQUEST = "solve_request"      # payload: None
EVENT_SOLUTION_READY = "solution_ready"    # payload: steps=list[PlacementStep], lines=list[str], solved=bool


# ============================================================================
# NAVIGATION & THEME
# ============================================================================
EVENT_TAB_SELECT_REQUEST = "tab_select_request"    # payload: tab=AppTab
EVENT_TAB_CHANGED = "tab_changed"                  # payload: previous_tab=AppTab, new_tab=AppTab
EVENT_THEME_TOGGLE_REQUEST = "theme_toggle_request"  # payload: None
EVENT_THEME_CHANGED = "theme_changed"              # payload: previous_theme=Theme, new_theme=Theme
