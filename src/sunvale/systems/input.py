from sunvale.components.app_state import AppTab
from sunvale.components.widgets import Widget, WidgetAction
from sunvale.events.bus import (
    EventBus,
    EVENT_INVENTORY_SET,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_PUZZLE_RANDOMIZE,
    EVENT_SLOT_ADD_REQUEST,
    EVENT_SLOT_COLOR_CYCLE,
    EVENT_SLOT_REMOVE_REQUEST,
    EVENT_SOLVE_REQUEST,
    EVENT_TAB_SELECT_REQUEST,
    EVENT_TARGET_COLOR_CYCLE,
    EVENT_THEME_TOGGLE_REQUEST,
)
from sunvale.rendering.context import build_render_context
from sunvale.utils.lookup import get_app_state, get_inventory

# Arcade button and key codes, kept local so input stays testable without a window.
MOUSE_BUTTON_LEFT = 1
MOUSE_BUTTON_RIGHT = 4
KEY_ENTER = 65293
KEY_TAB = 65289
KEY_A = 97
KEY_N = 110
KEY_R = 114
KEY_S = 115
KEY_T = 116


class InputSystem:
    """Maps clicks on page widgets and keyboard shortcuts to request events.

    Left click cycles a swatch forward (or raises an inventory count), right
    click cycles it backward (or lowers the count).
    """

    def __init__(self, event_bus: EventBus, window, world=None):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button not in (MOUSE_BUTTON_LEFT, MOUSE_BUTTON_RIGHT):
            return
        widget = self._widget_at(x, y)
        if widget is None or not widget.enabled:
            return
        step = 1 if button == MOUSE_BUTTON_LEFT else -1
        self._activate(widget, step)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol == KEY_TAB:
            self._emit_next_tab()
            return
        if not self._puzzle_tab_active():
            if symbol == KEY_T:
                self.event_bus.emit(EVENT_THEME_TOGGLE_REQUEST)
            return
        if symbol in (KEY_S, KEY_ENTER):
            self.event_bus.emit(EVENT_SOLVE_REQUEST)
        elif symbol == KEY_A:
            self.event_bus.emit(EVENT_SLOT_ADD_REQUEST)
        elif symbol == KEY_R:
            self.event_bus.emit(EVENT_SLOT_REMOVE_REQUEST)
        elif symbol == KEY_N:
            self.event_bus.emit(EVENT_PUZZLE_RANDOMIZE)
        elif symbol == KEY_T:
            self.event_bus.emit(EVENT_THEME_TOGGLE_REQUEST)

    def _activate(self, widget: Widget, step: int) -> None:
        action = widget.action
        if action == WidgetAction.SELECT_TAB:
            self.event_bus.emit(EVENT_TAB_SELECT_REQUEST, tab=widget.argument)
        elif action == WidgetAction.TOGGLE_THEME:
            self.event_bus.emit(EVENT_THEME_TOGGLE_REQUEST)
        elif action == WidgetAction.CYCLE_TARGET:
            self.event_bus.emit(EVENT_TARGET_COLOR_CYCLE, step=step)
        elif action == WidgetAction.CYCLE_SLOT:
            self.event_bus.emit(EVENT_SLOT_COLOR_CYCLE, index=widget.argument, step=step)
        elif action == WidgetAction.ADD_SLOT:
            self.event_bus.emit(EVENT_SLOT_ADD_REQUEST)
        elif action == WidgetAction.REMOVE_SLOT:
            self.event_bus.emit(EVENT_SLOT_REMOVE_REQUEST)
        elif action == WidgetAction.RANDOMIZE:
            self.event_bus.emit(EVENT_PUZZLE_RANDOMIZE)
        elif action == WidgetAction.SOLVE:
            self.event_bus.emit(EVENT_SOLVE_REQUEST)
        elif action == WidgetAction.EDIT_INVENTORY:
            inventory = get_inventory(self.world) if self.world is not None else None
            if inventory is None:
                return
            self.event_bus.emit(
                EVENT_INVENTORY_SET,
                color_value=widget.argument,
                count=inventory.count_for(widget.argument) + step,
            )

    def _widget_at(self, x, y) -> Widget | None:
        render_system = getattr(self.window, 'render_system', None)
        if render_system is not None and hasattr(render_system, 'widget_at'):
            return render_system.widget_at(x, y)
        if self.world is None:
            return None
        # No render system (tests): rebuild the layout directly.
        ctx = build_render_context(self.world, self.window.width, self.window.height)
        return ctx.layout.widget_at(x, y)

    def _puzzle_tab_active(self) -> bool:
        if self.world is None:
            return True
        state = get_app_state(self.world)
        return state is None or state.active_tab == AppTab.COLOR_PUZZLE

    def _emit_next_tab(self) -> None:
        state = get_app_state(self.world) if self.world is not None else None
        current = state.active_tab if state is not None else AppTab.COLOR_PUZZLE
        tabs = [tab for tab in AppTab if tab.enabled or tab == current]
        next_tab = tabs[(tabs.index(current) + 1) % len(tabs)]
        if next_tab != current:
            self.event_bus.emit(EVENT_TAB_SELECT_REQUEST, tab=next_tab)
