from __future__ import annotations

from esper import World

from sunvale.components.app_state import AppState, AppTab
from sunvale.events.bus import EVENT_TAB_CHANGED, EVENT_TAB_SELECT_REQUEST, EventBus
from sunvale.utils.lookup import get_app_state


class NavigationSystem:
    """Switches between tabs; disabled tabs cannot be opened."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TAB_SELECT_REQUEST, self.on_tab_select_request)

    def on_tab_select_request(self, sender, **payload) -> None:
        tab = self._coerce_tab(payload.get("tab"))
        if tab is None or not tab.enabled:
            return
        state = get_app_state(self.world)
        if state is None:
            state = AppState()
            self.world.create_entity(state)
        previous = state.active_tab
        if previous == tab:
            return
        state.active_tab = tab
        self.event_bus.emit(EVENT_TAB_CHANGED, previous_tab=previous, new_tab=tab)

    @staticmethod
    def _coerce_tab(value) -> AppTab | None:
        if isinstance(value, AppTab):
            return value
        try:
            return AppTab(value)
        except ValueError:
            return None
