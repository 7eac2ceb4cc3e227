from __future__ import annotations

import json
import logging
from pathlib import Path

from esper import World

from sunvale.components.app_state import AppState, Theme
from sunvale.constants import DATA_DIR, THEME_PREFERENCE_FILE
from sunvale.events.bus import EVENT_THEME_CHANGED, EVENT_THEME_TOGGLE_REQUEST, EventBus
from sunvale.utils.lookup import get_app_state

logger = logging.getLogger(__name__)


class ThemePreferenceSystem:
    """Toggles the night/light theme and persists the choice across sessions."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        save_path: Path | None = None,
        load_existing: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._save_path = Path(save_path) if save_path is not None else self._default_save_path()
        self._state_entity = self._ensure_state_entity()

        self.event_bus.subscribe(EVENT_THEME_TOGGLE_REQUEST, self._on_toggle_request)

        if load_existing:
            self.load_preference()
        else:
            self.save_preference()

    @staticmethod
    def _default_save_path() -> Path:
        return DATA_DIR / THEME_PREFERENCE_FILE

    @property
    def save_path(self) -> Path:
        return self._save_path

    def _ensure_state_entity(self) -> int:
        existing = list(self.world.get_component(AppState))
        if existing:
            return existing[0][0]
        return self.world.create_entity(AppState())

    def _state(self) -> AppState:
        return self.world.component_for_entity(self._state_entity, AppState)

    @property
    def theme(self) -> Theme:
        return self._state().theme

    def load_preference(self) -> None:
        state = self._state()
        try:
            with self._save_path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            state.theme = Theme.NIGHT
            self.save_preference()
            return
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Theme preference at %s is unreadable; resetting", self._save_path)
            state.theme = Theme.NIGHT
            self.save_preference()
            return
        stored = payload.get("theme") if isinstance(payload, dict) else None
        try:
            state.theme = Theme(stored)
        except ValueError:
            logger.warning("Unknown stored theme %r; using night", stored)
            state.theme = Theme.NIGHT

    def save_preference(self) -> None:
        state = self._state()
        self._save_path.parent.mkdir(parents=True, exist_ok=True)
        with self._save_path.open("w", encoding="utf-8") as handle:
            json.dump({"theme": state.theme.value}, handle, indent=2)

    # Event handlers -----------------------------------------------------

    def _on_toggle_request(self, sender, **payload) -> None:
        state = self._state()
        previous = state.theme
        state.theme = previous.toggled()
        self.save_preference()
        logger.info("Theme switched to %s", state.theme.value)
        self.event_bus.emit(EVENT_THEME_CHANGED, previous_theme=previous, new_theme=state.theme)
