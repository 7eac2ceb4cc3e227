from __future__ import annotations

from typing import Any

from sunvale.events.bus import (
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_PRESS_RAW,
    EventBus,
)
from sunvale.utils.input_throttle import MouseThrottle


def _press_coordinates(payload: dict[str, Any]) -> tuple[float, float, int] | None:
    try:
        return float(payload["x"]), float(payload["y"]), int(payload["button"])
    except (KeyError, TypeError, ValueError):
        return None


class MouseThrottleSystem:
    """Forwards raw window presses as EVENT_MOUSE_PRESS, dropping double clicks.

    Double-clicking a swatch would otherwise cycle its color twice.
    """

    def __init__(self, event_bus: EventBus, *, throttle: MouseThrottle | None = None) -> None:
        self.event_bus = event_bus
        self.throttle = throttle or MouseThrottle()
        self.event_bus.subscribe(EVENT_MOUSE_PRESS_RAW, self.on_mouse_press_raw)

    def on_mouse_press_raw(self, sender: Any, **payload: Any) -> None:
        press = _press_coordinates(payload)
        if press is None:
            return
        x, y, button = press
        if not self.throttle.allow(x, y, button):
            return
        self.event_bus.emit(
            EVENT_MOUSE_PRESS,
            x=x,
            y=y,
            button=button,
            modifiers=payload.get("modifiers", 0),
            press_id=self.throttle.last_sequence,
        )
