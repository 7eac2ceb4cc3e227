"""Components describing clickable widgets on the puzzle page."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

Bounds = Tuple[float, float, float, float]


class WidgetAction(Enum):
    """Actions a widget triggers when clicked."""
    SELECT_TAB = auto()
    TOGGLE_THEME = auto()
    CYCLE_TARGET = auto()
    CYCLE_SLOT = auto()
    ADD_SLOT = auto()
    REMOVE_SLOT = auto()
    RANDOMIZE = auto()
    SOLVE = auto()
    EDIT_INVENTORY = auto()


@dataclass(slots=True)
class Widget:
    """Hit region produced by the page layout.

    ``argument`` carries the slot index, tab or color value the action
    applies to.
    """
    action: WidgetAction
    bounds: Bounds
    label: str = ""
    argument: object = None
    enabled: bool = True

    def contains(self, x: float, y: float) -> bool:
        left, bottom, width, height = self.bounds
        return left <= x <= left + width and bottom <= y <= bottom + height
