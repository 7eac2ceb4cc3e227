from dataclasses import dataclass, field
from typing import Dict, List

from sunvale.components.colors import ColorValue
from sunvale.constants import DEFAULT_INVENTORY_COUNT, INVENTORY_EDITABLE


@dataclass(slots=True)
class PuzzleState:
    """Target color and slot colors, stored by color name.

    slots always holds at least one entry; PuzzleSystem enforces the minimum.
    """
    target: str
    slots: List[str] = field(default_factory=list)


def default_inventory_counts() -> Dict[int, int]:
    return {int(color): DEFAULT_INVENTORY_COUNT for color in ColorValue}


@dataclass(slots=True)
class Inventory:
    """Pieces available to the solver, keyed by color value.

    Counts gate which colors the solver may try but are never spent.
    """
    counts: Dict[int, int] = field(default_factory=default_inventory_counts)
    editable: bool = INVENTORY_EDITABLE

    def count_for(self, color_value: int) -> int:
        return self.counts.get(int(color_value), 0)

    def set_count(self, color_value: int, count: int) -> None:
        self.counts[int(color_value)] = max(0, int(count))
