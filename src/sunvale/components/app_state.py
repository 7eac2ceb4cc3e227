"""Application shell state: which tab is open and which theme is active."""
from dataclasses import dataclass
from enum import Enum


class AppTab(Enum):
    COLOR_PUZZLE = "color_puzzle"
    CARTOGRAPHY_PARSER = "cartography_parser"

    @property
    def label(self) -> str:
        return TAB_LABELS[self]

    @property
    def enabled(self) -> bool:
        return self is not AppTab.CARTOGRAPHY_PARSER


TAB_LABELS = {
    AppTab.COLOR_PUZZLE: "Sun Vale Color Puzzle",
    AppTab.CARTOGRAPHY_PARSER: "Treasure Cartography Parser",
}


class Theme(Enum):
    NIGHT = "night"
    LIGHT = "light"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.NIGHT else Theme.NIGHT


@dataclass
class AppState:
    """Singleton component storing the active tab and theme."""
    active_tab: AppTab = AppTab.COLOR_PUZZLE
    theme: Theme = Theme.NIGHT
