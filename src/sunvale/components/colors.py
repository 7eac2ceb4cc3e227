from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Tuple


class ColorValue(IntEnum):
    """Puzzle colors and the integer each one contributes when placed."""
    RED = 1
    ORANGE = 2
    YELLOW = 3
    GREEN = 4
    BLUE = 5
    VIOLET = 6
    WHITE = 7
    BLACK = 8

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


COLOR_HEX: Dict[str, str] = {
    "Red": "#ef4444",
    "Orange": "#f59e42",
    "Yellow": "#fde047",
    "Green": "#22c55e",
    "Blue": "#3b82f6",
    "Violet": "#a78bfa",
    "White": "#f9fafb",
    "Black": "#18181b",
}


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    code = hex_code.lstrip("#")
    if len(code) != 6:
        raise ValueError(f"Expected #rrggbb, got {hex_code!r}")
    return int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16)


@dataclass(slots=True)
class ColorPaletteRegistry:
    """Tag component marking the single entity that stores the ColorPalette."""
    pass


@dataclass(slots=True)
class ColorPalette:
    """Canonical name <-> value mapping plus the swatch used to draw each color.

    Names keep enumeration order, which is also the order the solver scans
    the default inventory in.
    """
    values: Dict[str, ColorValue] = field(
        default_factory=lambda: {color.display_name: color for color in ColorValue}
    )
    swatches: Dict[str, Tuple[int, int, int]] = field(
        default_factory=lambda: {name: hex_to_rgb(code) for name, code in COLOR_HEX.items()}
    )

    def names(self) -> List[str]:
        return list(self.values.keys())

    def value_of(self, name: str) -> ColorValue:
        return self.values[name]

    def name_of(self, value: int) -> str:
        for name, color in self.values.items():
            if color == value:
                return name
        raise KeyError(value)

    def swatch_for(self, name: str) -> Tuple[int, int, int]:
        return self.swatches[name]

    def is_known(self, name) -> bool:
        return isinstance(name, str) and name in self.values

    def step(self, name: str, step: int) -> str:
        """Return the color ``step`` positions away from ``name``, wrapping around."""
        names = self.names()
        index = names.index(name)
        return names[(index + step) % len(names)]
