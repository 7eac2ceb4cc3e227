from dataclasses import dataclass
from typing import Dict, Tuple

from sunvale.components.app_state import Theme

RGB = Tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class ThemeColors:
    background: RGB
    panel: RGB
    panel_border: RGB
    text: RGB
    muted_text: RGB
    accent: RGB
    button: RGB
    button_text: RGB
    button_disabled: RGB
    swatch_outline: RGB


THEMES: Dict[Theme, ThemeColors] = {
    Theme.NIGHT: ThemeColors(
        background=(15, 17, 26),       # #0F111A
        panel=(28, 32, 48),            # #1C2030
        panel_border=(70, 78, 104),
        text=(236, 238, 245),
        muted_text=(150, 156, 176),
        accent=(245, 176, 66),         # sun gold
        button=(59, 68, 110),
        button_text=(255, 255, 255),
        button_disabled=(48, 52, 66),
        swatch_outline=(200, 204, 220),
    ),
    Theme.LIGHT: ThemeColors(
        background=(246, 244, 238),    # #F6F4EE
        panel=(255, 255, 255),
        panel_border=(210, 205, 190),
        text=(32, 30, 26),
        muted_text=(120, 116, 104),
        accent=(214, 128, 20),
        button=(236, 200, 120),
        button_text=(32, 30, 26),
        button_disabled=(222, 220, 214),
        swatch_outline=(60, 56, 48),
    ),
}


def colors_for(theme: Theme) -> ThemeColors:
    return THEMES.get(theme, THEMES[Theme.NIGHT])
