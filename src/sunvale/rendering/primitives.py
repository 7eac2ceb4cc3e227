"""Small drawing helpers shared by the page renderers."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sunvale.components.widgets import Bounds, Widget
    from sunvale.ui.themes import ThemeColors


def draw_panel(arcade, bounds: "Bounds", colors: "ThemeColors") -> None:
    left, bottom, width, height = bounds
    arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, colors.panel)
    arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, colors.panel_border, border_width=2)


def draw_button(arcade, widget: "Widget", colors: "ThemeColors", *, highlighted: bool = False) -> None:
    left, bottom, width, height = widget.bounds
    fill = colors.button if widget.enabled else colors.button_disabled
    if highlighted:
        fill = colors.accent
    text_color = colors.button_text if widget.enabled else colors.muted_text
    arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, fill)
    arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, colors.panel_border, border_width=1)
    arcade.draw_text(
        widget.label,
        left + width / 2,
        bottom + height / 2,
        text_color,
        14,
        anchor_x="center",
        anchor_y="center",
        bold=highlighted,
    )


def draw_swatch(arcade, bounds: "Bounds", fill, colors: "ThemeColors") -> None:
    left, bottom, width, height = bounds
    arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, fill)
    arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, colors.swatch_outline, border_width=1)


def draw_section_title(arcade, text: str, anchor, colors: "ThemeColors") -> None:
    left, baseline = anchor
    arcade.draw_text(text, left, baseline, colors.text, 18, bold=True)
