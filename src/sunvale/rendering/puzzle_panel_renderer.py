from __future__ import annotations

from typing import TYPE_CHECKING

from sunvale.components.widgets import WidgetAction
from sunvale.rendering.primitives import draw_button, draw_panel, draw_section_title, draw_swatch
from sunvale.ui.layout import swatch_in_card

if TYPE_CHECKING:
    from sunvale.rendering.context import RenderContext

# Greyed-out overlay drawn over the inventory while it cannot be edited.
DISABLED_OVERLAY_ALPHA = 140


class PuzzlePanelRenderer:
    """Draws the target picker, slot row, inventory grid and action buttons."""

    def render(self, arcade, ctx: RenderContext) -> None:
        layout = ctx.layout
        puzzle = ctx.puzzle
        if puzzle is None or layout.controls_bounds is None:
            return
        colors = ctx.colors
        palette = ctx.palette
        draw_panel(arcade, layout.controls_bounds, colors)

        # Target
        draw_section_title(arcade, "Target Color", layout.titles["target"], colors)
        if layout.target_swatch is not None:
            draw_swatch(arcade, layout.target_swatch, palette.swatch_for(puzzle.target), colors)
            left, bottom, width, height = layout.target_swatch
            arcade.draw_text(
                puzzle.target,
                left + width + 14,
                bottom + height / 2,
                colors.text,
                16,
                anchor_y="center",
            )

        # Slots
        draw_section_title(arcade, "Slots", layout.titles["slots"], colors)
        for index, card in enumerate(layout.slot_cards):
            if index >= len(puzzle.slots):
                break
            name = puzzle.slots[index]
            left, bottom, width, height = card
            arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, colors.panel_border, border_width=1)
            arcade.draw_text(
                f"Slot {index + 1}",
                left + width / 2,
                bottom + height - 16,
                colors.muted_text,
                12,
                anchor_x="center",
                anchor_y="center",
            )
            draw_swatch(arcade, swatch_in_card(card), palette.swatch_for(name), colors)

        # Inventory
        draw_section_title(arcade, "Inventory", layout.titles["inventory"], colors)
        inventory = ctx.inventory
        for color_value, item in layout.inventory_items:
            left, bottom, width, height = item
            try:
                fill = palette.swatch_for(palette.name_of(color_value))
            except KeyError:
                fill = colors.button_disabled
            draw_swatch(arcade, swatch_in_card(item), fill, colors)
            count = inventory.count_for(color_value) if inventory is not None else 0
            arcade.draw_text(
                str(count),
                left + width / 2,
                bottom + height - 14,
                colors.text,
                14,
                anchor_x="center",
                anchor_y="center",
            )
            if inventory is not None and not inventory.editable:
                arcade.draw_lbwh_rectangle_filled(
                    left, bottom, width, height, (*colors.panel, DISABLED_OVERLAY_ALPHA)
                )

        for action in (WidgetAction.ADD_SLOT, WidgetAction.REMOVE_SLOT, WidgetAction.RANDOMIZE):
            for widget in layout.widgets_for(action):
                draw_button(arcade, widget, colors)
        for widget in layout.widgets_for(WidgetAction.SOLVE):
            draw_button(arcade, widget, colors, highlighted=True)
