from __future__ import annotations

from typing import TYPE_CHECKING

from sunvale.components.app_state import Theme
from sunvale.components.widgets import WidgetAction
from sunvale.constants import TAB_BAR_HEIGHT
from sunvale.rendering.primitives import draw_button

if TYPE_CHECKING:
    from sunvale.rendering.context import RenderContext


class TabBarRenderer:
    """Draws the tab strip and the theme toggle along the top edge."""

    def render(self, arcade, ctx: RenderContext) -> None:
        colors = ctx.colors
        arcade.draw_lbwh_rectangle_filled(
            0,
            ctx.window_height - TAB_BAR_HEIGHT,
            ctx.window_width,
            TAB_BAR_HEIGHT,
            colors.panel,
        )
        for widget in ctx.layout.widgets_for(WidgetAction.SELECT_TAB):
            draw_button(arcade, widget, colors, highlighted=widget.argument == ctx.app_state.active_tab)
        for widget in ctx.layout.widgets_for(WidgetAction.TOGGLE_THEME):
            widget.label = theme_button_label(ctx)
            draw_button(arcade, widget, colors)


def theme_button_label(ctx: RenderContext) -> str:
    # The button offers the theme you would switch to.
    return "Light" if ctx.app_state.theme is Theme.NIGHT else "Night"
