from esper import World

from sunvale.components.widgets import Widget
from sunvale.events.bus import (
    EVENT_PUZZLE_CHANGED,
    EVENT_TAB_CHANGED,
    EVENT_THEME_CHANGED,
    EventBus,
)
from sunvale.rendering.context import RenderContext, build_render_context
from sunvale.rendering.puzzle_panel_renderer import PuzzlePanelRenderer
from sunvale.rendering.solution_panel_renderer import SolutionPanelRenderer
from sunvale.rendering.tab_bar_renderer import TabBarRenderer
from sunvale.ui.layout import PageLayout


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        # Context holds live component references; only the layout shape and theme colors go stale.
        self.event_bus.subscribe(EVENT_PUZZLE_CHANGED, self._invalidate)
        self.event_bus.subscribe(EVENT_TAB_CHANGED, self._invalidate)
        self.event_bus.subscribe(EVENT_THEME_CHANGED, self._invalidate)
        self._ctx: RenderContext | None = None
        self._last_window_size = (self.window.width, self.window.height)
        self._tab_bar_renderer = TabBarRenderer()
        self._puzzle_panel_renderer = PuzzlePanelRenderer()
        self._solution_panel_renderer = SolutionPanelRenderer()

    def notify_resize(self, width: int, height: int):
        self._last_window_size = (width, height)
        self._ctx = None

    def _invalidate(self, sender, **kwargs):
        self._ctx = None

    def layout(self) -> PageLayout:
        return self._context().layout

    def widget_at(self, x: float, y: float) -> Widget | None:
        return self.layout().widget_at(x, y)

    def _context(self) -> RenderContext:
        size = (self.window.width, self.window.height)
        if self._ctx is None or size != self._last_window_size:
            self._last_window_size = size
            self._ctx = build_render_context(self.world, *size)
        return self._ctx

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Without an active Arcade window (unit tests) only the layout cache is rebuilt.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        ctx = self._context()
        if headless:
            return
        arcade.draw_lrbt_rectangle_filled(0, ctx.window_width, 0, ctx.window_height, ctx.colors.background)
        self._tab_bar_renderer.render(arcade, ctx)
        self._puzzle_panel_renderer.render(arcade, ctx)
        self._solution_panel_renderer.render(arcade, ctx)
