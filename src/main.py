"""Entry point for the Sun Vale color puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run
from sunvale.world import create_world
from sunvale.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from sunvale.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS_RAW, EventBus
from sunvale.systems.input import InputSystem
from sunvale.systems.mouse_throttle_system import MouseThrottleSystem
from sunvale.systems.navigation_system import NavigationSystem
from sunvale.systems.puzzle_system import PuzzleSystem
from sunvale.systems.render import RenderSystem
from sunvale.systems.solve_system import SolveSystem
from sunvale.systems.theme_preference_system import ThemePreferenceSystem


class SunValeWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.mouse_throttle_system = MouseThrottleSystem(self.event_bus)
        self.world = create_world(self.event_bus)

        # Shell systems
        self.theme_preference_system = ThemePreferenceSystem(self.world, self.event_bus)
        self.navigation_system = NavigationSystem(self.world, self.event_bus)

        # Puzzle systems
        self.puzzle_system = PuzzleSystem(self.world, self.event_bus)
        self.solve_system = SolveSystem(self.world, self.event_bus)

        # Interface systems
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)

    def on_resize(self, width: int, height: int):
        self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(
            EVENT_MOUSE_PRESS_RAW,
            x=x,
            y=y,
            button=button,
            modifiers=modifiers,
        )

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = SunValeWindow()
    run()

if __name__ == "__main__":
    main()
