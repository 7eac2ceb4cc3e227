import pytest

from sunvale.components.app_state import AppTab, Theme
from sunvale.components.widgets import WidgetAction
from sunvale.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TAB_SELECT_REQUEST
from sunvale.systems.input import (
    KEY_A,
    KEY_ENTER,
    KEY_N,
    KEY_R,
    KEY_S,
    KEY_T,
    KEY_TAB,
    MOUSE_BUTTON_LEFT,
    MOUSE_BUTTON_RIGHT,
    InputSystem,
)
from sunvale.rendering.context import build_render_context
from sunvale.systems.navigation_system import NavigationSystem
from sunvale.systems.puzzle_system import PuzzleSystem
from sunvale.systems.render import RenderSystem
from sunvale.systems.solve_system import SolveSystem
from sunvale.systems.theme_preference_system import ThemePreferenceSystem
from sunvale.utils.lookup import get_app_state, get_inventory, get_puzzle_state, get_solution_state
from tests.helpers import DummyWindow, center_of, make_world


@pytest.fixture
def setup_page(tmp_path):
    bus, world = make_world(["Red", "Blue"], "Green")
    window = DummyWindow()
    render = RenderSystem(world, bus, window)
    # Attach render_system to the window so input uses the cached layout
    setattr(window, 'render_system', render)
    PuzzleSystem(world, bus)
    SolveSystem(world, bus)
    NavigationSystem(world, bus)
    ThemePreferenceSystem(world, bus, save_path=tmp_path / "theme.json", load_existing=False)
    InputSystem(bus, window, world)
    return bus, world, render


def click(bus, render, action, index=0, button=MOUSE_BUTTON_LEFT):
    widget = render.layout().widgets_for(action)[index]
    x, y = center_of(widget.bounds)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def test_click_solve_runs_solver(setup_page):
    bus, world, render = setup_page
    click(bus, render, WidgetAction.SOLVE)
    solution = get_solution_state(world)
    assert solution.has_solved
    # Blue(5) + White(7) = 12 -> 4 with carry; Red + 1 = 2, then 2 + Orange(2) = 4.
    assert solution.lines == ["Slot 2: White", "Slot 1: Orange"]


def test_left_and_right_click_cycle_slot(setup_page):
    bus, world, render = setup_page
    click(bus, render, WidgetAction.CYCLE_SLOT, index=1)
    assert get_puzzle_state(world).slots == ["Red", "Violet"]
    click(bus, render, WidgetAction.CYCLE_SLOT, index=1, button=MOUSE_BUTTON_RIGHT)
    assert get_puzzle_state(world).slots == ["Red", "Blue"]


def test_click_target_cycles_target(setup_page):
    bus, world, render = setup_page
    click(bus, render, WidgetAction.CYCLE_TARGET)
    assert get_puzzle_state(world).target == "Blue"


def test_add_then_remove_slot_updates_layout(setup_page):
    bus, world, render = setup_page
    click(bus, render, WidgetAction.ADD_SLOT)
    assert get_puzzle_state(world).slots == ["Red", "Blue", "Black"]
    assert len(render.layout().slot_cards) == 3
    click(bus, render, WidgetAction.REMOVE_SLOT)
    click(bus, render, WidgetAction.REMOVE_SLOT)
    assert get_puzzle_state(world).slots == ["Red"]
    assert render.layout().widgets_for(WidgetAction.REMOVE_SLOT) == []


def test_disabled_inventory_click_is_ignored(setup_page):
    bus, world, render = setup_page
    click(bus, render, WidgetAction.EDIT_INVENTORY, index=2)
    assert get_inventory(world).count_for(3) == 10


def test_disabled_tab_click_is_ignored(setup_page):
    bus, world, render = setup_page
    requests = []
    bus.subscribe(EVENT_TAB_SELECT_REQUEST, lambda s, **k: requests.append(k))
    click(bus, render, WidgetAction.SELECT_TAB, index=1)
    assert requests == []
    assert get_app_state(world).active_tab == AppTab.COLOR_PUZZLE


def test_theme_button_toggles_theme(setup_page):
    bus, world, render = setup_page
    click(bus, render, WidgetAction.TOGGLE_THEME)
    assert get_app_state(world).theme == Theme.LIGHT


def test_middle_button_does_nothing(setup_page):
    bus, world, render = setup_page
    click(bus, render, WidgetAction.SOLVE, button=2)
    assert not get_solution_state(world).has_solved


def test_keyboard_shortcuts(setup_page):
    bus, world, _ = setup_page
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_A, modifiers=0)
    assert len(get_puzzle_state(world).slots) == 3
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_R, modifiers=0)
    assert len(get_puzzle_state(world).slots) == 2
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_S, modifiers=0)
    assert get_solution_state(world).has_solved
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_T, modifiers=0)
    assert get_app_state(world).theme == Theme.LIGHT
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_N, modifiers=0)
    assert len(get_puzzle_state(world).slots) == 2
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_TAB, modifiers=0)
    assert get_app_state(world).active_tab == AppTab.COLOR_PUZZLE


def test_enter_solves(setup_page):
    bus, world, _ = setup_page
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_ENTER, modifiers=0)
    assert get_solution_state(world).lines == ["Slot 2: White", "Slot 1: Orange"]


def test_inventory_click_edits_when_editable():
    bus, world = make_world(["Red"], "Green", inventory_editable=True)
    window = DummyWindow()
    PuzzleSystem(world, bus)
    InputSystem(bus, window, world)
    layout = build_render_context(world, window.width, window.height).layout
    widget = layout.widgets_for(WidgetAction.EDIT_INVENTORY)[0]
    x, y = center_of(widget.bounds)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=MOUSE_BUTTON_RIGHT)
    assert get_inventory(world).count_for(1) == 9
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=MOUSE_BUTTON_LEFT)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=MOUSE_BUTTON_LEFT)
    assert get_inventory(world).count_for(1) == 11
