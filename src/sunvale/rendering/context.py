from __future__ import annotations

from dataclasses import dataclass

from esper import World

from sunvale.components.app_state import AppState, AppTab, Theme
from sunvale.components.colors import ColorPalette
from sunvale.components.puzzle import Inventory, PuzzleState
from sunvale.components.solution_state import SolutionState
from sunvale.ui.layout import PageLayout, compute_page_layout
from sunvale.ui.themes import ThemeColors, colors_for
from sunvale.utils.lookup import (
    get_app_state,
    get_inventory,
    get_palette,
    get_puzzle_state,
    get_solution_state,
)


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    world: World
    window_width: int
    window_height: int
    layout: PageLayout
    app_state: AppState
    colors: ThemeColors
    palette: ColorPalette
    puzzle: PuzzleState | None
    inventory: Inventory | None
    solution: SolutionState | None


def build_render_context(world: World, window_width: int, window_height: int) -> RenderContext:
    """Collect world state and compute the page layout for the current frame."""

    app_state = get_app_state(world) or AppState(active_tab=AppTab.COLOR_PUZZLE, theme=Theme.NIGHT)
    puzzle = get_puzzle_state(world)
    inventory = get_inventory(world)
    layout = compute_page_layout(
        window_width,
        window_height,
        active_tab=app_state.active_tab,
        slot_count=len(puzzle.slots) if puzzle is not None else 0,
        inventory_values=list(inventory.counts.keys()) if inventory is not None else [],
        inventory_editable=bool(inventory and inventory.editable),
    )
    return RenderContext(
        world=world,
        window_width=window_width,
        window_height=window_height,
        layout=layout,
        app_state=app_state,
        colors=colors_for(app_state.theme),
        palette=get_palette(world),
        puzzle=puzzle,
        inventory=inventory,
        solution=get_solution_state(world),
    )
