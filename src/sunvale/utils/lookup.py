from __future__ import annotations

from esper import World

from sunvale.components.app_state import AppState
from sunvale.components.colors import ColorPalette, ColorPaletteRegistry
from sunvale.components.puzzle import Inventory, PuzzleState
from sunvale.components.solution_state import SolutionState


def get_palette(world: World) -> ColorPalette:
    for entity, _ in world.get_component(ColorPaletteRegistry):
        return world.component_for_entity(entity, ColorPalette)
    raise RuntimeError("ColorPalette definitions not found")


def get_puzzle_entity(world: World) -> int | None:
    for entity, _ in world.get_component(PuzzleState):
        return entity
    return None


def get_puzzle_state(world: World) -> PuzzleState | None:
    for _, state in world.get_component(PuzzleState):
        return state
    return None


def get_inventory(world: World) -> Inventory | None:
    for _, inventory in world.get_component(Inventory):
        return inventory
    return None


def get_solution_state(world: World) -> SolutionState | None:
    for _, solution in world.get_component(SolutionState):
        return solution
    return None


def get_app_state(world: World) -> AppState | None:
    for _, state in world.get_component(AppState):
        return state
    return None
