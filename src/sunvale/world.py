import random

from esper import World
from .events.bus import EventBus
from sunvale.components.app_state import AppState, AppTab, Theme
from sunvale.components.colors import ColorPalette, ColorPaletteRegistry
from sunvale.components.puzzle import Inventory, PuzzleState
from sunvale.components.solution_state import SolutionState
from sunvale.constants import DEFAULT_SLOT_COUNT, INVENTORY_EDITABLE, MIN_SLOT_COUNT


def create_world(
    event_bus: EventBus,
    *,
    slot_count: int = DEFAULT_SLOT_COUNT,
    slots: list[str] | None = None,
    target: str | None = None,
    inventory_editable: bool = INVENTORY_EDITABLE,
    theme: Theme = Theme.NIGHT,
    rng: random.Random | None = None,
) -> World:
    """Build the world with the palette, puzzle, inventory and app shell entities.

    Slots and target are drawn at random from the palette unless given.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register or update the global app state resource.
    state_entity = world.create_entity()
    world.add_component(state_entity, AppState(active_tab=AppTab.COLOR_PUZZLE, theme=theme))

    palette = ColorPalette()
    world.create_entity(ColorPaletteRegistry(), palette)

    names = palette.names()
    if slots is None:
        count = max(MIN_SLOT_COUNT, int(slot_count))
        slots = [world.random.choice(names) for _ in range(count)]
    else:
        slots = list(slots)
        if len(slots) < MIN_SLOT_COUNT:
            raise ValueError("A puzzle needs at least one slot")
        unknown = [name for name in slots if not palette.is_known(name)]
        if unknown:
            raise ValueError(f"Unknown slot colors {unknown!r}")
    if target is None:
        target = world.random.choice(names)
    elif not palette.is_known(target):
        raise ValueError(f"Unknown target color {target!r}")

    world.create_entity(
        PuzzleState(target=target, slots=list(slots)),
        Inventory(editable=inventory_editable),
        SolutionState(),
    )
    return world
